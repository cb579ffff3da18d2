"""Claw machines: fewest tokens to win each prize, by Cramer's rule."""

import math
from dataclasses import dataclass, replace

A_COST = 3.0
PART_TWO_ADJUSTMENT = 10000000000000


def _determinant(v1, v2):
    return float(v1[0]) * float(v2[1]) - float(v1[1]) * float(v2[0])


@dataclass(frozen=True)
class ClawMachine:
    """Button A and B moves and the prize location, as (x, y) pairs."""

    a: tuple
    b: tuple
    prize: tuple

    def adjusted(self, offset):
        """The same machine with the prize moved by offset on both axes."""
        return replace(self, prize=(self.prize[0] + offset, self.prize[1] + offset))

    def count_tokens(self):
        """Token cost of the unique solution; NaN if the buttons are parallel."""
        d = _determinant(self.a, self.b)
        if d == 0:
            return math.nan
        d_a = _determinant(self.prize, self.b)
        d_b = _determinant(self.a, self.prize)
        return (d_a / d) * A_COST + (d_b / d)


def _number(part, delimiter):
    _, sep, value = part.partition(delimiter)
    if not sep:
        raise ValueError(f"missing {delimiter!r} in {part!r}")
    number = int(value)
    if number < 0:
        raise ValueError(f"negative coordinate in {part!r}")
    return number


def _coordinates(line, delimiter):
    _, sep, rest = line.partition(": ")
    x_part, sep_xy, y_part = rest.partition(", ")
    if not sep or not sep_xy:
        raise ValueError(f"invalid machine line: {line!r}")
    return (_number(x_part, delimiter), _number(y_part, delimiter))


def parse_machines(text):
    lines = [line for line in text.splitlines() if line]
    if len(lines) % 3:
        raise ValueError("each machine needs exactly three lines")
    it = iter(lines)
    return [
        ClawMachine(_coordinates(a, "+"), _coordinates(b, "+"), _coordinates(prize, "="))
        for a, b, prize in zip(it, it, it)
    ]


def total_tokens(text, prize_adjustment):
    """Sum of whole token costs over every winnable machine."""
    total = 0
    for machine in parse_machines(text):
        count = machine.adjusted(prize_adjustment).count_tokens()
        if math.isfinite(count) and count.is_integer():
            total += max(int(count), 0)
    return total


def part_one(text):
    return total_tokens(text, 0)


def part_two(text):
    return total_tokens(text, PART_TWO_ADJUSTMENT)