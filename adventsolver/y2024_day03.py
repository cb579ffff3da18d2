"""Corrupted memory: summing mul instructions, optionally gated by do/don't."""

import re

MUL_PATTERN = re.compile(r"mul\((\d{1,3}),(\d{1,3})\)")
TOKEN_PATTERN = re.compile(r"do\(\)|don't\(\)|mul\((\d{1,3}),(\d{1,3})\)")


def _product(match):
    return int(match.group(1)) * int(match.group(2))


def sum_multiplications(text):
    """Sum of every well-formed mul(a,b) product in the text."""
    return sum(_product(match) for match in MUL_PATTERN.finditer(text))


def sum_enabled_multiplications(text):
    """Sum of mul products, skipping those after don't() until the next do()."""
    total = 0
    enabled = True
    for match in TOKEN_PATTERN.finditer(text):
        token = match.group(0)
        if token == "do()":
            enabled = True
        elif token == "don't()":
            enabled = False
        elif enabled:
            total += _product(match)
    return total


def part_one(text):
    return sum(sum_multiplications(line) for line in text.splitlines())


def part_two(text):
    return sum_enabled_multiplications("".join(text.splitlines()))