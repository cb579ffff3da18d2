"""Bridge calibration: which equations can be made true with +, * and ||."""

from dataclasses import dataclass


@dataclass
class CalibrationEquation:
    test_value: int
    numbers: list

    def is_valid(self, with_concat):
        """True if some left-to-right operator choice yields the test value."""
        values = {self.numbers[0]}
        for number in self.numbers[1:]:
            candidates = [value + number for value in values]
            candidates += [value * number for value in values]
            if with_concat:
                candidates += [concat_numbers(value, number) for value in values]
            values = {c for c in candidates if c <= self.test_value}
        return self.test_value in values


def parse_line(line):
    test_part, sep, numbers_part = line.partition(": ")
    if not sep:
        raise ValueError(f"invalid equation line: {line!r}")
    numbers = [int(value) for value in numbers_part.split()]
    if not numbers:
        raise ValueError(f"equation has no numbers: {line!r}")
    return CalibrationEquation(int(test_part), numbers)


def concat_numbers(a, b):
    """Digits of a followed by digits of b; a zero b leaves a unchanged."""
    factor = 10 ** len(str(b)) if b > 0 else 1
    return a * factor + b


def total_calibration(text, with_concat):
    """Sum of the test values of the equations that can be satisfied."""
    return sum(
        equation.test_value
        for equation in map(parse_line, text.splitlines())
        if equation.is_valid(with_concat)
    )


def part_one(text):
    return total_calibration(text, False)


def part_two(text):
    return total_calibration(text, True)