import pytest

from adventsolver.y2024_day07 import (
    CalibrationEquation,
    concat_numbers,
    parse_line,
    part_one,
    part_two,
    total_calibration,
)

EXAMPLE = """190: 10 19
3267: 81 40 27
83: 17 5
156: 15 6
7290: 6 8 6 15
161011: 16 10 13
192: 17 8 14
21037: 9 7 18 13
292: 11 6 16 20
"""


def test_parse_line():
    assert parse_line("190: 10 19") == CalibrationEquation(190, [10, 19])


def test_parse_line_invalid():
    with pytest.raises(ValueError):
        parse_line("bad")


def test_part_one_example():
    assert part_one(EXAMPLE) == 3749


def test_part_two_example():
    assert part_two(EXAMPLE) == 11387


def test_concat_numbers():
    assert concat_numbers(12, 345) == 12345


def test_concat_with_zero_keeps_left():
    assert concat_numbers(7, 0) == 7


def test_concat_equation_only_valid_with_concat():
    equation = parse_line("156: 15 6")
    assert equation.is_valid(False) is False
    assert equation.is_valid(True) is True


def test_valid_without_concat_implies_valid_with():
    for line in EXAMPLE.splitlines():
        equation = parse_line(line)
        if equation.is_valid(False):
            assert equation.is_valid(True)


def test_concat_total_not_smaller():
    assert total_calibration(EXAMPLE, True) >= total_calibration(EXAMPLE, False)