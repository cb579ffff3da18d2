import pytest

from adventsolver.y2024_day01 import (
    parse_lists,
    part_one,
    part_two,
    similarity_score,
    total_distance,
)

EXAMPLE = "3   4\n4   3\n2   5\n1   3\n3   9\n3   3\n"


def test_parse_lists_splits_columns():
    assert parse_lists(EXAMPLE) == ([3, 4, 2, 1, 3, 3], [4, 3, 5, 3, 9, 3])


def test_part_one_example():
    assert part_one(EXAMPLE) == 11


def test_part_two_example():
    assert part_two(EXAMPLE) == 31


def test_distance_to_itself_is_zero():
    values = [5, 1, 9, 3]
    assert total_distance(values, list(reversed(values))) == 0


def test_distance_is_symmetric():
    left, right = parse_lists(EXAMPLE)
    assert total_distance(left, right) == total_distance(right, left)


def test_similarity_ignores_right_order():
    left, right = parse_lists(EXAMPLE)
    assert similarity_score(left, right) == similarity_score(left, sorted(right))


def test_malformed_line_raises():
    with pytest.raises(ValueError):
        parse_lists("3 4\n5\n")


def test_non_numeric_raises():
    with pytest.raises(ValueError):
        parse_lists("a b\n")