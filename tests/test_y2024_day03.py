from adventsolver.y2024_day03 import (
    part_one,
    part_two,
    sum_enabled_multiplications,
    sum_multiplications,
)

EXAMPLE_ONE = "xmul(2,4)%&mul[3,7]!@^do_not_mul(5,5)+mul(32,64]then(mul(11,8)mul(8,5))"
EXAMPLE_TWO = "xmul(2,4)&mul[3,7]!^don't()_mul(5,5)+mul(32,64](mul(11,8)undo()?mul(8,5))"


def test_part_one_example():
    assert part_one(EXAMPLE_ONE) == 161


def test_part_two_example():
    assert part_two(EXAMPLE_TWO) == 48


def test_numbers_longer_than_three_digits_ignored():
    assert sum_multiplications("mul(1234,5)") == 0


def test_without_dont_both_sums_agree():
    assert sum_enabled_multiplications(EXAMPLE_ONE) == sum_multiplications(EXAMPLE_ONE)


def test_enabled_sum_never_exceeds_total():
    assert sum_enabled_multiplications(EXAMPLE_TWO) <= sum_multiplications(EXAMPLE_TWO)


def test_part_two_joins_lines():
    text = "mul(2,\n3)"
    assert part_two(text) == sum_multiplications("mul(2,3)")
    assert part_one(text) == sum_multiplications("")