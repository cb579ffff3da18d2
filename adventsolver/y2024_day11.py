"""Plutonian pebbles: counting stones after repeated blinks."""

from functools import lru_cache


def parse_stones(text):
    """Stone numbers from the last line of the input."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("no stones in input")
    stones = [int(value) for value in lines[-1].split()]
    if any(stone < 0 for stone in stones):
        raise ValueError("stone numbers must not be negative")
    return stones


def digit_count(n):
    """Number of decimal digits of a non-negative integer."""
    if n < 0:
        raise ValueError("digit_count needs a non-negative integer")
    return len(str(n))


@lru_cache(maxsize=None)
def count_stones(stone, blinks):
    """How many stones a single stone turns into after the given blinks."""
    if blinks == 0:
        return 1
    if stone == 0:
        return count_stones(1, blinks - 1)
    digits = digit_count(stone)
    if digits % 2 == 0:
        left, right = divmod(stone, 10 ** (digits // 2))
        return count_stones(right, blinks - 1) + count_stones(left, blinks - 1)
    return count_stones(stone * 2024, blinks - 1)


def count_all(stones, blinks):
    return sum(count_stones(stone, blinks) for stone in stones)


def part_one(text):
    return count_all(parse_stones(text), 25)


def part_two(text):
    return count_all(parse_stones(text), 75)