"""Towel patterns: which designs can be built, and in how many ways."""

from functools import lru_cache


def parse_towels(text):
    """Patterns from the first line; designs from the third line on."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("no towel patterns in input")
    patterns = lines[0].split(", ")
    designs = lines[2:]
    return patterns, designs


def _usable(patterns):
    return tuple(pattern for pattern in patterns if pattern)


def is_design_possible(design, patterns):
    """True if the design is a concatenation of available patterns."""
    usable = _usable(patterns)

    @lru_cache(maxsize=None)
    def possible_from(index):
        if index >= len(design):
            return True
        return any(
            design.startswith(pattern, index) and possible_from(index + len(pattern))
            for pattern in usable
        )

    return possible_from(0)


def count_arrangements(design, patterns):
    """Number of distinct pattern sequences that spell the design."""
    usable = _usable(patterns)

    @lru_cache(maxsize=None)
    def count_from(index):
        if index >= len(design):
            return 1
        return sum(
            count_from(index + len(pattern))
            for pattern in usable
            if design.startswith(pattern, index)
        )

    return count_from(0)


def part_one(text):
    patterns, designs = parse_towels(text)
    return sum(is_design_possible(design, patterns) for design in designs)


def part_two(text):
    patterns, designs = parse_towels(text)
    return sum(count_arrangements(design, patterns) for design in designs)