"""Reactor reports: level safety with and without the problem dampener."""

MIN_LEVEL_DIFF = 1
MAX_LEVEL_DIFF = 3


def parse_reports(text):
    """One list of integer levels per line."""
    return [[int(value) for value in line.split()] for line in text.splitlines()]


def is_safe(levels):
    """True if the levels move in one direction by steps of 1 to 3."""
    if len(levels) < 2:
        raise ValueError("a report needs at least two levels")
    descending = levels[0] > levels[1]
    for a, b in zip(levels, levels[1:]):
        diff = a - b if descending else b - a
        if not MIN_LEVEL_DIFF <= diff <= MAX_LEVEL_DIFF:
            return False
    return True


def is_safe_with_dampener(levels):
    """True if the report is safe, or becomes safe with one level removed."""
    if is_safe(levels):
        return True
    return any(
        is_safe(levels[:skip] + levels[skip + 1:]) for skip in range(len(levels))
    )


def part_one(text):
    return sum(is_safe(levels) for levels in parse_reports(text))


def part_two(text):
    return sum(is_safe_with_dampener(levels) for levels in parse_reports(text))