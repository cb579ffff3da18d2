"""Ingredient database: fresh ids and the size of the fresh id ranges."""


def parse_ingredients(text):
    """Inclusive (low, high) ranges, a blank line, then one id per line."""
    ranges, ids = [], []
    in_ids = False
    for line in text.splitlines():
        if not line:
            in_ids = True
        elif in_ids:
            ids.append(int(line))
        else:
            low, sep, high = line.partition("-")
            if not sep:
                raise ValueError(f"invalid id range: {line!r}")
            ranges.append((int(low), int(high)))
    return ranges, ids


def _in_range(value, low, high):
    return value == low or value == high or low < value < high


def count_fresh(ranges, ids):
    """Number of ids that fall inside at least one range."""
    return sum(
        any(_in_range(value, low, high) for low, high in ranges) for value in ids
    )


def merge_ranges(ranges):
    """Overlapping ranges merged together, sorted by lower bound."""
    merged = []
    for low, high in sorted(ranges, key=lambda item: item[0]):
        if merged and merged[-1][0] <= low <= merged[-1][1]:
            merged[-1] = (merged[-1][0], max(merged[-1][1], high))
        else:
            merged.append((low, high))
    return merged


def count_fresh_ids(ranges):
    """Number of distinct ids covered by the ranges."""
    return sum(high - low + 1 for low, high in merge_ranges(ranges))


def part_one(text):
    return count_fresh(*parse_ingredients(text))


def part_two(text):
    ranges, _ = parse_ingredients(text)
    return count_fresh_ids(ranges)