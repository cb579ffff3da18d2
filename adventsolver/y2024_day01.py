"""Historian location lists: total distance and similarity score."""

from collections import Counter


def parse_lists(text):
    """Split the two columns of location ids into a left and a right list."""
    left, right = [], []
    for line in text.splitlines():
        parts = line.split()
        if len(parts) < 2:
            raise ValueError(f"expected two location ids, got {line!r}")
        left.append(int(parts[0]))
        right.append(int(parts[1]))
    return left, right


def total_distance(left, right):
    """Sum of distances between the lists once both are sorted."""
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def similarity_score(left, right):
    """Each left id weighted by how often it appears on the right."""
    counts = Counter(right)
    return sum(value * counts[value] for value in left)


def part_one(text):
    return total_distance(*parse_lists(text))


def part_two(text):
    return similarity_score(*parse_lists(text))