"""Tachyon manifold: counting beam splits and quantum timelines."""

START = "S"
BEAM = "|"
EMPTY = "."
SPLITTER = "^"


def parse_manifold(text):
    """The manifold as a list of character lists."""
    return [list(line) for line in text.splitlines()]


def _simulate(grid):
    rows = [list(row) for row in grid]
    if len(rows) < 2:
        raise ValueError("manifold needs at least two rows")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("manifold rows must have equal width")
    try:
        start = rows[0].index(START)
    except ValueError:
        raise ValueError("manifold has no start") from None

    rows[1][start] = BEAM
    counts = [0] * width
    counts[start] = 1
    splits = 0

    for above, row in zip(rows[1:], rows[2:]):
        current = [0] * width
        for col, cell in enumerate(row):
            beam_above = above[col] == BEAM
            if cell == EMPTY:
                if beam_above:
                    row[col] = BEAM
                    current[col] += counts[col]
            elif cell == SPLITTER:
                if beam_above:
                    if col == 0 or col + 1 >= width:
                        raise ValueError("splitter beam leaves the manifold")
                    row[col - 1] = BEAM
                    row[col + 1] = BEAM
                    current[col - 1] += counts[col]
                    current[col + 1] += counts[col]
                    splits += 1
            elif cell == BEAM:
                if beam_above:
                    current[col] += counts[col]
            else:
                raise ValueError(f"unexpected character {cell!r}")
        counts = current

    return splits, sum(counts)


def count_splits(grid):
    """How many times the beam is split on its way down."""
    return _simulate(grid)[0]


def count_timelines(grid):
    """Number of distinct paths a single particle can take to the bottom."""
    return _simulate(grid)[1]


def part_one(text):
    return count_splits(parse_manifold(text))


def part_two(text):
    return count_timelines(parse_manifold(text))