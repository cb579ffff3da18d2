"""Paper roll grid: rolls a forklift can reach, and how many can be cleared."""

ROLL = "@"
MAX_NEIGHBOURS = 4

_OFFSETS = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1), (0, 1),
    (1, -1), (1, 0), (1, 1),
)


def parse_rolls(text):
    """One list per line, True where a roll of paper stands."""
    return [[ch == ROLL for ch in line] for line in text.splitlines()]


def _neighbour_rolls(grid, row, col):
    count = 0
    for d_row, d_col in _OFFSETS:
        r, c = row + d_row, col + d_col
        if 0 <= r < len(grid) and 0 <= c < len(grid[r]) and grid[r][c]:
            count += 1
    return count


def _accessible(grid):
    for r, cells in enumerate(grid):
        for c, is_roll in enumerate(cells):
            if is_roll and _neighbour_rolls(grid, r, c) < MAX_NEIGHBOURS:
                yield r, c


def accessible_rolls(grid):
    """Number of rolls with fewer than four rolls around them."""
    return sum(1 for _ in _accessible(grid))


def count_removable(grid):
    """Total rolls removed by repeatedly clearing every accessible roll."""
    cells = [list(row) for row in grid]
    total = 0
    while True:
        removable = list(_accessible(cells))
        if not removable:
            return total
        for r, c in removable:
            cells[r][c] = False
        total += len(removable)


def part_one(text):
    return accessible_rolls(parse_rolls(text))


def part_two(text):
    return count_removable(parse_rolls(text))