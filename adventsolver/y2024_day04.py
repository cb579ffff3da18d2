"""Word search: counting XMAS in every direction and X-shaped MAS."""

_DIRECTIONS = (
    (0, 1), (0, -1), (1, 0), (-1, 0),
    (-1, 1), (-1, -1), (1, 1), (1, -1),
)

VALID_X_MAS_PATTERNS = frozenset({
    ("M", "S", "M", "S"),
    ("S", "S", "M", "M"),
    ("S", "M", "S", "M"),
    ("M", "M", "S", "S"),
})


def parse_grid(text):
    """The grid as a list of row strings."""
    return text.splitlines()


def _spells_mas(grid, row, col, d_row, d_col):
    for step, expected in enumerate("MAS", start=1):
        r, c = row + step * d_row, col + step * d_col
        if not (0 <= r < len(grid) and 0 <= c < len(grid[r])):
            return False
        if grid[r][c] != expected:
            return False
    return True


def count_xmas(grid):
    """Occurrences of XMAS read in any of the eight directions."""
    return sum(
        _spells_mas(grid, r, c, d_row, d_col)
        for r, row in enumerate(grid)
        for c, ch in enumerate(row)
        if ch == "X"
        for d_row, d_col in _DIRECTIONS
    )


def _is_x_mas(grid, r, c):
    if not (0 < r < len(grid) - 1 and 0 < c < len(grid[r]) - 1):
        return False
    corners = (grid[r - 1][c - 1], grid[r - 1][c + 1], grid[r + 1][c - 1], grid[r + 1][c + 1])
    return corners in VALID_X_MAS_PATTERNS


def count_x_mas(grid):
    """Number of 'A' cells at the centre of two crossing MAS diagonals."""
    return sum(
        _is_x_mas(grid, r, c)
        for r, row in enumerate(grid)
        for c, ch in enumerate(row)
        if ch == "A"
    )


def part_one(text):
    return count_xmas(parse_grid(text))


def part_two(text):
    return count_x_mas(parse_grid(text))