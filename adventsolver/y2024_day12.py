"""Garden plots: fence prices by perimeter and by number of sides."""


class Garden:
    """A rectangular grid of plant labels."""

    def __init__(self, rows):
        self.rows = list(rows)
        if not self.rows:
            raise ValueError("garden has no rows")

    def _label(self, row, col):
        if 0 <= row < len(self.rows) and 0 <= col < len(self.rows[row]):
            return self.rows[row][col]
        return None

    def _region(self, row, col):
        label = self.rows[row][col]
        region = {(row, col)}
        stack = [(row, col)]
        while stack:
            r, c = stack.pop()
            for cell in ((r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1)):
                if cell not in region and self._label(*cell) == label:
                    region.add(cell)
                    stack.append(cell)
        return region

    def _regions(self):
        seen = set()
        for r, row in enumerate(self.rows):
            for c in range(len(row)):
                if (r, c) not in seen:
                    region = self._region(r, c)
                    seen |= region
                    yield region

    def _perimeter(self, region):
        return sum(
            cell not in region
            for r, c in region
            for cell in ((r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1))
        )

    def _corners(self, region):
        corners = 0
        for r, c in region:
            label = self.rows[r][c]

            def same(dr, dc):
                return self._label(r + dr, c + dc) == label

            top, right, down, left = same(-1, 0), same(0, 1), same(1, 0), same(0, -1)
            corners += sum((
                top and right and not same(-1, 1),
                top and left and not same(-1, -1),
                down and right and not same(1, 1),
                down and left and not same(1, -1),
                not right and not top,
                not right and not down,
                not left and not top,
                not left and not down,
            ))
        return corners

    def fences_price(self):
        """Sum over regions of area times perimeter."""
        return sum(len(region) * self._perimeter(region) for region in self._regions())

    def discounted_fences_price(self):
        """Sum over regions of area times number of sides."""
        return sum(len(region) * self._corners(region) for region in self._regions())


def parse_garden(text):
    return Garden(text.splitlines())


def part_one(text):
    return parse_garden(text).fences_price()


def part_two(text):
    return parse_garden(text).discounted_fences_price()