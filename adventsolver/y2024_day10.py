"""Hiking trails on a topographic map: trailhead scores and ratings."""

from dataclasses import dataclass

PEAK = 9


@dataclass
class TopoMap:
    """Grid of heights from 0 to 9, one list of ints per row."""

    heights: list

    def _neighbours(self, position, elevation):
        row, col = position
        rows, cols = len(self.heights), len(self.heights[0])
        for r, c in ((row - 1, col), (row + 1, col), (row, col - 1), (row, col + 1)):
            if 0 <= r < rows and 0 <= c < cols and self.heights[r][c] == elevation:
                yield (r, c)

    def _climb(self, row, col, collect):
        positions = collect([(row, col)])
        elevation = 0
        while positions and elevation < PEAK:
            elevation += 1
            positions = collect(
                step for position in positions
                for step in self._neighbours(position, elevation)
            )
        return len(positions)

    def trailhead_score(self, row, col):
        """Number of distinct peaks reachable from this cell."""
        return self._climb(row, col, set)

    def trailhead_rating(self, row, col):
        """Number of distinct hiking trails from this cell to any peak."""
        return self._climb(row, col, list)

    def _trailheads(self):
        for r, row in enumerate(self.heights):
            for c, height in enumerate(row):
                if height == 0:
                    yield r, c

    def total_score(self):
        return sum(self.trailhead_score(r, c) for r, c in self._trailheads())

    def total_rating(self):
        return sum(self.trailhead_rating(r, c) for r, c in self._trailheads())


def parse_map(text):
    """Read the digit grid; any non-digit raises ValueError."""
    return TopoMap([[int(ch) for ch in line] for line in text.splitlines()])


def part_one(text):
    return parse_map(text).total_score()


def part_two(text):
    return parse_map(text).total_rating()