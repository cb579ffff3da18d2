"""Antenna antinodes on a rectangular map."""

from collections import defaultdict
from dataclasses import dataclass
from itertools import combinations


@dataclass
class AntennaMap:
    antennas_by_label: dict
    rows: int
    cols: int

    def contains(self, point):
        return 0 <= point[0] < self.rows and 0 <= point[1] < self.cols

    def pairs(self):
        for positions in self.antennas_by_label.values():
            yield from combinations(positions, 2)


def parse_antennas(text):
    lines = text.splitlines()
    if not lines:
        raise ValueError("empty antenna map")
    antennas = defaultdict(list)
    for r, line in enumerate(lines):
        for c, ch in enumerate(line):
            if ch != ".":
                antennas[ch].append((r, c))
    return AntennaMap(dict(antennas), len(lines), len(lines[0]))


def count_antinodes(antenna_map):
    """Distinct in-bounds antinodes one spacing beyond each antenna pair."""
    antinodes = set()
    for (r1, c1), (r2, c2) in antenna_map.pairs():
        d_row, d_col = r1 - r2, c1 - c2
        for point in ((r1 + d_row, c1 + d_col), (r2 - d_row, c2 - d_col)):
            if antenna_map.contains(point):
                antinodes.add(point)
    return len(antinodes)


def _ray(antenna_map, start, shift):
    point = (start[0] + shift[0], start[1] + shift[1])
    while antenna_map.contains(point):
        yield point
        point = (point[0] + shift[0], point[1] + shift[1])


def count_resonant_antinodes(antenna_map):
    """Distinct in-bounds points in line with any antenna pair at whole spacings."""
    antinodes = set()
    for p1, p2 in antenna_map.pairs():
        d_row, d_col = p1[0] - p2[0], p1[1] - p2[1]
        antinodes.update(_ray(antenna_map, p1, (-d_row, -d_col)))
        antinodes.update(_ray(antenna_map, p2, (d_row, d_col)))
    return len(antinodes)


def part_one(text):
    return count_antinodes(parse_antennas(text))


def part_two(text):
    return count_resonant_antinodes(parse_antennas(text))