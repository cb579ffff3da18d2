"""Bathroom security robots on a wrapping grid."""

import math
from collections import Counter
from dataclasses import dataclass

WIDTH = 101
HEIGHT = 103
TREE_RUN_LENGTH = 10
SIMULATION_SECONDS = 100
TREE_SEARCH_LIMIT = 10000


@dataclass
class Robot:
    row: int
    col: int
    row_velocity: int
    col_velocity: int


class BathroomSecurity:
    """A set of robots moving on a width by height torus."""

    def __init__(self, robots, width=WIDTH, height=HEIGHT):
        self.robots = list(robots)
        self.width = width
        self.height = height

    def simulate(self, seconds):
        """Advance every robot by the given number of seconds."""
        for robot in self.robots:
            robot.col = (robot.col + seconds * robot.col_velocity) % self.width
            robot.row = (robot.row + seconds * robot.row_velocity) % self.height

    def render(self):
        """One line per row: robot counts, with spaces for empty tiles."""
        counts = Counter((robot.row, robot.col) for robot in self.robots)
        return "\n".join(
            "".join(
                str(counts[(row, col)]) if counts[(row, col)] else " "
                for col in range(self.width)
            )
            for row in range(self.height)
        )

    def safety_factor(self):
        """Product of robot counts in the four quadrants, middles excluded."""
        mid_col = (self.width - 1) // 2
        mid_row = (self.height - 1) // 2
        col_halves = (range(0, mid_col), range(mid_col + 1, self.width))
        row_halves = (range(0, mid_row), range(mid_row + 1, self.height))
        quadrants = Counter()
        for robot in self.robots:
            for r_index, rows in enumerate(row_halves):
                for c_index, cols in enumerate(col_halves):
                    if robot.row in rows and robot.col in cols:
                        quadrants[(r_index, c_index)] += 1
        return math.prod(quadrants[(r, c)] for r in range(2) for c in range(2))

    def has_tree(self):
        """True if some row holds a run of more than ten occupied tiles."""
        return any(
            len(run) > TREE_RUN_LENGTH
            for line in self.render().split("\n")
            for run in line.split(" ")
        )


def _pair(part):
    _, sep, values = part.partition("=")
    first, sep_values, second = values.partition(",")
    if not sep or not sep_values:
        raise ValueError(f"invalid robot field: {part!r}")
    return int(first), int(second)


def parse_security(text, width=WIDTH, height=HEIGHT):
    """Read robots from lines like 'p=0,4 v=3,-3' (column first)."""
    robots = []
    for line in text.splitlines():
        position, sep, velocity = line.partition(" ")
        if not sep:
            raise ValueError(f"invalid robot line: {line!r}")
        col, row = _pair(position)
        col_velocity, row_velocity = _pair(velocity)
        robots.append(Robot(row, col, row_velocity, col_velocity))
    return BathroomSecurity(robots, width, height)


def find_tree(text, limit=TREE_SEARCH_LIMIT):
    """First second below limit at which the robots draw a tree, or None."""
    security = parse_security(text)
    for seconds in range(limit):
        if seconds:
            security.simulate(1)
        if security.has_tree():
            return seconds
    return None


def part_one(text):
    security = parse_security(text)
    security.simulate(SIMULATION_SECONDS)
    return security.safety_factor()


def part_two(text):
    return find_tree(text)