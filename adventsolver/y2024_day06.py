"""Guard patrol simulation and loop-inducing obstruction search."""

from collections import defaultdict
from contextlib import contextmanager
from enum import Enum

OBSTACLE = "#"
GUARD = "^"
EMPTY = "."


class Direction(Enum):
    NORTH = (-1, 0)
    EAST = (0, 1)
    SOUTH = (1, 0)
    WEST = (0, -1)

    def step(self, position):
        return (position[0] + self.value[0], position[1] + self.value[1])

    @property
    def turned_right(self):
        return _ROTATIONS[self]


_ROTATIONS = {
    Direction.NORTH: Direction.EAST,
    Direction.EAST: Direction.SOUTH,
    Direction.SOUTH: Direction.WEST,
    Direction.WEST: Direction.NORTH,
}


class RunEnd(Enum):
    LOOP = "loop"
    OUT_OF_GRID = "out_of_grid"


class Grid:
    """The lab map, one list of characters per row."""

    def __init__(self, rows):
        self.rows = [list(row) for row in rows]

    def is_obstacle(self, position):
        row, col = position
        return self.rows[row][col] == OBSTACLE

    def is_valid_position(self, position):
        row, col = position
        return 0 <= row < len(self.rows) and 0 <= col < len(self.rows[0])

    def find_initial_guard_position(self):
        for r, row in enumerate(self.rows):
            for c, ch in enumerate(row):
                if ch == GUARD:
                    return (r, c)
        raise ValueError("guard not found on the grid")

    @contextmanager
    def obstacle_at(self, position):
        """Temporarily place an obstacle, clearing the cell afterwards."""
        row, col = position
        self.rows[row][col] = OBSTACLE
        try:
            yield self
        finally:
            self.rows[row][col] = EMPTY


class Runner:
    """Walks the guard across a grid, remembering where it has been."""

    def __init__(self, grid):
        self.grid = grid
        self.guard_position = grid.find_initial_guard_position()
        self.guard_direction = Direction.NORTH
        self.distinct_visited = 0
        self.visited_cells = defaultdict(set)

    def _next_move(self):
        direction = self.guard_direction
        for _ in range(4):
            target = direction.step(self.guard_position)
            if not self.grid.is_valid_position(target):
                return None
            if not self.grid.is_obstacle(target):
                return target, direction
            direction = direction.turned_right
        return None

    def run(self):
        """Walk until the guard leaves the grid or repeats a step."""
        while self.grid.is_valid_position(self.guard_position):
            directions = self.visited_cells.get(self.guard_position)
            if directions is None:
                self.distinct_visited += 1
            elif self.guard_direction in directions:
                return RunEnd.LOOP
            self.visited_cells[self.guard_position].add(self.guard_direction)

            move = self._next_move()
            if move is None:
                return RunEnd.OUT_OF_GRID
            self.guard_position, self.guard_direction = move
        return RunEnd.OUT_OF_GRID


def parse_grid(text):
    return Grid(text.splitlines())


def count_visited(grid):
    """Number of distinct cells the guard visits."""
    runner = Runner(grid)
    runner.run()
    return runner.distinct_visited


def count_loop_obstructions(grid):
    """Number of cells on the patrol path where an obstacle causes a loop."""
    runner = Runner(grid)
    start = runner.guard_position
    runner.run()
    candidates = [cell for cell in runner.visited_cells if cell != start]

    loops = 0
    for position in candidates:
        with grid.obstacle_at(position):
            if Runner(grid).run() is RunEnd.LOOP:
                loops += 1
    return loops


def part_one(text):
    return count_visited(parse_grid(text))


def part_two(text):
    return count_loop_obstructions(parse_grid(text))