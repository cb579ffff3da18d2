"""Warehouse robot pushing boxes, in normal and double-width layouts."""

from enum import Enum


class Cell(Enum):
    WALL = "#"
    BOX = "O"
    EMPTY = "."
    BOX_LEFT = "["
    BOX_RIGHT = "]"


class Move(Enum):
    LEFT = (0, -1)
    RIGHT = (0, 1)
    UP = (-1, 0)
    DOWN = (1, 0)

    def step(self, position):
        return (position[0] + self.value[0], position[1] + self.value[1])

    @property
    def is_horizontal(self):
        return self in (Move.LEFT, Move.RIGHT)


_MOVE_SYMBOLS = {"<": Move.LEFT, ">": Move.RIGHT, "^": Move.UP, "v": Move.DOWN}

_WIDE_CELLS = {
    Cell.WALL: (Cell.WALL, Cell.WALL),
    Cell.EMPTY: (Cell.EMPTY, Cell.EMPTY),
    Cell.BOX: (Cell.BOX_LEFT, Cell.BOX_RIGHT),
}

_WIDE_HALVES = (Cell.BOX_LEFT, Cell.BOX_RIGHT)


class Warehouse:
    """The warehouse grid, the robot's position and its list of moves."""

    def __init__(self, grid, robot, moves):
        self.grid = [list(row) for row in grid]
        self.robot = robot
        self.moves = list(moves)

    def __str__(self):
        return self.render()

    def render(self):
        """The grid as text with the robot as '@', each row ending in a newline."""
        rows = ["".join(cell.value for cell in row) for row in self.grid]
        r, c = self.robot
        rows[r] = rows[r][:c] + "@" + rows[r][c + 1:]
        return "\n".join(rows) + "\n"

    def _cell(self, position):
        return self.grid[position[0]][position[1]]

    def _set(self, position, cell):
        self.grid[position[0]][position[1]] = cell

    def make_wide(self):
        """Double every cell horizontally; boxes become '[' and ']' pairs."""
        wide = []
        for row in self.grid:
            new_row = []
            for cell in row:
                if cell not in _WIDE_CELLS:
                    raise ValueError(f"cannot widen a warehouse holding {cell.value!r}")
                new_row.extend(_WIDE_CELLS[cell])
            wide.append(new_row)
        self.grid = wide
        self.robot = (self.robot[0], self.robot[1] * 2)

    def gps_sum(self):
        """Sum of 100 * row + col over every box (left half for wide boxes)."""
        return sum(
            100 * r + c
            for r, row in enumerate(self.grid)
            for c, cell in enumerate(row)
            if cell in (Cell.BOX, Cell.BOX_LEFT)
        )

    def _try_move_box(self, box_pos, move):
        target = move.step(box_pos)
        cell = self._cell(target)
        if cell is Cell.WALL:
            return False
        if cell is Cell.BOX:
            if not self._try_move_box(target, move):
                return False
        elif cell is not Cell.EMPTY:
            raise ValueError(f"unexpected cell {cell.value!r} for a narrow box")
        self._set(target, Cell.BOX)
        self._set(box_pos, Cell.EMPTY)
        return True

    def _move_box(self, left_pos, right_pos, left_target, right_target):
        self._set(left_target, Cell.BOX_LEFT)
        self._set(right_target, Cell.BOX_RIGHT)
        self._set(left_pos, Cell.EMPTY)
        self._set(right_pos, Cell.EMPTY)

    def _try_move_wide_box_horizontally(self, box_pos, move, readonly):
        near = move.step(box_pos)
        target = move.step(near)
        cell = self._cell(target)
        if cell is Cell.WALL:
            return False
        if cell in _WIDE_HALVES:
            if not self._try_move_wide_box(target, move, readonly):
                return False
        elif cell is not Cell.EMPTY:
            raise ValueError(f"unexpected cell {cell.value!r} for a wide box")
        if move is Move.LEFT:
            self._set(target, Cell.BOX_LEFT)
            self._set(near, Cell.BOX_RIGHT)
        else:
            self._set(target, Cell.BOX_RIGHT)
            self._set(near, Cell.BOX_LEFT)
        self._set(box_pos, Cell.EMPTY)
        return True

    def _try_move_wide_box(self, box_pos, move, readonly):
        if move.is_horizontal:
            return self._try_move_wide_box_horizontally(box_pos, move, readonly)

        if self._cell(box_pos) is Cell.BOX_LEFT:
            left_pos, right_pos = box_pos, Move.RIGHT.step(box_pos)
        else:
            left_pos, right_pos = Move.LEFT.step(box_pos), box_pos
        left_target_pos, right_target_pos = move.step(left_pos), move.step(right_pos)
        left_target, right_target = self._cell(left_target_pos), self._cell(right_target_pos)

        def commit():
            if not readonly:
                self._move_box(left_pos, right_pos, left_target_pos, right_target_pos)
            return True

        if Cell.WALL in (left_target, right_target):
            return False

        if left_target is Cell.EMPTY and right_target is Cell.EMPTY:
            return commit()

        # Two boxes side by side above or below: both must be movable first.
        if left_target is Cell.BOX_RIGHT and right_target is Cell.BOX_LEFT:
            if self._try_move_wide_box(left_target_pos, move, True) and self._try_move_wide_box(
                right_target_pos, move, True
            ):
                if not readonly:
                    self._try_move_wide_box(left_target_pos, move, False)
                    self._try_move_wide_box(right_target_pos, move, False)
                return commit()
            return False

        if left_target is Cell.EMPTY and self._try_move_wide_box(right_target_pos, move, readonly):
            return commit()

        if right_target is Cell.EMPTY and self._try_move_wide_box(left_target_pos, move, readonly):
            return commit()

        if (
            right_target is Cell.BOX_RIGHT
            and left_target is Cell.BOX_LEFT
            and self._try_move_wide_box(left_target_pos, move, readonly)
        ):
            return commit()

        return False

    def apply_robot_moves(self):
        """Carry out every robot move, pushing boxes where possible."""
        for move in self.moves:
            target = move.step(self.robot)
            cell = self._cell(target)
            if cell is Cell.WALL:
                continue
            if cell is Cell.EMPTY:
                moved = True
            elif cell is Cell.BOX:
                moved = self._try_move_box(target, move)
            else:
                moved = self._try_move_wide_box(target, move, False)
            if moved:
                self.robot = target


def _parse_cells(line):
    return [
        Cell.WALL if ch == "#" else Cell.BOX if ch == "O" else Cell.EMPTY
        for ch in line
    ]


def _parse_moves(line):
    try:
        return [_MOVE_SYMBOLS[ch] for ch in line]
    except KeyError as error:
        raise ValueError(f"invalid direction in input: {error.args[0]!r}") from None


def parse_warehouse(text):
    """Read the map, a blank line, then the robot's moves."""
    grid = []
    moves = []
    robot = (0, 0)
    in_moves = False
    for line in text.splitlines():
        if not line:
            in_moves = True
            continue
        if in_moves:
            moves.extend(_parse_moves(line))
        else:
            col = line.find("@")
            if col >= 0:
                robot = (len(grid), col)
            grid.append(_parse_cells(line))
    return Warehouse(grid, robot, moves)


def part_one(text):
    warehouse = parse_warehouse(text)
    warehouse.apply_robot_moves()
    return warehouse.gps_sum()


def part_two(text):
    warehouse = parse_warehouse(text)
    warehouse.make_wide()
    warehouse.apply_robot_moves()
    return warehouse.gps_sum()