import pytest

from adventsolver.y2024_day15 import Cell, Move, parse_warehouse, part_one, part_two

SMALL_GRID = """########
#..O.O.#
##@.O..#
#...O..#
#.#.O..#
#...O..#
#......#
########"""

SMALL = SMALL_GRID + "\n\n<^^>>>vv<v>>v<<\n"

LARGE = """##########
#..O..O.O#
#......O.#
#.OO..O.O#
#..O@..O.#
#O#..O...#
#O..O..O.#
#.OO.O.OO#
#....O...#
##########

<vv>^<v^>v>^vv^v>v<>v^v<v<^vv<<<^><<><>>v<vvv<>^v^>^<<<><<v<<<v^vv^v>^
vvv<<^>^v^^><<>>><>^<<><^vv^^<>vvv<>><^^v>^>vv<>v<<<<v<^v>^<^^>>>^<v<v
><>vv>v^v^<>><>>>><^^>vv>v<^^^>>v^v^<^^>v^^>v^<^v>v<>>v^v^<v>v^^<^^vv<
<<v<^>>^^^^>>>v^<>vvv^><v<<<>^^^vv^<vvv>^>v<^^^^v<>^>vvvv><>>v^<<^^^^^
^><^><>>><>^^<<^^v>>><^<v>^<vv>>v>>>^v><>^v><<<<v>>v<v<v>vvv>^<><<>^><
^>><>^v<><^vvv<^^<><v<<<<<><^v<<<><<<^^<v<^^^><^>>^<v^><<<^>>^v<v^v<v^
>^>>^v>vv>^<<^v<>><<><<v<<v><>v<^vv<<<>^^v^>^^>>><<^v>>v^v><^^>>^<>vv^
<><^^>^^^<><vvvvv^v<v<<>^v<v>v<<^><<><<><<<^^<<<^<<>><<><^^^>^^<>^>v<>
^^>vv<^v^v<vv>^<><v<^v>^^^>>>^^vvv^>vvv<>>>^<^>>>>>^<<^v>^vvv<>^<><<v>
v^^>>><<^^<>>^v^<v^vv<>v^<<>^<^v^v><^<<<><<^<v><v<>vv>>v><v^<vv<>v^<<^
"""


def _count(warehouse, cell):
    return sum(row.count(cell) for row in warehouse.grid)


def test_small_example_part_one():
    assert part_one(SMALL) == 2028


def test_large_example_part_one():
    assert part_one(LARGE) == 10092


def test_large_example_part_two():
    assert part_two(LARGE) == 9021


def test_render_round_trips_the_map():
    warehouse = parse_warehouse(SMALL)
    assert warehouse.render() == SMALL_GRID + "\n"
    assert str(warehouse) == warehouse.render()


def test_moves_are_parsed_across_lines():
    warehouse = parse_warehouse(SMALL_GRID + "\n\n<^\nv>\n")
    assert warehouse.moves == [Move.LEFT, Move.UP, Move.DOWN, Move.RIGHT]


def test_robot_position_found():
    warehouse = parse_warehouse(SMALL)
    row = SMALL_GRID.splitlines()[warehouse.robot[0]]
    assert row[warehouse.robot[1]] == "@"


def test_invalid_direction_raises():
    with pytest.raises(ValueError):
        parse_warehouse(SMALL_GRID + "\n\n<x>\n")


def test_box_against_wall_does_not_move():
    grid = "####\n#@O#\n####"
    warehouse = parse_warehouse(grid + "\n\n>>\n")
    warehouse.apply_robot_moves()
    assert warehouse.render() == grid + "\n"


def test_push_moves_box_one_column():
    warehouse = parse_warehouse("######\n#@O..#\n######\n\n>\n")
    before = warehouse.gps_sum()
    start = warehouse.robot
    warehouse.apply_robot_moves()
    assert warehouse.gps_sum() == before + 1
    assert warehouse.robot == Move.RIGHT.step(start)


def test_boxes_are_conserved():
    warehouse = parse_warehouse(LARGE)
    boxes = _count(warehouse, Cell.BOX)
    warehouse.apply_robot_moves()
    assert _count(warehouse, Cell.BOX) == boxes
    assert warehouse._cell(warehouse.robot) is Cell.EMPTY


def test_make_wide_doubles_layout():
    warehouse = parse_warehouse(LARGE)
    narrow = warehouse.render()
    col = warehouse.robot[1]
    warehouse.make_wide()
    wide = warehouse.render()
    assert len(wide.splitlines()[0]) == 2 * len(narrow.splitlines()[0])
    assert wide.count("[") == narrow.count("O") == wide.count("]")
    assert warehouse.robot[1] == 2 * col


def test_wide_boxes_stay_paired_after_moves():
    warehouse = parse_warehouse(LARGE)
    boxes = _count(warehouse, Cell.BOX)
    warehouse.make_wide()
    warehouse.apply_robot_moves()
    assert _count(warehouse, Cell.BOX_LEFT) == boxes
    for row in warehouse.grid:
        for c, cell in enumerate(row):
            if cell is Cell.BOX_LEFT:
                assert row[c + 1] is Cell.BOX_RIGHT


def test_vertical_wide_push_keeps_walls():
    text = "#######\n#...#.#\n#.....#\n#..OO@#\n#..O..#\n#.....#\n#######\n\n<vv<<^^<<^^\n"
    warehouse = parse_warehouse(text)
    warehouse.make_wide()
    walls = _count(warehouse, Cell.WALL)
    warehouse.apply_robot_moves()
    assert _count(warehouse, Cell.WALL) == walls
    assert _count(warehouse, Cell.BOX_LEFT) == 3


def test_make_wide_twice_raises():
    warehouse = parse_warehouse(SMALL)
    warehouse.make_wide()
    with pytest.raises(ValueError):
        warehouse.make_wide()