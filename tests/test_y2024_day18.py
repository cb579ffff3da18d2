import pytest

from adventsolver.y2024_day18 import MemoryGrid, parse_bytes, part_one, part_two

EXAMPLE = """5,4
4,2
4,5
3,0
2,1
6,3
2,4
1,5
0,6
3,3
2,6
5,1
1,2
5,5
2,5
6,5
1,4
0,4
6,4
1,1
6,1
1,0
0,5
1,6
2,0
"""


def test_parse_bytes():
    assert parse_bytes("1,2\n3,4") == [(1, 2), (3, 4)]


def test_parse_bytes_rejects_missing_comma():
    with pytest.raises(ValueError):
        parse_bytes("12")


def test_example_shortest_path():
    assert part_one(EXAMPLE, 7, 12) == 22


def test_example_blocking_byte():
    assert part_two(EXAMPLE, 7, 12) == (6, 1)


def test_blocking_byte_really_blocks():
    coordinates = parse_bytes(EXAMPLE)
    blocker = part_two(EXAMPLE, 7, 12)
    index = coordinates.index(blocker)
    before = MemoryGrid(7, coordinates)
    before.drop_bytes(index)
    assert before.shortest_path() is not None
    after = MemoryGrid(7, coordinates)
    after.drop_bytes(index + 1)
    assert after.shortest_path() is None


def test_empty_grid_path_is_manhattan():
    size = 5
    path = MemoryGrid(size, []).shortest_path()
    assert len(path) - 1 == 2 * (size - 1)
    assert (0, 0) in path and (size - 1, size - 1) in path


def test_walled_start_has_no_path():
    grid = MemoryGrid(3, [(0, 1), (1, 0)])
    grid.drop_bytes(2)
    assert grid.shortest_path() is None


def test_no_blocking_byte_raises():
    with pytest.raises(ValueError):
        MemoryGrid(3, [(2, 0)]).first_blocking_byte(0)


def test_drop_too_many_bytes_raises():
    with pytest.raises(ValueError):
        MemoryGrid(3, [(2, 0)]).drop_bytes(2)