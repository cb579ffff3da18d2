import pytest

from adventsolver.y2024_day10 import TopoMap, parse_map, part_one, part_two

EXAMPLE = """89010123
78121874
87430965
96549874
45678903
32019012
01329801
10456732"""


def transposed(text):
    rows = text.splitlines()
    return "\n".join("".join(col) for col in zip(*rows))


def mirrored(text):
    return "\n".join(line[::-1] for line in text.splitlines())


def test_example_score():
    assert part_one(EXAMPLE) == 36


def test_example_rating():
    assert part_two(EXAMPLE) == 81


def test_single_straight_trail():
    topo = parse_map("0123456789")
    assert topo.total_score() == 1
    assert topo.total_rating() == topo.total_score()


def test_rating_is_at_least_score_for_each_trailhead():
    topo = parse_map(EXAMPLE)
    for r, row in enumerate(topo.heights):
        for c, height in enumerate(row):
            if height == 0:
                assert topo.trailhead_rating(r, c) >= topo.trailhead_score(r, c)


def test_transposition_keeps_totals():
    assert part_one(transposed(EXAMPLE)) == part_one(EXAMPLE)
    assert part_two(transposed(EXAMPLE)) == part_two(EXAMPLE)


def test_mirroring_keeps_totals():
    assert part_one(mirrored(EXAMPLE)) == part_one(EXAMPLE)
    assert part_two(mirrored(EXAMPLE)) == part_two(EXAMPLE)


def test_reversed_trail_matches_forward_trail():
    forward = parse_map("0123456789")
    backward = parse_map("9876543210")
    assert backward.trailhead_score(0, 9) == forward.trailhead_score(0, 0)
    assert backward.trailhead_rating(0, 9) == forward.trailhead_rating(0, 0)


def test_parse_map_reads_digits():
    assert parse_map("01\n23") == TopoMap([[0, 1], [2, 3]])


def test_parse_map_rejects_non_digits():
    with pytest.raises(ValueError):
        parse_map("01.3")