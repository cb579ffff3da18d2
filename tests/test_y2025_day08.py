import math

import pytest

from adventsolver import y2025_day08 as day

CLUSTERS = "\n".join(
    f"{x},0,0" for x in (0, 1, 2, 100, 101, 200, 201, 300)
)


def test_parse_boxes():
    assert day.parse_boxes("1,2,3\n4,5,6") == [(1, 2, 3), (4, 5, 6)]


def test_parse_boxes_rejects_short_line():
    with pytest.raises(ValueError):
        day.parse_boxes("1,2")


def test_pair_distance():
    assert day.sorted_pairs([(0, 0, 0), (3, 4, 0)])[0].distance == 5.0


def test_pairs_sorted_and_complete():
    boxes = day.parse_boxes(CLUSTERS)
    pairs = day.sorted_pairs(boxes)
    assert len(pairs) == math.comb(len(boxes), 2)
    distances = [pair.distance for pair in pairs]
    assert distances == sorted(distances)


def test_connect_merges_circuits():
    circuits = day.Circuits()
    a, b, c, d = (0, 0, 0), (1, 0, 0), (5, 0, 0), (6, 0, 0)
    circuits.connect(day.BoxPair(a, b, 0.0))
    circuits.connect(day.BoxPair(c, d, 0.0))
    circuits.connect(day.BoxPair(b, c, 0.0))
    assert circuits.circuits == [{a, b, c, d}]
    assert circuits.connected == {a, b, c, d}


def test_connect_same_circuit_is_noop():
    circuits = day.Circuits()
    a, b = (0, 0, 0), (1, 0, 0)
    circuits.connect(day.BoxPair(a, b, 0.0))
    circuits.connect(day.BoxPair(b, a, 0.0))
    assert circuits.circuits == [{a, b}]


def test_part_one_clusters():
    assert day.part_one(CLUSTERS, connections=4) == 12


def test_part_one_too_few_circuits():
    with pytest.raises(ValueError):
        day.part_one("0,0,0\n1,0,0\n2,0,0", connections=3)


def test_part_one_too_many_connections():
    with pytest.raises(ValueError):
        day.part_one("0,0,0\n1,0,0", connections=5)


def test_part_two_last_connection():
    assert day.part_two("0,0,0\n1,0,0\n3,0,0\n7,0,0") == 21


def test_part_two_single_box():
    with pytest.raises(ValueError):
        day.part_two("0,0,0")