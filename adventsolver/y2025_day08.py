"""Junction boxes: joining the closest boxes into circuits."""

import math
from dataclasses import dataclass

CONNECTIONS = 1000
LARGEST_CIRCUITS = 3


@dataclass(frozen=True)
class BoxPair:
    a: tuple
    b: tuple
    distance: float


def parse_boxes(text):
    """One 'x,y,z' coordinate per line."""
    boxes = []
    for line in text.splitlines():
        values = [int(value) for value in line.split(",")]
        if len(values) != 3:
            raise ValueError(f"expected three coordinates: {line!r}")
        boxes.append(tuple(values))
    return boxes


def sorted_pairs(coordinates):
    """Every pair of boxes, ordered by straight-line distance."""
    pairs = [
        BoxPair(a, b, math.sqrt(sum((p - q) ** 2 for p, q in zip(a, b))))
        for index, a in enumerate(coordinates)
        for b in coordinates[index + 1:]
    ]
    pairs.sort(key=lambda pair: pair.distance)
    return pairs


class Circuits:
    """Groups of connected boxes and the set of boxes wired so far."""

    def __init__(self):
        self.circuits = []
        self.connected = set()

    def _index(self, box):
        return next((i for i, circuit in enumerate(self.circuits) if box in circuit), None)

    def connect(self, pair):
        """Wire the two boxes of the pair, merging their circuits."""
        self.connected.update((pair.a, pair.b))
        a_index = self._index(pair.a)
        b_index = self._index(pair.b)
        if a_index is not None and b_index is not None:
            if a_index != b_index:
                self.circuits[a_index] |= self.circuits[b_index]
                del self.circuits[b_index]
        elif a_index is None and b_index is None:
            self.circuits.append({pair.a, pair.b})
        elif a_index is None:
            self.circuits[b_index].add(pair.a)
        else:
            self.circuits[a_index].add(pair.b)


def part_one(text, connections=CONNECTIONS):
    """Product of the sizes of the three largest circuits after the connections."""
    pairs = sorted_pairs(parse_boxes(text))
    if connections > len(pairs):
        raise ValueError(f"only {len(pairs)} pairs are available")
    circuits = Circuits()
    for pair in pairs[:connections]:
        circuits.connect(pair)
    sizes = sorted((len(c) for c in circuits.circuits if c), reverse=True)
    if len(sizes) < LARGEST_CIRCUITS:
        raise ValueError("fewer than three circuits were formed")
    return math.prod(sizes[:LARGEST_CIRCUITS])


def part_two(text):
    """Product of the x coordinates of the pair that joins everything into one circuit."""
    boxes = parse_boxes(text)
    pairs = iter(sorted_pairs(boxes))
    circuits = Circuits()
    last = None
    while len(circuits.connected) < len(boxes) or len(circuits.circuits) > 1:
        last = next(pairs, None)
        if last is None:
            raise ValueError("boxes cannot all be joined")
        circuits.connect(last)
    if last is None:
        raise ValueError("no connection was needed")
    return last.a[0] * last.b[0]