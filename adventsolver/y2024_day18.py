"""Falling bytes in a square memory space: shortest exit path."""

from collections import deque

MEMORY_SIZE = 71
SIMULATION_ROUNDS = 1024

_STEPS = ((1, 0), (-1, 0), (0, 1), (0, -1))


class MemoryGrid:
    """A size by size memory space and the bytes that will fall into it."""

    def __init__(self, size, fallen_bytes):
        self.size = size
        self.fallen_bytes = list(fallen_bytes)
        self.corrupted = set()

    def drop_bytes(self, count):
        """Corrupt the cells hit by the first count bytes."""
        if count > len(self.fallen_bytes):
            raise ValueError(f"only {len(self.fallen_bytes)} bytes are known")
        self.corrupted.update(self.fallen_bytes[:count])

    def shortest_path(self):
        """Cells of a shortest path from the top-left to the bottom-right, or None."""
        start = (0, 0)
        goal = (self.size - 1, self.size - 1)
        predecessors = {start: None}
        queue = deque([start])
        while queue:
            current = queue.popleft()
            if current == goal:
                path = set()
                while current is not None:
                    path.add(current)
                    current = predecessors[current]
                return path
            for dx, dy in _STEPS:
                step = (current[0] + dx, current[1] + dy)
                if (
                    0 <= step[0] < self.size
                    and 0 <= step[1] < self.size
                    and step not in self.corrupted
                    and step not in predecessors
                ):
                    predecessors[step] = current
                    queue.append(step)
        return None

    def first_blocking_byte(self, start_at):
        """The first byte after start_at whose fall cuts off every exit path."""
        self.drop_bytes(start_at)
        path = self.shortest_path()
        for byte in self.fallen_bytes[start_at:]:
            self.corrupted.add(byte)
            if path is not None and byte in path:
                path = self.shortest_path()
                if path is None:
                    return byte
        raise ValueError("no blocking byte found")


def parse_bytes(text):
    """One 'x,y' coordinate per line."""
    coordinates = []
    for line in text.splitlines():
        x, sep, y = line.partition(",")
        if not sep:
            raise ValueError(f"invalid byte position: {line!r}")
        coordinate = (int(x), int(y))
        if min(coordinate) < 0:
            raise ValueError(f"negative byte position: {line!r}")
        coordinates.append(coordinate)
    return coordinates


def part_one(text, size=MEMORY_SIZE, rounds=SIMULATION_ROUNDS):
    """Steps of the shortest path after the first rounds bytes, or None."""
    grid = MemoryGrid(size, parse_bytes(text))
    grid.drop_bytes(rounds)
    path = grid.shortest_path()
    return None if path is None else len(path) - 1


def part_two(text, size=MEMORY_SIZE, rounds=SIMULATION_ROUNDS):
    return MemoryGrid(size, parse_bytes(text)).first_blocking_byte(rounds)