"""Keypad conundrum: fewest button presses through layers of directional robots."""

from collections import defaultdict
from enum import Enum

START_KEY = "A"
PRESS = "A"


class Direction(Enum):
    UP = "^"
    DOWN = "v"
    RIGHT = ">"
    LEFT = "<"


NUMERIC_KEYPAD = {
    "7": [(Direction.RIGHT, "8"), (Direction.DOWN, "4")],
    "8": [(Direction.LEFT, "7"), (Direction.RIGHT, "9"), (Direction.DOWN, "5")],
    "9": [(Direction.LEFT, "8"), (Direction.DOWN, "6")],
    "4": [(Direction.UP, "7"), (Direction.RIGHT, "5"), (Direction.DOWN, "1")],
    "5": [(Direction.UP, "8"), (Direction.LEFT, "4"), (Direction.RIGHT, "6"), (Direction.DOWN, "2")],
    "6": [(Direction.UP, "9"), (Direction.LEFT, "5"), (Direction.DOWN, "3")],
    "1": [(Direction.UP, "4"), (Direction.RIGHT, "2")],
    "2": [(Direction.UP, "5"), (Direction.LEFT, "1"), (Direction.RIGHT, "3"), (Direction.DOWN, "0")],
    "3": [(Direction.UP, "6"), (Direction.LEFT, "2"), (Direction.DOWN, "A")],
    "0": [(Direction.UP, "2"), (Direction.RIGHT, "A")],
    "A": [(Direction.UP, "3"), (Direction.LEFT, "0")],
}

DIRECTIONAL_KEYPAD = {
    "^": [(Direction.RIGHT, "A"), (Direction.DOWN, "v")],
    "A": [(Direction.LEFT, "^"), (Direction.DOWN, ">")],
    "<": [(Direction.RIGHT, "v")],
    "v": [(Direction.UP, "^"), (Direction.LEFT, "<"), (Direction.RIGHT, ">")],
    ">": [(Direction.UP, "A"), (Direction.LEFT, "v")],
}


def shortest_key_sequences(start, end, keys):
    """Every shortest sequence of arrow symbols moving the arm from start to end."""
    best = {start: [""]}
    frontier = {start: [""]}
    while frontier:
        reached = defaultdict(list)
        for key, sequences in frontier.items():
            for direction, target in keys[key]:
                if target in best:
                    continue
                reached[target].extend(seq + direction.value for seq in sequences)
        best.update(reached)
        frontier = reached
    return list(best.get(end, []))


class Keypad:
    """A keypad described by each key's neighbours."""

    def __init__(self, keys):
        self.keys = keys

    def shortest_sequences(self, start, end):
        """Shortest sequences moving from start to end, each ending with a press."""
        return [seq + PRESS for seq in shortest_key_sequences(start, end, self.keys)]


class KeypadLayeringSystem:
    """A numeric keypad operated through a stack of directional keypads."""

    def __init__(self, nb_directional_layers):
        if nb_directional_layers < 1:
            raise ValueError("at least one directional layer is needed")
        self.numerical_keypad = Keypad(NUMERIC_KEYPAD)
        self.directional_keypad = Keypad(DIRECTIONAL_KEYPAD)
        self.nb_directional_layers = nb_directional_layers
        self._cache = {}

    def _sequence_cost(self, sequence, remaining):
        keys = START_KEY + sequence
        return sum(
            self._directional_cost(a, b, remaining) for a, b in zip(keys, keys[1:])
        )

    def _directional_cost(self, start, end, remaining):
        cached = self._cache.get((start, end, remaining))
        if cached is not None:
            return cached
        sequences = self.directional_keypad.shortest_sequences(start, end)
        if remaining == 0:
            # The outermost layer is typed directly: its length is the cost.
            return min((len(seq) for seq in sequences), default=0)
        cost = min(self._sequence_cost(seq, remaining - 1) for seq in sequences)
        self._cache[(start, end, remaining)] = cost
        return cost

    def _numeric_cost(self, start, end):
        sequences = self.numerical_keypad.shortest_sequences(start, end)
        return min(
            self._sequence_cost(seq, self.nb_directional_layers - 1) for seq in sequences
        )

    def fewest_presses(self, code):
        """Fewest presses on the outermost keypad needed to type the code."""
        keys = START_KEY + code
        return sum(self._numeric_cost(a, b) for a, b in zip(keys, keys[1:]))


def _numeric_part(code):
    prefix = code[:3]
    return int(prefix) if prefix.isascii() and prefix.isdigit() else 0


def total_complexity(text, layers):
    """Sum over codes of presses times the numeric part of the code."""
    system = KeypadLayeringSystem(layers)
    return sum(
        system.fewest_presses(code) * _numeric_part(code) for code in text.splitlines()
    )


def part_one(text):
    return total_complexity(text, 2)


def part_two(text):
    return total_complexity(text, 25)