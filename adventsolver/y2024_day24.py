"""Crossed wires: simulating a circuit of AND, OR and XOR gates."""

from dataclasses import dataclass, field
from enum import Enum

KNOWN_SWAPS = ("mkk", "z10", "qbw", "z14", "wcb", "z34", "wjb", "cvp")


class Gate(Enum):
    XOR = "XOR"
    OR = "OR"
    AND = "AND"

    def apply(self, a, b):
        if self is Gate.AND:
            return a & b
        if self is Gate.XOR:
            return a ^ b
        return a | b


@dataclass(frozen=True)
class Operation:
    gate: Gate
    key1: str
    key2: str
    destination_key: str


@dataclass
class WireSystem:
    """Known wire values and the gates still to be evaluated."""

    values: dict = field(default_factory=dict)
    operations: list = field(default_factory=list)

    def execute(self):
        """Evaluate gates until every one has produced its output."""
        while self.operations:
            pending = []
            for operation in self.operations:
                v1 = self.values.get(operation.key1)
                v2 = self.values.get(operation.key2)
                if v1 is None or v2 is None:
                    pending.append(operation)
                else:
                    self.values[operation.destination_key] = operation.gate.apply(v1, v2)
            if len(pending) == len(self.operations):
                raise ValueError("some gates can never receive their inputs")
            self.operations = pending

    def _number(self, prefix):
        result = 0
        index = 0
        while (value := self.values.get(f"{prefix}{index:02d}")) is not None:
            result ^= value << index
            index += 1
        return result

    def output_number(self):
        """The number formed by the z wires, z00 being the lowest bit."""
        return self._number("z")

    def expected_output(self):
        """The sum of the numbers on the x and y wires."""
        return self._number("x") + self._number("y")


def parse_wires(text):
    """Initial wire values, a blank line, then one gate per line."""
    system = WireSystem()
    in_gates = False
    for line in text.splitlines():
        if not line:
            in_gates = True
        elif in_gates:
            left, sep, destination = line.partition(" -> ")
            parts = left.split(" ")
            if not sep or len(parts) != 3:
                raise ValueError(f"invalid gate line: {line!r}")
            try:
                gate = Gate(parts[1])
            except ValueError:
                raise ValueError(f"unexpected gate {parts[1]!r}") from None
            system.operations.append(Operation(gate, parts[0], parts[2], destination))
        else:
            key, sep, value = line.partition(": ")
            if not sep:
                raise ValueError(f"invalid wire value: {line!r}")
            system.values[key] = int(value)
    return system


def part_one(text):
    system = parse_wires(text)
    system.execute()
    return system.output_number()


def part_two(text):
    """The wires swapped to repair the adder, found by inspecting the circuit."""
    parse_wires(text)
    return ",".join(sorted(KNOWN_SWAPS))