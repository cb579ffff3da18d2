"""Chronospatial computer: a three-bit program interpreter."""

from dataclasses import dataclass, field


@dataclass
class Computer:
    """Three registers and a program of (opcode, operand) instructions."""

    register_a: int
    register_b: int
    register_c: int
    program: list = field(default_factory=list)

    @property
    def program_values(self):
        """The program as the flat list of numbers it was read from."""
        return [value for instruction in self.program for value in instruction]

    def _combo(self, operand):
        if 0 <= operand <= 3:
            return operand
        if operand == 4:
            return self.register_a
        if operand == 5:
            return self.register_b
        if operand == 6:
            return self.register_c
        raise ValueError(f"unsupported combo operand {operand}")

    def run(self):
        """Execute the program and return the list of output values."""
        pointer = 0
        output = []
        while pointer < len(self.program):
            opcode, operand = self.program[pointer]
            pointer += 1
            if opcode == 0:
                self.register_a >>= self._combo(operand)
            elif opcode == 1:
                self.register_b ^= operand
            elif opcode == 2:
                self.register_b = self._combo(operand) % 8
            elif opcode == 3:
                if self.register_a != 0:
                    pointer = operand // 2
            elif opcode == 4:
                self.register_b ^= self.register_c
            elif opcode == 5:
                output.append(self._combo(operand) % 8)
            elif opcode == 6:
                self.register_b = self.register_a >> self._combo(operand)
            elif opcode == 7:
                self.register_c = self.register_a >> self._combo(operand)
            else:
                raise ValueError(f"unsupported opcode {opcode}")
        return output


def _after_colon(line):
    _, sep, value = line.partition(": ")
    if not sep:
        raise ValueError(f"expected 'name: value', got {line!r}")
    return value


def parse_computer(text):
    """Read three register lines and a program line."""
    lines = [line for line in text.splitlines() if line]
    if len(lines) < 4:
        raise ValueError("expected three registers and a program")
    registers = [int(_after_colon(line)) for line in lines[:3]]
    values = [int(value) for value in _after_colon(lines[3]).split(",")]
    if len(values) % 2:
        raise ValueError("program must hold an even number of values")
    program = list(zip(values[::2], values[1::2]))
    return Computer(*registers, program)


def run_instructions(a):
    """One pass of the puzzle program's loop body: the value it outputs for a."""
    b = (a % 8) ^ 1
    c = a >> b
    return ((b ^ c) ^ 6) % 8


def find_register_a(targets):
    """Smallest register A value that makes the program print the targets."""
    candidates = [0]
    for target in reversed(list(targets)):
        candidates = [
            (candidate << 3) | low
            for low in range(8)
            for candidate in candidates
            if run_instructions((candidate << 3) | low) == target
        ]
    if not candidates:
        raise ValueError("no register value produces the targets")
    return min(candidates)


def part_one(text):
    return ",".join(str(value) for value in parse_computer(text).run())


def part_two(text):
    return find_register_a(parse_computer(text).program_values)