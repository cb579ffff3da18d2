"""Cephalopod math worksheet: problems read by rows or by columns."""

import math

MULTIPLY = "*"


def parse_rows(text):
    """Numbers grouped per problem, read as whitespace-separated rows."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("worksheet is empty")
    *number_lines, operation_line = lines
    operations = operation_line.split()
    rows = [[int(value) for value in line.split()] for line in number_lines]
    if any(len(row) != len(operations) for row in rows):
        raise ValueError("every row needs one number per operation")
    numbers = [list(column) for column in zip(*rows)] if rows else [[] for _ in operations]
    return numbers, operations


def parse_columns(text):
    """Numbers grouped per problem, each number read down one character column."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("worksheet is empty")
    width = max(len(line) for line in lines)
    lines = [line.ljust(width) for line in lines]
    separators = [i for i in range(width) if all(line[i] == " " for line in lines)]
    bounds = list(zip([0] + [s + 1 for s in separators], separators + [width]))
    *number_lines, operation_line = lines
    operations = [operation_line[start:end].strip() for start, end in bounds]
    numbers = [
        [
            int("".join(line[col] for line in number_lines).strip())
            for col in range(start, end)
        ]
        for start, end in bounds
    ]
    return numbers, operations


def solve(numbers, operations):
    """Grand total: each problem's numbers multiplied for '*', summed otherwise."""
    if len(numbers) != len(operations):
        raise ValueError("need one group of numbers per operation")
    return sum(
        math.prod(values) if operation == MULTIPLY else sum(values)
        for values, operation in zip(numbers, operations)
    )


def part_one(text):
    return solve(*parse_rows(text))


def part_two(text):
    return solve(*parse_columns(text))