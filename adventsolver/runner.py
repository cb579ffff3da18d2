"""Command line entry point: solve one part of one puzzle from an input file."""

import argparse
import sys

from . import (
    y2024_day01,
    y2024_day02,
    y2024_day03,
    y2024_day04,
    y2024_day05,
    y2024_day06,
    y2024_day07,
    y2024_day08,
    y2024_day09,
    y2024_day10,
    y2024_day11,
    y2024_day12,
    y2024_day13,
    y2024_day14,
    y2024_day15,
    y2024_day16,
    y2024_day17,
    y2024_day18,
    y2024_day19,
    y2024_day20,
    y2024_day21,
    y2024_day23,
    y2024_day24,
    y2024_day25,
    y2025_day01,
    y2025_day02,
    y2025_day03,
    y2025_day04,
    y2025_day05,
    y2025_day06,
    y2025_day07,
    y2025_day08,
    y2025_day11,
)

PUZZLES = {
    (2024, 1): y2024_day01,
    (2024, 2): y2024_day02,
    (2024, 3): y2024_day03,
    (2024, 4): y2024_day04,
    (2024, 5): y2024_day05,
    (2024, 6): y2024_day06,
    (2024, 7): y2024_day07,
    (2024, 8): y2024_day08,
    (2024, 9): y2024_day09,
    (2024, 10): y2024_day10,
    (2024, 11): y2024_day11,
    (2024, 12): y2024_day12,
    (2024, 13): y2024_day13,
    (2024, 14): y2024_day14,
    (2024, 15): y2024_day15,
    (2024, 16): y2024_day16,
    (2024, 17): y2024_day17,
    (2024, 18): y2024_day18,
    (2024, 19): y2024_day19,
    (2024, 20): y2024_day20,
    (2024, 21): y2024_day21,
    (2024, 23): y2024_day23,
    (2024, 24): y2024_day24,
    (2024, 25): y2024_day25,
    (2025, 1): y2025_day01,
    (2025, 2): y2025_day02,
    (2025, 3): y2025_day03,
    (2025, 4): y2025_day04,
    (2025, 5): y2025_day05,
    (2025, 6): y2025_day06,
    (2025, 7): y2025_day07,
    (2025, 8): y2025_day08,
    (2025, 11): y2025_day11,
}

_PART_NAMES = {1: "part_one", 2: "part_two"}


def _solver(year, day, part):
    module = PUZZLES.get((year, day))
    if module is None:
        raise LookupError(f"no solution for {year} day {day}")
    name = _PART_NAMES.get(part)
    solver = getattr(module, name, None) if name else None
    if solver is None:
        raise LookupError(f"no part {part} for {year} day {day}")
    return solver


def run(year, day, part, text):
    """Solve the given part of a puzzle for the puzzle input text."""
    return _solver(year, day, part)(text)


def _show(result):
    if isinstance(result, (list, tuple)):
        for item in result:
            print(item)
    else:
        print(result)


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="adventsolver", description="Solve a puzzle part for an input file."
    )
    parser.add_argument("year", type=int)
    parser.add_argument("day", type=int)
    parser.add_argument("part", type=int)
    parser.add_argument("input", nargs="?", default="-", help="input file, '-' for stdin")
    args = parser.parse_args(argv)

    try:
        solver = _solver(args.year, args.day, args.part)
    except LookupError as error:
        parser.error(str(error))

    if args.input == "-":
        text = sys.stdin.read()
    else:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()

    _show(solver(text))
    return 0


if __name__ == "__main__":
    sys.exit(main())