# adventsolver

Solvers for Advent of Code puzzles from 2024 and 2025. Each puzzle day is a
module that takes the puzzle input as text and returns the answer. The
package uses only the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

The `adventsolver` command takes a year, a day and a part (1 or 2), and an
optional input file. If the file is left out, or given as `-`, the input is
read from standard input:

```
adventsolver 2024 1 1 input.txt
adventsolver 2024 1 2 < input.txt
```

The answer is printed on standard output. When an answer is a list (2024
day 23 part 2 returns every matching clique), each item is printed on its
own line. Asking for a year, day or part that has no solver is reported as
a usage error. Run `adventsolver --help` for the full usage.

## From Python

Each day has its own module, named `y<year>_day<NN>`, for example
`adventsolver.y2024_day01`. Every module has `part_one(text)`; all but
`y2024_day25` also have `part_two(text)`:

```python
from adventsolver import y2024_day01

with open("input.txt", encoding="utf-8") as handle:
    text = handle.read()

print(y2024_day01.part_one(text))
print(y2024_day01.part_two(text))
```

`adventsolver.runner.run(year, day, part, text)` picks the module for you
and raises `LookupError` for a puzzle or part it does not know:

```python
from adventsolver.runner import run

print(run(2024, 11, 1, "125 17"))
```

The modules also expose the pieces their parts are built from (parsers,
grid classes, search functions), so single steps can be used on their own,
such as `y2024_day11.count_stones(stone, blinks)` or
`y2024_day17.Computer.run()`.

Days covered: 2024 days 1–21 and 23–25, and 2025 days 1–8 and 11.

### Extra settings

Some parts take keyword arguments besides the text, which makes it easy to
check them against the small examples in the puzzle descriptions:

- `y2024_day18.part_one(text, size=71, rounds=1024)` and
  `y2024_day18.part_two(text, size=71, rounds=1024)`: the memory grid size
  and the number of bytes dropped before searching.
- `y2024_day20.part_one(text, min_save=100)` and
  `y2024_day20.part_two(text, min_save=100)`: the least number of steps a
  cheat must save to be counted.
- `y2025_day08.part_one(text, connections=1000)`: how many of the closest
  pairs to connect.
- `y2024_day14.parse_security(text, width=101, height=103)` and
  `y2024_day14.find_tree(text, limit=10000)`: the room size and the
  number of seconds searched for the tree picture.

These settings cannot be given on the command line; it always uses the
defaults.

## Limits

- 2024 day 22 and 2025 days 9 and 10 have no solver.
- Some answers rely on the shape of one particular puzzle input rather than
  a general method:
  - `y2024_day17.part_two` checks candidates with `run_instructions`, a
    fixed copy of one program's loop body. It uses the program in the input
    only as the list of values to reproduce.
  - `y2024_day24.part_two` returns a fixed list of swapped wires,
    `KNOWN_SWAPS`, worked out by hand. It does not search the circuit.
  - `y2024_day16` assumes the start is in the bottom-left corner and the
    end is in the top-right corner of the maze.
- `y2024_day14.part_two` returns `None` if no tree picture turns up within
  the search limit.
- Nothing is downloaded: the input has to be supplied as a file or as text.
- No debug traces or graph drawings are written. Every solver only returns
  its answer.