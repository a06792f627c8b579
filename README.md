# aocsolutions

Solutions to a selection of Advent of Code puzzles from the 2015 and 2024
events. They are small, importable Python modules with no third-party
dependencies.

Each puzzle lives in its own module, `aocsolutions.y2015.dayNN` or
`aocsolutions.y2024.dayNN`. Each module offers `part1` and, in most cases,
`part2` functions for the two halves of the puzzle. It also has a `main`
function that reads a puzzle input, solves the parts and prints each answer
with the time it took.

## Installation

```
pip install .
```

To install the test suite's requirements and run it:

```
pip install ".[test]"
pytest
```

## Command line

Every included day has its own command, named after the event year and day.
Give it the path of your puzzle input. Without a path it reads the input from
standard input. Trailing line breaks are removed before solving.

```
aoc2015-day01 input.txt
aoc2024-day07 < input.txt
```

Available commands:

- 2015: `aoc2015-day01`, `aoc2015-day02`, `aoc2015-day03`, `aoc2015-day04`,
  `aoc2015-day05`, `aoc2015-day06`, `aoc2015-day08`, `aoc2015-day10`,
  `aoc2015-day12`, `aoc2015-day14`, `aoc2015-day15`, `aoc2015-day17`,
  `aoc2015-day20`
- 2024: `aoc2024-day01`, `aoc2024-day02`, `aoc2024-day03`, `aoc2024-day04`,
  `aoc2024-day05`, `aoc2024-day06`, `aoc2024-day07`, `aoc2024-day11`

`aoc2015-day12` and `aoc2015-day20` solve and print only part 1.
`aoc2024-day11` prints both parts twice. The first pair comes from a
count-per-engraving solver (`solve`). The second pair, headed
"(Cached Version)", comes from a memoised recursive solver (`solve_cached`).

## Library use

The solvers are plain functions and can be called directly:

```python
from aocsolutions.y2015 import day01
from aocsolutions.y2024 import day01 as lists

day01.part1("(()(()(")        # final floor
day01.part2("()())")          # position of the first step into the basement

pairs = lists.parse_pairs("3   4\n4   3\n2   5\n")
lists.part1(pairs)            # total distance between the sorted lists
lists.part2(pairs)            # similarity score
```

Some days take their input already parsed:

- `y2015.day02.part1` and `part2` take the result of `parse_dimensions`.
- `y2015.day06` takes the result of `parse_input`.
- `y2024.day01` takes the result of `parse_pairs`.
- `y2024.day02` takes the result of `parse_reports`.

Some take extra parameters with the puzzle's values as defaults:

- the race time in `y2015.day14.part1` and `part2` (2503 seconds);
- the target volume in `y2015.day17.part1` and `part2` (150).

`aocsolutions.utils` holds the shared helpers:

- `extract_unsigned` and `extract_signed` pull every integer out of a piece of text.
- `timeit` runs a solver, prints its answer with the elapsed time, and returns the answer.
- `read_input` loads puzzle input from a file or standard input.

## What is not included

Only the days listed above are covered. There are no solvers or commands for
any other day of either event. Part 2 is missing for 2015 day 12 and 2015
day 20. The package does not download puzzle inputs or submit answers. You
supply the input yourself.