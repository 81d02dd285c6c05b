# advent2024

Solutions to the 2024 Advent of Code puzzles, together with a small set of
helpers for grid puzzles: a `Pos` point type, compass `Vector`s and a generic
`Grid`.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Solving a puzzle

Every solved day has its own command. Each one reads the puzzle input from
standard input and prints the answer to each part; most days also print how
long each part took.

```
advent2024-day01 < input.txt
advent2024-day11 < input.txt
advent2024-day25 < input.txt
```

Commands exist for days 1 to 15, 17, 19 and 22 to 25, named
`advent2024-dayNN` with a two-digit day number. Day 25 has a single part.

## Using the library

The solvers are ordinary functions and can be called directly:

```python
from advent2024.day01 import similarity, sorted_difference
from advent2024.day11 import blink_multiple

left = [3, 4, 2, 1, 3, 3]
right = [4, 3, 5, 3, 9, 3]
print(sorted_difference(left, right))  # 11
print(similarity(left, right))         # 31

print(blink_multiple([125, 17], 25, {}))  # 55312
```

The shared helpers live in their own modules:

- `advent2024.pos` — `Pos`, an immutable 2-D integer point with addition,
  subtraction, scaling, `distance`, `manhattan_distance`, `normalize` and
  `normalize_int`.
- `advent2024.vectors` — `Vector`, the eight compass directions, with
  `rotate_clockwise`, `rotate_counter_clockwise`, `to_pos` and the
  `cardinal`, `diagonal` and `all` groupings.
- `advent2024.grid` — `Grid`, a rectangular grid indexed by `Pos` or
  `(x, y)`, with `get` (returning `None` outside the grid), `is_inside`,
  `cells`, neighbour iteration (`adjacent`, `adjacent_cardinal`,
  `adjacent_diagonal`), `swap` and `to_char_grid`.
- `advent2024.iterutils` — `unique` and `pairs` iterator helpers.
- `advent2024.helpers` — `timed`, `timed_repeated`, `read_stdin`, `pipe` and
  `tap`.

## What is not included

There are no solvers or commands for days 16, 18, 20 and 21, the
path-finding puzzles.