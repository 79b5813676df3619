# aocrunner

Runs daily puzzle solvers (days 1 to 25), prints both parts of each answer
with the time the solver took, and reports the total runtime. It also ships
small helpers that puzzle solutions tend to need: a 2D `Point` and a
list-backed `Grid`.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running days

Give one or more day numbers:

```
aocrunner 1 2 5
```

The same command is available as `python -m aocrunner.cli 1 2 5`.

Each day prints a block like:

```
=== Day 01 ===
  · Part 1: 0
  · Part 2: 0
  · Elapsed: 0.0012 ms
```

and after all days a line `Total runtime: ... ms`.

Errors are printed to standard error and the command exits with status 1:

- no day given;
- an argument that is not a non-negative whole number, or is larger than 255;
- a day with no solver (anything outside 1 to 25). Days are run in the order
  given, so days listed before such a day have already been run and printed.

From Python, `aocrunner.cli` offers the same steps separately:

- `parse_days(args)` turns the arguments into a list of day numbers, raising
  `ValueError` as described above;
- `run_days(days, out=None)` runs each day, writes the report to `out`
  (standard output by default) and returns the total runtime in milliseconds;
- `main(argv=None)` does both and returns the exit status.

## Solvers

Each day's solver is looked up with `aocrunner.days.get_day_solver(day)`,
which raises `ValueError` for a day that has none. A solver takes no
arguments and returns a pair of `Solution` values, one for each part. The
solvers are held in the `aocrunner.days.SOLVERS` dictionary, keyed by day.

`aocrunner.solution.Solution` wraps an `int` or a `str` and prints as that
value; any other type (including `bool`) raises `TypeError`. The same module
defines `DOUBLE_NEWLINE`, the blank-line separator for the platform
(`"\r\n\r\n"` on Windows, `"\n\n"` elsewhere).

## Helpers

`aocrunner.point.Point` is an immutable integer 2D point, with `y` growing
downwards:

```python
from aocrunner.point import Point

p = Point(2, 3)
p.up()                             # Point(2, 2)
p + Point(1, 1)                    # Point(3, 4)
p - Point(1, 1)                    # Point(1, 2)
p * 2                              # Point(4, 6)
-p                                 # Point(-2, -3)
p.manhattan_dist(Point.origin())   # 5
p.euclidean_dist(Point(5, 7))      # 5.0
p.neighbors()                      # up, down, left, right
p.neighbors_diag()                 # the four above, then the diagonals
x, y = p                           # a point unpacks to its coordinates
Point.from_tuple((4, 5))           # ValueError if a value does not fit in 32 bits
```

`Point.unit_up()`, `unit_down()`, `unit_left()` and `unit_right()` give the
unit steps.

`aocrunner.grid.Grid` stores a width × height block of values, indexed by a
`Point` or an `(x, y)` pair:

```python
from aocrunner.grid import Grid
from aocrunner.point import Point

g = Grid.from_str("#.\n.#\n")
g[Point(1, 1)]              # "#"
g[0, 1] = "o"               # grids can be changed in place
g.get(Point(5, 5))          # None, out of bounds
g.get_or(Point(5, 5), ".")  # "."
g.find("#")                 # Point(0, 0)
list(g.find_all("#"))       # [Point(0, 0), Point(1, 1)]
print(g)                    # the grid as text, one row per line
```

Other ways to build one: `Grid.new(width, height, default)`,
`Grid.from_data(width, height, data)` (the data must hold exactly
`width * height` values, or `ValueError` is raised) and
`Grid.map_from_str(text, mapper)`, which applies `mapper` to every
non-whitespace character. Indexing outside the grid raises `IndexError`.
`enumerate()` yields `(Point, value)` pairs in row order, and iterating a grid
yields its values.

## What it does not do

Every day's solver currently returns `0` for both parts: no puzzle solutions
are included, and nothing reads puzzle input files. To solve a day, replace
its entry in `SOLVERS` with a function that returns the two answers.