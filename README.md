# skyscraper

A small solver for skyscraper puzzles.

A skyscraper puzzle is an N×N grid in which each row and each column holds the
heights 1 to N once. Clues around the edge say how many buildings can be seen
from that side, since a taller building hides every shorter one behind it. This
package fills in the grid from those clues by backtracking, for sizes 4 to 9.

## Installation

```
pip install .
```

## Command line

Give the clues as one argument. It must be single digits from 1 to N separated
by single spaces, 4 × N of them, in this order:

1. top edge, left to right
2. bottom edge, left to right
3. left edge, top to bottom
4. right edge, top to bottom

```
skyscraper "4 3 2 1 1 2 2 2 4 3 2 1 1 2 2 2"
```

prints

```
1 2 3 4
2 3 4 1
3 4 1 2
4 1 2 3
```

The same entry point can be run as `python -m skyscraper.cli`.

If there is not exactly one argument, if its length does not match a grid of
size 4 to 9, if it holds anything other than digits from 1 to N with single
spaces between them, or if the search finds no solution, the command writes
`Error` on standard output and exits with status 1. On success the exit status
is 0.

## Library use

```python
from skyscraper.parsing import grid_size, validate_input, parse_clues
from skyscraper.solver import solve
from skyscraper.grid import format_grid

text = "4 3 2 1 1 2 2 2 4 3 2 1 1 2 2 2"
size = grid_size(text)
validate_input(text, size)
clues = parse_clues(text, size)
grid = solve(clues, size)
print(format_grid(grid), end="")
```

- `skyscraper.parsing`: `grid_size`, `validate_input` and `parse_clues` raise
  `InputError` (a `ValueError`) when the input is rejected.
- `skyscraper.solver`: `solve(clues, size)` returns the solved grid as a list
  of rows, or `None` if no solution is found. `prepose` places the towers that
  clues of 1 and N force on the edges, `solve_from` fills the grid in place
  from a given cell, and `conflicts` tells whether a height already appears
  earlier in the cell's row or column.
- `skyscraper.visibility`: `count_visible` counts the towers seen along a line,
  and `violates_clues` checks a freshly placed cell against the clues that can
  already be checked.
- `skyscraper.grid`: `new_grid` makes an empty grid and `format_grid` renders
  one as text.

## Limits

Only grids of size 4 to 9 are handled, and only one solution is reported even
if the clues allow several.

## Running the tests

```
pip install ".[test]"
pytest
```