"""Command-line entry point: solve the puzzle described by one clue string."""

import sys
from collections.abc import Sequence

from skyscraper.grid import format_grid, new_grid
from skyscraper.parsing import ERROR_MESSAGE, InputError, grid_size, parse_clues, validate_input
from skyscraper.solver import prepose, solve_from


def _fail() -> int:
    sys.stdout.write(ERROR_MESSAGE + "\n")
    return 1


def main(argv: Sequence[str] | None = None) -> int:
    """Solve the clue string in ``argv`` and print the grid, or ``Error``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        return _fail()
    text = args[0]
    try:
        size = grid_size(text)
        validate_input(text, size)
        clues = parse_clues(text, size)
    except InputError:
        return _fail()
    grid = new_grid(size)
    prepose(grid, clues, size)
    if solve_from(0, grid, clues, size):
        sys.stdout.write(format_grid(grid))
    elif not solve_from(0, grid, clues, size):
        return _fail()
    return 0


if __name__ == "__main__":
    sys.exit(main())