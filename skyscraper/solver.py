"""Backtracking search for a skyscraper grid matching the clues."""

from collections.abc import Sequence

from skyscraper.grid import Grid, new_grid
from skyscraper.visibility import violates_clues


def conflicts(grid: Grid, pos: int, val: int, size: int) -> bool:
    """True if ``val`` already sits above ``pos`` in its column or left of it in its row."""
    row, col = divmod(pos, size)
    if any(grid[r][col] == val for r in range(row)):
        return True
    return val in grid[row][:col]


def prepose(grid: Grid, clues: Sequence[int], size: int) -> None:
    """Place the towers forced by clues of 1 and ``size`` on the edges."""
    last = size - 1
    for i in range(size):
        top = clues[i]
        bottom = clues[i + size]
        left = clues[i + size * 2]
        right = clues[i + size * 3]
        if top == size and not conflicts(grid, i, 1, size):
            grid[0][i] = 1
        if top == 1 and not conflicts(grid, i, size, size):
            grid[0][i] = size
        if bottom == size and not conflicts(grid, last + i, 1, size):
            grid[last][i] = 1
        if bottom == 1 and not conflicts(grid, last + i, size, size):
            grid[last][i] = size
        if left == size and not conflicts(grid, i * size, 1, size):
            grid[i][0] = 1
        if left == 1 and not conflicts(grid, i * size, size, size):
            grid[i][0] = size
        if right == size and not conflicts(grid, i * size + last, 1, size):
            grid[i][last] = 1
        if right == 1 and not conflicts(grid, i * size + last, size, size):
            grid[i][last] = size


def solve_from(pos: int, grid: Grid, clues: Sequence[int], size: int) -> bool:
    """Fill the grid from ``pos`` onward in place; return True once it is complete."""
    if pos == size * size:
        return True
    row, col = divmod(pos, size)
    for val in range(1, size + 1):
        if conflicts(grid, pos, val, size):
            continue
        grid[row][col] = val
        if violates_clues(pos, clues, grid, size):
            grid[row][col] = 0
        elif solve_from(pos + 1, grid, clues, size):
            return True
    return False


def solve(clues: Sequence[int], size: int) -> Grid | None:
    """Return a solved grid for ``clues``, or None if the search finds none."""
    grid = new_grid(size)
    prepose(grid, clues, size)
    if solve_from(0, grid, clues, size):
        return grid
    return None