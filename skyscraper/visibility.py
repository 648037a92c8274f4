"""Counting visible towers and checking them against the clues.

Clues are laid out as four blocks of ``size`` values: top, bottom,
left and right.
"""

from collections.abc import Iterable, Sequence

Grid = Sequence[Sequence[int]]


def count_visible(heights: Iterable[int]) -> int:
    """Count towers seen from the start of ``heights``; zeros are empty cells."""
    visible = 0
    tallest = 0
    for height in heights:
        if height > tallest:
            visible += 1
            tallest = height
    return visible


def top_exceeded(pos: int, grid: Grid, clues: Sequence[int], size: int) -> bool:
    """True if the column of ``pos`` already shows more towers than its top clue."""
    col = pos % size
    return count_visible(row[col] for row in grid) > clues[col]


def bottom_mismatch(pos: int, grid: Grid, clues: Sequence[int], size: int) -> bool:
    """On the last row, true if the column's bottom view differs from its clue."""
    if pos // size != size - 1:
        return False
    col = pos % size
    return count_visible(row[col] for row in reversed(grid)) != clues[col + size]


def left_mismatch(pos: int, grid: Grid, clues: Sequence[int], size: int) -> bool:
    """On the last column, true if the row's left view differs from its clue."""
    if pos % size != size - 1:
        return False
    row = pos // size
    return count_visible(grid[row]) != clues[row + size * 2]


def right_mismatch(pos: int, grid: Grid, clues: Sequence[int], size: int) -> bool:
    """On the last column, true if the row's right view differs from its clue."""
    if pos % size != size - 1:
        return False
    row = pos // size
    return count_visible(reversed(grid[row])) != clues[row + size * 3]


def violates_clues(pos: int, clues: Sequence[int], grid: Grid, size: int) -> bool:
    """True if the cell at ``pos`` breaks any clue that can be checked yet."""
    return (
        top_exceeded(pos, grid, clues, size)
        or bottom_mismatch(pos, grid, clues, size)
        or left_mismatch(pos, grid, clues, size)
        or right_mismatch(pos, grid, clues, size)
    )