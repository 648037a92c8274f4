"""Creating and rendering the square puzzle grid."""

Grid = list[list[int]]


def new_grid(size: int) -> Grid:
    """Return a ``size`` x ``size`` grid filled with zeros."""
    return [[0] * size for _ in range(size)]


def format_grid(grid: Grid) -> str:
    """Render the grid as space-separated digits, one row per line."""
    return "".join(" ".join(str(value) for value in row) + "\n" for row in grid)