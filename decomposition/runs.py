"""
Horizontal run compression (first pass of the tile decomposition).

Each input row is scanned left to right and cut into maximal runs of
matching normalized colors. Every run becomes a one-pixel-high shape whose
band is flipped bottom-up: input row r covers [S - 1 - r, S - r).
"""

from colors import colors_match, normalize
from constants import TILE_SIZE, TRANSPARENCY_THRESHOLD
from localtypes import ColorGrid
from rectangles import Shape


def row_to_runs(
    row: list[int],
    y_min: int,
    threshold: int = TRANSPARENCY_THRESHOLD,
    tile_size: int | None = None,
) -> list[Shape]:
    """
    Cut one row of raw colors into maximal runs.

    Args:
        row: Raw ARGB colors, left to right.
        y_min: Lower bound of the output band of this row.
        threshold: Alpha threshold used to normalize colors.
        tile_size: Side of the tile the row belongs to, the row length if None.

    Returns:
        Shapes of height 1, ordered by increasing x_min.
    """
    colors = [normalize(color, threshold) for color in row]
    width = len(colors)

    runs: list[Shape] = []
    x = 0
    while x < width:
        run_color = colors[x]
        x_min = x
        x += 1
        while x < width and colors_match(colors[x], run_color):
            x += 1
        runs.append(
            Shape.checked(x_min, x, y_min, y_min + 1, run_color, tile_size or width)
        )
    return runs


def horizontal_runs(
    grid: ColorGrid,
    tile_size: int = TILE_SIZE,
    threshold: int = TRANSPARENCY_THRESHOLD,
) -> list[Shape]:
    """
    Runs of every row of a tile, in input scan order (top row first).

    The y bands are therefore in decreasing order along the returned list.
    """
    runs: list[Shape] = []
    for y, row in enumerate(grid):
        runs.extend(row_to_runs(row, tile_size - 1 - y, threshold, tile_size))
    return runs


__all__ = ["row_to_runs", "horizontal_runs"]
