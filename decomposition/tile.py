"""
Tiles: square slices of an image and the shapes that make them up.

The decomposition of a tile runs in two passes:
    1. horizontal_runs: every row is cut into maximal runs of one color
    2. vertical_merge: runs of identical span and color stacked on top of
       each other are merged

The resulting shapes cover every unit cell of the tile exactly once.
Transparent pixels are decomposed like any other color; they are only
dropped when exporting.
"""

from dataclasses import dataclass

from constants import TILE_SIZE, TRANSPARENCY_THRESHOLD
from localtypes import ColorGrid, FrozenGrid, GridPosition
from ordering import AscendFrom, sort_positioned
from rectangles import Shape
from utils.grid import GridOperations, check_square

from .merge import vertical_merge
from .runs import horizontal_runs


def decompose_tile(
    grid: ColorGrid,
    tile_size: int = TILE_SIZE,
    threshold: int = TRANSPARENCY_THRESHOLD,
    ascend_from: AscendFrom | None = None,
) -> tuple[Shape, ...]:
    """
    Decompose a tile into single-color rectangles.

    Args:
        grid: tile_size x tile_size raw ARGB colors, grid[row][col], rows top-down.
        tile_size: Side of the tile.
        threshold: Alpha threshold under which a pixel is transparent.
        ascend_from: Ordering convention of the returned shapes.

    Returns:
        The shapes ordered by their minimum corner.

    Raises:
        InvalidDimensionsError: if the grid is not tile_size x tile_size.
    """
    check_square(grid, tile_size)
    runs = horizontal_runs(grid, tile_size, threshold)
    return sort_positioned(vertical_merge(runs), ascend_from)


@dataclass(frozen=True, slots=True)
class Tile:
    """
    A square slice of an image and its decomposition.

    Attributes:
        coordinates: 1-based (col, row) of the tile in its grid, row bottom-up.
        grid: The raw colors of the slice.
        shapes: Shapes covering the slice, in ordering order.
    """

    coordinates: GridPosition
    grid: FrozenGrid
    shapes: tuple[Shape, ...]

    @classmethod
    def build(
        cls,
        grid: ColorGrid,
        coordinates: GridPosition = GridPosition(1, 1),
        tile_size: int = TILE_SIZE,
        threshold: int = TRANSPARENCY_THRESHOLD,
        ascend_from: AscendFrom | None = None,
    ) -> "Tile":
        shapes = decompose_tile(grid, tile_size, threshold, ascend_from)
        return cls(GridPosition(*coordinates), GridOperations.freeze(grid), shapes)

    def position(self) -> tuple[int, int]:
        return (self.coordinates.col, self.coordinates.row)

    @property
    def size(self) -> int:
        return len(self.grid)

    def pixel(self, x: int, y: int) -> int:
        """Raw color at (x, y), y top-down as in the source grid."""
        return self.grid[y][x]

    def visible_shapes(self) -> tuple[Shape, ...]:
        return tuple(shape for shape in self.shapes if not shape.is_transparent())

    def is_empty(self) -> bool:
        """True when every shape of the tile is transparent."""
        return not self.visible_shapes()


__all__ = ["decompose_tile", "Tile"]
