"""
Tile grids: an image-sized grid partitioned into tiles.

The grid must already be padded to a multiple of the tile size. Tiles are
numbered from 1, columns left to right and rows bottom-up, consistent with
the y flip applied inside every tile: the bottom band of tiles is row 1.

Tiles only read their own slice of the source grid, so they can be
decomposed on independent workers. Each result is written to the slot of its
position, which keeps the final order deterministic.
"""

import logging
from collections.abc import Iterator
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

from constants import TILE_SIZE, TRANSPARENCY_THRESHOLD
from localtypes import ColorGrid, FrozenGrid, GridPosition, Proportions
from ordering import AscendFrom, sort_positioned
from utils.grid import GridOperations, check_multiple_of

from .tile import Tile

logger = logging.getLogger(__name__)


def split_grid(
    grid: ColorGrid, tile_size: int = TILE_SIZE
) -> Iterator[tuple[GridPosition, ColorGrid]]:
    """
    Slice a grid into tiles, without overlap nor gaps.

    Yields:
        (position, slice) pairs in raster order of the source grid.

    Raises:
        InvalidDimensionsError: if the grid is ragged, empty, or not a
        multiple of the tile size.
    """
    width, height = check_multiple_of(grid, tile_size)
    rows = height // tile_size

    for band in range(rows):
        row = rows - band  # Bottom-up numbering
        for col_index in range(width // tile_size):
            position = GridPosition(col_index + 1, row)
            yield position, GridOperations.sub_grid(
                grid, col_index * tile_size, band * tile_size, tile_size, tile_size
            )


@dataclass(frozen=True, slots=True)
class TileGrid:
    """
    A grid and the tiles it is made of.

    Attributes:
        grid: The source colors, dimensions multiples of tile_size.
        tile_size: Side of every tile.
        tiles: Tiles in ordering order of their positions.
    """

    grid: FrozenGrid
    tile_size: int
    tiles: tuple[Tile, ...]

    @classmethod
    def build(
        cls,
        grid: ColorGrid,
        tile_size: int = TILE_SIZE,
        threshold: int = TRANSPARENCY_THRESHOLD,
        ascend_from: AscendFrom | None = None,
        workers: int = 1,
    ) -> "TileGrid":
        """
        Partition a grid and decompose every tile.

        Args:
            grid: Source colors, grid[row][col], rows top-down.
            tile_size: Side of the tiles.
            threshold: Alpha threshold under which a pixel is transparent.
            ascend_from: Ordering convention of tiles and shapes.
            workers: Number of threads decomposing tiles.
        """
        slices = list(split_grid(grid, tile_size))

        def build_tile(index: int) -> Tile:
            position, tile_grid = slices[index]
            return Tile.build(tile_grid, position, tile_size, threshold, ascend_from)

        if workers > 1 and len(slices) > 1:
            slots: list[Tile | None] = [None] * len(slices)
            with ThreadPoolExecutor(max_workers=workers) as executor:
                futures = {
                    executor.submit(build_tile, index): index
                    for index in range(len(slices))
                }
                for future, index in futures.items():
                    slots[index] = future.result()
            tiles = [tile for tile in slots if tile is not None]
        else:
            tiles = [build_tile(index) for index in range(len(slices))]

        ordered = sort_positioned(tiles, ascend_from)
        logger.debug(
            "Decomposed %d tiles into %d shapes",
            len(ordered),
            sum(len(tile.shapes) for tile in ordered),
        )
        return cls(GridOperations.freeze(grid), tile_size, ordered)

    def proportions(self) -> Proportions:
        """Number of tiles per row and per column."""
        width, height = GridOperations.proportions(self.grid)
        return Proportions(width // self.tile_size, height // self.tile_size)

    def tile_at(self, position: tuple[int, int]) -> Tile:
        position = GridPosition(*position)
        for tile in self.tiles:
            if tile.coordinates == position:
                return tile
        raise KeyError(f"No tile at {position}")

    def __iter__(self) -> Iterator[Tile]:
        return iter(self.tiles)

    def __len__(self) -> int:
        return len(self.tiles)


__all__ = ["split_grid", "TileGrid"]
