"""Tests for decomposition/tile_grid.py"""

import pytest

from decomposition import (
    InvalidDimensionsError,
    Tile,
    TileGrid,
    VerificationError,
    assert_valid_tile_grid,
    split_grid,
    verify_tile_grid,
)
from localtypes import GridPosition, Proportions
from ordering import AscendFrom
from rectangles import Shape
from utils.grid import GridOperations

RED = 0xFF_FF_00_00
BLUE = 0xFF_00_00_FF
GREEN = 0xFF_00_FF_00


def banded(colors_by_band: list[list[int]], tile_size: int = 4) -> list[list[int]]:
    """Grid whose tile (band, col) is filled with colors_by_band[band][col]."""
    grid = []
    for band in colors_by_band:
        for _ in range(tile_size):
            grid.append([color for color in band for _ in range(tile_size)])
    return grid


class TestSplitGrid:
    def test_single_band(self):
        grid = banded([[RED, BLUE]])
        positions = [position for position, _ in split_grid(grid, 4)]
        assert positions == [GridPosition(1, 1), GridPosition(2, 1)]

    def test_rows_are_bottom_up(self):
        """The top band of tiles gets the highest row."""
        grid = banded([[RED], [BLUE]])
        slices = dict(split_grid(grid, 4))
        assert slices[GridPosition(1, 2)] == GridOperations.filled(4, 4, RED)
        assert slices[GridPosition(1, 1)] == GridOperations.filled(4, 4, BLUE)

    def test_slices_partition_the_grid(self):
        grid = [[row * 8 + col for col in range(8)] for row in range(8)]
        pixels = [
            pixel for _, tile in split_grid(grid, 4) for row in tile for pixel in row
        ]
        assert sorted(pixels) == list(range(64))

    @pytest.mark.parametrize(
        "grid",
        [[], GridOperations.filled(4, 6), GridOperations.filled(5, 4), [[0] * 4, [0] * 3]],
    )
    def test_invalid_dimensions(self, grid):
        with pytest.raises(InvalidDimensionsError):
            list(split_grid(grid, 4))


    @pytest.mark.parametrize("tile_size", [0, -4])
    def test_invalid_tile_size(self, tile_size):
        grid = GridOperations.filled(4, 4, RED)
        with pytest.raises(InvalidDimensionsError):
            list(split_grid(grid, tile_size))
        with pytest.raises(InvalidDimensionsError):
            TileGrid.build(grid, tile_size=tile_size)


class TestTileGrid:
    def test_default_order_from_bottom_left(self):
        grid = banded([[RED, BLUE], [GREEN, RED]])
        tile_grid = TileGrid.build(grid, tile_size=4)
        assert [tile.coordinates for tile in tile_grid] == [
            GridPosition(1, 1),
            GridPosition(2, 1),
            GridPosition(1, 2),
            GridPosition(2, 2),
        ]
        assert tile_grid.tiles[0].shapes == (Shape(0, 4, 0, 4, GREEN),)

    def test_top_left_order(self):
        grid = banded([[RED, BLUE], [GREEN, RED]])
        tile_grid = TileGrid.build(grid, tile_size=4, ascend_from=AscendFrom.HIGH_Y_LOW_X)
        assert tile_grid.tiles[0].coordinates == GridPosition(1, 2)
        assert tile_grid.tiles[0].shapes == (Shape(0, 4, 0, 4, RED),)

    def test_workers_give_the_same_result(self):
        grid = [[(row * 31 + col * 7) % 5 | 0xFF_00_00_00 for col in range(16)] for row in range(16)]
        sequential = TileGrid.build(grid, tile_size=4)
        parallel = TileGrid.build(grid, tile_size=4, workers=4)
        assert sequential.tiles == parallel.tiles

    def test_proportions(self):
        tile_grid = TileGrid.build(banded([[RED, BLUE, GREEN]] * 2), tile_size=4)
        assert tile_grid.proportions() == Proportions(3, 2)
        assert len(tile_grid) == 6

    def test_tile_at(self):
        tile_grid = TileGrid.build(banded([[RED, BLUE]]), tile_size=4)
        assert tile_grid.tile_at((2, 1)).shapes == (Shape(0, 4, 0, 4, BLUE),)
        with pytest.raises(KeyError):
            tile_grid.tile_at((3, 1))

    def test_grid_is_immutable(self):
        tile_grid = TileGrid.build(banded([[RED]]), tile_size=4)
        assert isinstance(tile_grid.grid, tuple)
        assert hash(tile_grid) == hash(TileGrid.build(banded([[RED]]), tile_size=4))

    def test_default_tile_size(self):
        grid = GridOperations.filled(32, 16, RED)
        tile_grid = TileGrid.build(grid)
        assert len(tile_grid) == 2
        assert all(tile.shapes == (Shape(0, 16, 0, 16, RED),) for tile in tile_grid)

    def test_verification(self):
        grid = [[(row ^ col) % 3 | 0xFF_00_00_00 for col in range(8)] for row in range(8)]
        tile_grid = TileGrid.build(grid, tile_size=4)
        assert verify_tile_grid(tile_grid) == {}
        assert_valid_tile_grid(tile_grid)

    def test_verification_failure(self):
        tile_grid = TileGrid.build(banded([[RED]]), tile_size=4)
        tile = tile_grid.tiles[0]
        broken = TileGrid(
            tile_grid.grid,
            4,
            (Tile(tile.coordinates, tile.grid, (Shape(0, 4, 0, 3, RED),)),),
        )
        assert (1, 1) in verify_tile_grid(broken)
        with pytest.raises(VerificationError):
            assert_valid_tile_grid(broken)
