"""
Rectangle decomposition of pixel grids.

**Runs** (runs.py)
    First pass: every row is cut into maximal runs of one normalized color.
    - horizontal_runs(grid) -> runs

**Merge** (merge.py)
    Second pass: runs of identical span and color stacked on top of each
    other are merged.
    - vertical_merge(runs) -> shapes

**Tile** (tile.py)
    A square slice of an image and its shapes.
    - decompose_tile(grid) -> shapes

**Tile grid** (tile_grid.py)
    An image-sized grid partitioned into tiles.
    - split_grid(grid) -> (position, slice) pairs

**Verification** (verification.py)
    Covering, color fidelity and merge soundness checks.
"""

from utils.grid import InvalidDimensionsError

from .merge import vertical_merge
from .runs import horizontal_runs, row_to_runs
from .tile import Tile, decompose_tile
from .tile_grid import TileGrid, split_grid
from .verification import (
    VerificationError,
    assert_valid_tile_grid,
    check_color_fidelity,
    check_covering,
    check_merge_soundness,
    verify_tile,
    verify_tile_grid,
)

__all__ = [
    "InvalidDimensionsError",
    # Runs
    "horizontal_runs",
    "row_to_runs",
    # Merge
    "vertical_merge",
    # Tile
    "Tile",
    "decompose_tile",
    # Tile grid
    "TileGrid",
    "split_grid",
    # Verification
    "VerificationError",
    "check_covering",
    "check_color_fidelity",
    "check_merge_soundness",
    "verify_tile",
    "verify_tile_grid",
    "assert_valid_tile_grid",
]
