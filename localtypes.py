"""
Type definitions for tile decomposition.

Coordinate Convention:
    Grids are indexed as grid[row][col], rows top-down as they come out of
    an image. Shapes and tile positions are expressed bottom-up:
    - x / col: increases rightward
    - y / row: increases upward

Color Convention:
    Colors are 32-bit packed ARGB integers (0xAARRGGBB).
"""

from typing import NamedTuple


# =============================================================================
# Color Types
# =============================================================================

type Color = int
"""Packed 0xAARRGGBB color."""


# =============================================================================
# Grid Types
# =============================================================================

type ColorGrid = list[list[Color]]
"""2D grid indexed as grid[row][col] -> Color."""

type FrozenGrid = tuple[tuple[Color, ...], ...]
"""Immutable ColorGrid, held by tiles and tile grids."""


# =============================================================================
# Coordinate Types
# =============================================================================


class Coord(NamedTuple):
    """Unit cell of a tile in (x, y) format, y bottom-up."""

    x: int
    y: int


class GridPosition(NamedTuple):
    """1-based (col, row) position of a tile inside its grid, row bottom-up."""

    col: int
    row: int


class Proportions(NamedTuple):
    """Grid dimensions."""

    width: int
    height: int


__all__ = [
    "Color",
    "ColorGrid",
    "FrozenGrid",
    "Coord",
    "GridPosition",
    "Proportions",
]
