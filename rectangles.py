"""
Shapes are the single-color, axis-aligned rectangles a tile is made of.

A shape lives inside a square tile of side S and is described by its
half-open bounds [x_min, x_max) x [y_min, y_max), with y bottom-up.
Points are shapes: the smallest shape covers a single unit cell.

Shapes are value objects: two shapes with the same bounds and color are
interchangeable.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, replace

from constants import TILE_SIZE, TRANSPARENT
from localtypes import Color, Coord

type Bounds = tuple[int, int, int, int]  # (x_min, x_max, y_min, y_max)


@dataclass(frozen=True, slots=True)
class Shape:
    """
    Rectangle of one normalized color inside a tile.

    Attributes:
        x_min, x_max: horizontal bounds, 0 <= x_min < x_max <= tile size
        y_min, y_max: vertical bounds, 0 <= y_min < y_max <= tile size
        color: normalized color, 0 for a fully transparent shape
    """

    x_min: int
    x_max: int
    y_min: int
    y_max: int
    color: Color

    @classmethod
    def checked(
        cls,
        x_min: int,
        x_max: int,
        y_min: int,
        y_max: int,
        color: Color,
        tile_size: int = TILE_SIZE,
    ) -> "Shape":
        """Build a shape, validating its bounds against the tile size."""
        for low, high, axis in ((x_min, x_max, "x"), (y_min, y_max, "y")):
            if not 0 <= low < tile_size:
                raise ValueError(f"Invalid minimum {axis} dimension: {low}")
            if not 1 <= high <= tile_size or high <= low:
                raise ValueError(f"Invalid maximum {axis} dimension: {high}")
        return cls(x_min, x_max, y_min, y_max, color)

    def position(self) -> tuple[int, int]:
        return (self.x_min, self.y_min)

    def bounds(self) -> Bounds:
        return (self.x_min, self.x_max, self.y_min, self.y_max)

    def width(self) -> int:
        return self.x_max - self.x_min

    def height(self) -> int:
        return self.y_max - self.y_min

    def area(self) -> int:
        return self.width() * self.height()

    def is_transparent(self) -> bool:
        return self.color == TRANSPARENT

    def contains(self, x: int, y: int) -> bool:
        return self.x_min <= x < self.x_max and self.y_min <= y < self.y_max

    def same_span(self, other: "Shape") -> bool:
        return self.x_min == other.x_min and self.x_max == other.x_max

    def extended_to(self, y_max: int) -> "Shape":
        return replace(self, y_max=y_max)

    def __str__(self) -> str:
        return (
            f"Shape([{self.x_min}, {self.x_max}) x [{self.y_min}, {self.y_max}),"
            f" 0x{self.color:08X})"
        )


def iter_cells(shape: Shape) -> Iterator[Coord]:
    return (
        Coord(x, y)
        for x in range(shape.x_min, shape.x_max)
        for y in range(shape.y_min, shape.y_max)
    )


def coverage(shapes: Iterable[Shape]) -> dict[Coord, int]:
    """Number of shapes covering each unit cell."""
    counts: dict[Coord, int] = {}
    for shape in shapes:
        for cell in iter_cells(shape):
            counts[cell] = counts.get(cell, 0) + 1
    return counts


def total_area(shapes: Iterable[Shape]) -> int:
    return sum(shape.area() for shape in shapes)


__all__ = [
    "Bounds",
    "Shape",
    "iter_cells",
    "coverage",
    "total_area",
]
