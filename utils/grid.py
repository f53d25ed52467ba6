r"""
Grid Processing Helpers

Operations on the functional representation of an image: a ColorGrid,
indexed grid[row][col] with rows top-down, as read from an image.

    1\ GridOperations: constructors and slicing
    2\ dimension checks raising InvalidDimensionsError
"""

from localtypes import Color, ColorGrid, FrozenGrid, Proportions


class InvalidDimensionsError(ValueError):
    """Raised when a grid does not have the dimensions an operation requires."""

    pass


# Grid Base Operations
class GridOperations:
    """Basic grid operations and constructors"""

    # Constructors
    @staticmethod
    def filled(height: int, width: int, color: Color = 0) -> ColorGrid:
        return [[color for _ in range(width)] for _ in range(height)]

    @staticmethod
    def freeze(grid: ColorGrid) -> FrozenGrid:
        """Immutable copy of a grid."""
        return tuple(tuple(row) for row in grid)

    # Operations
    @staticmethod
    def proportions(grid: ColorGrid | FrozenGrid) -> Proportions:
        """
        Proportions of a grid, checking every row has the same length.
        """
        if not grid or not grid[0]:
            raise InvalidDimensionsError("The grid is empty")
        width = len(grid[0])
        for index, row in enumerate(grid):
            if len(row) != width:
                raise InvalidDimensionsError(
                    f"Row {index} has {len(row)} pixels, expected {width}"
                )
        return Proportions(width, len(grid))

    @staticmethod
    def sub_grid(
        grid: ColorGrid | FrozenGrid, col_min: int, row_min: int, width: int, height: int
    ) -> ColorGrid:
        """Slice `height` rows of `width` pixels starting at (col_min, row_min)."""
        return [
            list(grid[row][col_min : col_min + width])
            for row in range(row_min, row_min + height)
        ]


def check_size(size: int) -> None:
    if size < 1:
        raise InvalidDimensionsError(f"Tile size must be at least 1, got {size}")


def check_square(grid: ColorGrid, size: int) -> None:
    """Raise unless the grid is exactly size x size."""
    check_size(size)
    width, height = GridOperations.proportions(grid)
    if (width, height) != (size, size):
        raise InvalidDimensionsError(
            f"A tile must be {size}x{size}, got {width}x{height}"
        )


def check_multiple_of(grid: ColorGrid, size: int) -> Proportions:
    """Raise unless both grid dimensions are multiples of size."""
    check_size(size)
    width, height = GridOperations.proportions(grid)
    if width % size or height % size:
        raise InvalidDimensionsError(
            f"Grid of {width}x{height} is not a multiple of {size}x{size}"
        )
    return Proportions(width, height)


__all__ = [
    "InvalidDimensionsError",
    "GridOperations",
    "check_size",
    "check_square",
    "check_multiple_of",
]
