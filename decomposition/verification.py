"""
Post-condition checks on decomposed tiles.

Each check returns the list of problems found, empty when the tile is sound:
    - check_covering: every unit cell is covered by exactly one shape
    - check_color_fidelity: the covering shape has the normalized pixel color
    - check_merge_soundness: no two shapes should have been merged
"""

from itertools import combinations

from colors import colors_match, normalize
from constants import TRANSPARENCY_THRESHOLD
from rectangles import coverage

from .tile import Tile
from .tile_grid import TileGrid


class VerificationError(AssertionError):
    """Raised when a decomposition breaks one of its invariants."""

    pass


def check_covering(tile: Tile) -> list[str]:
    counts = coverage(tile.shapes)
    problems = []
    for x in range(tile.size):
        for y in range(tile.size):
            count = counts.get((x, y), 0)
            if count != 1:
                problems.append(f"Cell ({x}, {y}) covered {count} times")
    outside = [cell for cell in counts if not all(0 <= v < tile.size for v in cell)]
    if outside:
        problems.append(f"Cells outside the tile are covered: {sorted(outside)}")
    return problems


def check_color_fidelity(
    tile: Tile, threshold: int = TRANSPARENCY_THRESHOLD
) -> list[str]:
    problems = []
    for shape in tile.shapes:
        for x in range(shape.x_min, shape.x_max):
            for y in range(shape.y_min, shape.y_max):
                # Back to the top-down row of the source grid
                expected = normalize(tile.pixel(x, tile.size - 1 - y), threshold)
                if shape.color != expected:
                    problems.append(
                        f"Cell ({x}, {y}) is 0x{expected:08X} but covered by {shape}"
                    )
    return problems


def check_merge_soundness(tile: Tile) -> list[str]:
    problems = []
    for first, second in combinations(tile.shapes, 2):
        lower, upper = sorted((first, second), key=lambda shape: shape.y_min)
        if (
            lower.same_span(upper)
            and lower.y_max == upper.y_min
            and colors_match(lower.color, upper.color)
        ):
            problems.append(f"{lower} and {upper} should have been merged")
    return problems


def verify_tile(tile: Tile, threshold: int = TRANSPARENCY_THRESHOLD) -> list[str]:
    return (
        check_covering(tile)
        + check_color_fidelity(tile, threshold)
        + check_merge_soundness(tile)
    )


def verify_tile_grid(
    tile_grid: TileGrid, threshold: int = TRANSPARENCY_THRESHOLD
) -> dict[tuple[int, int], list[str]]:
    """Problems of every unsound tile, keyed by tile position."""
    report = {}
    for tile in tile_grid:
        problems = verify_tile(tile, threshold)
        if problems:
            report[tile.position()] = problems
    return report


def assert_valid_tile_grid(
    tile_grid: TileGrid, threshold: int = TRANSPARENCY_THRESHOLD
) -> None:
    report = verify_tile_grid(tile_grid, threshold)
    if report:
        position, problems = next(iter(report.items()))
        raise VerificationError(
            f"{len(report)} unsound tiles, first at {position}: {problems[0]}"
        )


__all__ = [
    "VerificationError",
    "check_covering",
    "check_color_fidelity",
    "check_merge_soundness",
    "verify_tile",
    "verify_tile_grid",
    "assert_valid_tile_grid",
]
