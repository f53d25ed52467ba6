"""
Export of shapes and tiles to the text format read by the scripting layer.

Shapes are Lua-style tables, colors as six uppercase hex digits:
    {minX=0,minY=15,maxX=1,maxY=16,tint=0xABCDEF}

Tiles wrap their shapes with a tooltip naming their position:
    {tooltip="x: 1, y: 2",lightLevel=0,listShape={<shape>,<shape>}}

A tile grid is exported as one tile per line. Transparent shapes are never
exported, and tiles without any visible shape are either omitted or kept as a
placeholder with an empty shape list.
"""

from collections.abc import Iterator

from colors import to_hex
from config import validate_light_level
from constants import DEFAULT_LIGHT_LEVEL
from decomposition import Tile, TileGrid
from rectangles import Shape


def export_shape(shape: Shape) -> str | None:
    """Text of a shape, None if the shape is transparent."""
    if shape.is_transparent():
        return None
    return (
        f"{{minX={shape.x_min},minY={shape.y_min},"
        f"maxX={shape.x_max},maxY={shape.y_max},"
        f"tint=0x{to_hex(shape.color)}}}"
    )


def tooltip(tile: Tile) -> str:
    col, row = tile.coordinates
    return f'"x: {col}, y: {row}"'


def export_tile(
    tile: Tile, light_level: int = DEFAULT_LIGHT_LEVEL, placeholder: bool = False
) -> str | None:
    """
    Text of a tile and its visible shapes, in ordering order.

    Returns:
        None for a tile without visible shapes, unless placeholder is set.

    Raises:
        InvalidConfigurationError: if the light level is outside [0, 8].
    """
    validate_light_level(light_level)

    shapes = [text for text in map(export_shape, tile.shapes) if text is not None]
    if not shapes and not placeholder:
        return None

    return (
        f"{{tooltip={tooltip(tile)},lightLevel={light_level},"
        f"listShape={{{','.join(shapes)}}}}}"
    )


def iter_export_lines(
    tile_grid: TileGrid,
    light_level: int = DEFAULT_LIGHT_LEVEL,
    placeholder: bool = False,
) -> Iterator[str]:
    validate_light_level(light_level)
    for tile in tile_grid:
        line = export_tile(tile, light_level, placeholder)
        if line is not None:
            yield line


def export_lines(
    tile_grid: TileGrid,
    light_level: int = DEFAULT_LIGHT_LEVEL,
    placeholder: bool = False,
) -> list[str]:
    return list(iter_export_lines(tile_grid, light_level, placeholder))


def export_tile_grid(
    tile_grid: TileGrid,
    light_level: int = DEFAULT_LIGHT_LEVEL,
    placeholder: bool = False,
) -> str:
    """One line per exported tile, in ordering order of the tile positions."""
    return "\n".join(iter_export_lines(tile_grid, light_level, placeholder))


__all__ = [
    "export_shape",
    "tooltip",
    "export_tile",
    "iter_export_lines",
    "export_lines",
    "export_tile_grid",
]
