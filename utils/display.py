"""
Terminal previews of decomposed tiles, rendered with rich.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from colors import unpack_argb
from decomposition import Tile, TileGrid
from export import export_shape

# Background of transparent cells
TRANSPARENT_STYLE = "on rgb(85,85,85)"


def shapes_to_cells(tile: Tile) -> list[list[int | None]]:
    """
    Index of the shape covering each cell, rows top-down as in the source.
    """
    cells: list[list[int | None]] = [[None] * tile.size for _ in range(tile.size)]
    for index, shape in enumerate(tile.shapes):
        for x in range(shape.x_min, shape.x_max):
            for y in range(shape.y_min, shape.y_max):
                cells[tile.size - 1 - y][x] = index
    return cells


def tile_to_rich_text(tile: Tile, cell_width: int = 2) -> Text:
    """Colored blocks of the tile, each cell labelled by its shape index."""
    text = Text()
    for row in shapes_to_cells(tile):
        for index in row:
            if index is None or tile.shapes[index].is_transparent():
                text.append(" " * cell_width, style=TRANSPARENT_STYLE)
                continue
            r, g, b, _ = unpack_argb(tile.shapes[index].color)
            label = f"{index % 100:>{cell_width}}"[-cell_width:]
            # Dark labels on light colors
            ink = "black" if r + g + b > 384 else "white"
            text.append(label, style=f"{ink} on rgb({r},{g},{b})")
        text.append("\n")
    return text


def shapes_table(tile: Tile) -> Table:
    col, row = tile.coordinates
    table = Table(title=f"Tile x: {col}, y: {row}")
    table.add_column("#", justify="right")
    table.add_column("x")
    table.add_column("y")
    table.add_column("export")
    for index, shape in enumerate(tile.shapes):
        table.add_row(
            str(index),
            f"[{shape.x_min}, {shape.x_max})",
            f"[{shape.y_min}, {shape.y_max})",
            export_shape(shape) or "transparent",
        )
    return table


def display_tile(tile: Tile, console: Console | None = None) -> None:
    console = console or Console()
    console.print(tile_to_rich_text(tile))
    console.print(shapes_table(tile))


def display_tile_grid(
    tile_grid: TileGrid, console: Console | None = None, include_empty: bool = False
) -> None:
    console = console or Console()
    for tile in tile_grid:
        if tile.is_empty() and not include_empty:
            continue
        display_tile(tile, console)


__all__ = [
    "shapes_to_cells",
    "tile_to_rich_text",
    "shapes_table",
    "display_tile",
    "display_tile_grid",
]
