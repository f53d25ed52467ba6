"""
Convert an image into tile records of single-color rectangles.

Usage:
    python main.py IMAGE [-o OUTPUT] [--empty SETTING] [--width W] [--height H]
                   [--method M] [--light-level L] [--verify] [--preview]

The output is written one tile per line, to OUTPUT or to the home directory.
When OUTPUT is a directory, the records go to MCIFout.lc3p inside it.
"""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from config import FormatterConfig, InvalidConfigurationError, parse_empty_setting
from constants import DEFAULT_LIGHT_LEVEL, DEFAULT_OUTPUT_NAME, TILE_SIZE
from decomposition import (
    InvalidDimensionsError,
    TileGrid,
    VerificationError,
    assert_valid_tile_grid,
)
from export import iter_export_lines
from ordering import AscendFrom
from utils.display import display_tile_grid
from utils.image import ImageLoadError, prepare_grid

logger = logging.getLogger(__name__)


def output_path(path: str | Path | None) -> Path:
    """
    File the records are written to, created along with its missing parents.
    """
    target = Path(path) if path is not None else Path.home()
    if target.is_dir():
        target = target / DEFAULT_OUTPUT_NAME
    target.parent.mkdir(parents=True, exist_ok=True)
    return target


def convert(image_path: str | Path, config: FormatterConfig) -> TileGrid:
    """Load, tile and decompose an image."""
    config.validate()
    grid = prepare_grid(image_path, config)
    tile_grid = TileGrid.build(
        grid,
        tile_size=config.tile_size,
        threshold=config.threshold,
        ascend_from=config.ascend_from,
        workers=config.workers,
    )
    if config.verify:
        assert_valid_tile_grid(tile_grid, config.threshold)
        logger.info("All %d tiles are soundly decomposed", len(tile_grid))
    return tile_grid


def write_tile_grid(tile_grid: TileGrid, target: Path, config: FormatterConfig) -> int:
    """Write one record per line, returns the number of records written."""
    count = 0
    with open(target, "w", encoding="ascii", newline="\n") as file:
        for line in iter_export_lines(tile_grid, config.light_level, config.placeholder):
            file.write(line + "\n")
            count += 1
    return count


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Convert an image into tiles of single-color rectangles"
    )
    parser.add_argument("image", help="Image to convert")
    parser.add_argument(
        "-o", "--output", default=None, help="Output file or directory (default: home)"
    )
    parser.add_argument(
        "--empty",
        default=None,
        help="Emit placeholders for empty tiles, unless one of 0, n, f, false",
    )
    parser.add_argument("--width", type=int, default=0, help="Resize to this width")
    parser.add_argument("--height", type=int, default=0, help="Resize to this height")
    parser.add_argument(
        "--method",
        default=None,
        help="Resize method: auto, speed, balanced, quality, ultra_quality or 0-4",
    )
    parser.add_argument(
        "--light-level", type=int, default=DEFAULT_LIGHT_LEVEL, help="Light level (0-8)"
    )
    parser.add_argument("--tile-size", type=int, default=TILE_SIZE, help="Tile side")
    parser.add_argument(
        "--ascend-from",
        choices=[convention.value for convention in AscendFrom],
        default=AscendFrom.LOW_Y_LOW_X.value,
        help="Corner of the first tile and shape",
    )
    parser.add_argument("--workers", type=int, default=1, help="Decomposition threads")
    parser.add_argument(
        "--verify", action="store_true", help="Check every tile decomposition"
    )
    parser.add_argument(
        "--preview", action="store_true", help="Print the decomposed tiles"
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def config_from_args(args: argparse.Namespace) -> FormatterConfig:
    return FormatterConfig(
        tile_size=args.tile_size,
        light_level=args.light_level,
        placeholder=parse_empty_setting(args.empty),
        ascend_from=AscendFrom(args.ascend_from),
        width=args.width,
        height=args.height,
        method=args.method or "auto",
        workers=args.workers,
        verify=args.verify,
    )


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s | %(message)s")
    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        config = config_from_args(args).validate()
        tile_grid = convert(args.image, config)
        target = output_path(args.output)
        count = write_tile_grid(tile_grid, target, config)
    except (
        OSError,
        ImageLoadError,
        InvalidConfigurationError,
        InvalidDimensionsError,
        VerificationError,
    ) as e:
        logger.error("%s", e)
        return 1

    logger.info("Wrote %d of %d tiles to %s", count, len(tile_grid), target)
    if args.preview:
        display_tile_grid(tile_grid)
    return 0


if __name__ == "__main__":
    sys.exit(main())
