"""
Image loading, resizing and padding.

Images are read with Pillow and turned into ColorGrids of packed ARGB
integers. Decomposition requires dimensions that are multiples of the tile
size, so images are grown to the next multiple, centered, with transparent
pixels.
"""

import logging
from enum import Enum
from pathlib import Path

import numpy as np
from PIL import Image

from colors import correct_alpha
from config import FormatterConfig, InvalidConfigurationError
from localtypes import ColorGrid

logger = logging.getLogger(__name__)


class ImageLoadError(OSError):
    """Raised when an image cannot be read or decoded."""

    pass


class ResizeMode(Enum):
    FIT_EXACT = "fit_exact"  # Both dimensions given
    FIT_TO_WIDTH = "fit_to_width"  # Height follows the aspect ratio
    FIT_TO_HEIGHT = "fit_to_height"  # Width follows the aspect ratio


class ResizeMethod(Enum):
    """Resizing methods, by increasing quality. Their index is a valid alias."""

    AUTO = Image.Resampling.BICUBIC
    SPEED = Image.Resampling.NEAREST
    BALANCED = Image.Resampling.BILINEAR
    QUALITY = Image.Resampling.HAMMING
    ULTRA_QUALITY = Image.Resampling.LANCZOS


def load_image(path: str | Path) -> Image.Image:
    try:
        with Image.open(path) as image:
            return image.convert("RGBA")
    except OSError as e:
        raise ImageLoadError(f"Cannot read image {path}: {e}") from e


def image_to_grid(image: Image.Image) -> ColorGrid:
    """Row-major grid of packed 0xAARRGGBB colors."""
    rgba = np.asarray(image.convert("RGBA"), dtype=np.uint32)
    red, green, blue, alpha = (rgba[:, :, channel] for channel in range(4))
    argb = (alpha << 24) | (red << 16) | (green << 8) | blue
    return argb.tolist()


def grid_to_image(grid: ColorGrid) -> Image.Image:
    argb = np.asarray(grid, dtype=np.uint32)
    rgba = np.stack(
        [(argb >> 16) & 0xFF, (argb >> 8) & 0xFF, argb & 0xFF, (argb >> 24) & 0xFF],
        axis=-1,
    ).astype(np.uint8)
    return Image.fromarray(rgba)


def choose_mode(width: int, height: int) -> ResizeMode:
    if width > 0:
        if height > 0:
            return ResizeMode.FIT_EXACT
        return ResizeMode.FIT_TO_WIDTH
    if height > 0:
        return ResizeMode.FIT_TO_HEIGHT
    raise InvalidConfigurationError("No resizing options found")


def parse_method(name: str | None) -> ResizeMethod:
    """
    Resize method from its name (any case) or its index, "0" when absent.
    """
    method = (name or "0").strip()
    methods = list(ResizeMethod)
    if method.isdigit() and len(method) == 1 and int(method) < len(methods):
        return methods[int(method)]
    try:
        return ResizeMethod[method.upper()]
    except KeyError:
        raise InvalidConfigurationError(f"Unknown resize method: {name}") from None


def resize_image(
    image: Image.Image, width: int = 0, height: int = 0, method: str | None = None
) -> Image.Image:
    mode = choose_mode(width, height)
    resample = parse_method(method).value
    source_width, source_height = image.size

    match mode:
        case ResizeMode.FIT_EXACT:
            size = (width, height)
        case ResizeMode.FIT_TO_WIDTH:
            size = (width, max(1, round(source_height * width / source_width)))
        case ResizeMode.FIT_TO_HEIGHT:
            size = (max(1, round(source_width * height / source_height)), height)

    logger.debug("Resizing %s to %s (%s)", image.size, size, mode.value)
    return image.resize(size, resample)


def pad_image(image: Image.Image, tile_size: int) -> Image.Image:
    """
    Grow the image to the next multiple of tile_size in each dimension,
    centering it on a transparent background.
    """
    width, height = image.size
    padded_width = -(-width // tile_size) * tile_size
    padded_height = -(-height // tile_size) * tile_size
    if (padded_width, padded_height) == (width, height):
        return image

    logger.debug(
        "Padding %dx%d to %dx%d", width, height, padded_width, padded_height
    )
    padded = Image.new("RGBA", (padded_width, padded_height), (0, 0, 0, 0))
    padded.paste(
        image.convert("RGBA"),
        ((padded_width - width) // 2, (padded_height - height) // 2),
    )
    return padded


def prepare_grid(path: str | Path, config: FormatterConfig) -> ColorGrid:
    """Load an image and turn it into a grid ready to be tiled."""
    image = load_image(path)
    logger.info("Loaded %s (%dx%d)", path, *image.size)
    if config.resizes():
        image = resize_image(image, config.width, config.height, config.method)
    image = pad_image(image, config.tile_size)
    return correct_alpha(image_to_grid(image), config.threshold)


__all__ = [
    "ImageLoadError",
    "ResizeMode",
    "ResizeMethod",
    "load_image",
    "image_to_grid",
    "grid_to_image",
    "choose_mode",
    "parse_method",
    "resize_image",
    "pad_image",
    "prepare_grid",
]
