"""
Color rules for decomposition.

A pixel's alpha channel never survives as a partial value: it collapses to a
binary transparent / opaque decision against a threshold. Normalized colors
are therefore either the transparent sentinel (0) or a fully opaque ARGB value,
and every equivalence check is done on normalized colors.

Two pixels are merged into the same shape when their normalized colors match:
    - both transparent, or
    - both opaque with the same RGB channels.
"""

from constants import (
    ALPHA_DROP_MASK,
    ALPHA_PUMP_MASK,
    ALPHA_SHIFT,
    TRANSPARENCY_THRESHOLD,
    TRANSPARENT,
)
from localtypes import Color, ColorGrid


def alpha(argb: Color) -> int:
    return (argb >> ALPHA_SHIFT) & 0xFF


def is_transparent(argb: Color, threshold: int = TRANSPARENCY_THRESHOLD) -> bool:
    """Mostly transparent pixels are dropped, not only those with alpha == 0."""
    return alpha(argb) < threshold


def normalize(argb: Color, threshold: int = TRANSPARENCY_THRESHOLD) -> Color:
    """
    Collapse a raw ARGB color to its normalized form.

    Returns:
        The transparent sentinel if the pixel is transparent,
        the pixel with its alpha channel pumped to 0xFF otherwise.
    """
    if is_transparent(argb, threshold):
        return TRANSPARENT
    return (argb | ALPHA_PUMP_MASK) & 0xFF_FF_FF_FF


def strip_alpha(argb: Color) -> int:
    """Drop the alpha channel, keeping the RRGGBB bits only."""
    return argb & ALPHA_DROP_MASK


def rgb_equivalent(a: Color, b: Color) -> bool:
    return strip_alpha(a) == strip_alpha(b)


def colors_match(a: Color, b: Color) -> bool:
    """
    Merge predicate on normalized colors.

    Opaque black (0xFF000000) and the transparent sentinel share their RGB bits,
    so the opacity status is compared as well.
    """
    return rgb_equivalent(a, b) and (a == TRANSPARENT) == (b == TRANSPARENT)


def pack_argb(red: int, green: int, blue: int, alpha: int = 0xFF) -> Color:
    for channel in (red, green, blue, alpha):
        if not 0 <= channel <= 0xFF:
            raise ValueError(f"Channel value {channel} is outside the [0, 255] range")
    return (alpha << 24) | (red << 16) | (green << 8) | blue


def unpack_argb(argb: Color) -> tuple[int, int, int, int]:
    """Returns (red, green, blue, alpha)."""
    return (
        (argb >> 16) & 0xFF,
        (argb >> 8) & 0xFF,
        argb & 0xFF,
        alpha(argb),
    )


def to_hex(argb: Color) -> str:
    """Six uppercase hex digits of the RGB channels."""
    return f"{strip_alpha(argb):06X}"


def correct_alpha(grid: ColorGrid, threshold: int = TRANSPARENCY_THRESHOLD) -> ColorGrid:
    """Normalize every pixel of a grid."""
    return [[normalize(color, threshold) for color in row] for row in grid]


__all__ = [
    "alpha",
    "is_transparent",
    "normalize",
    "strip_alpha",
    "rgb_equivalent",
    "colors_match",
    "pack_argb",
    "unpack_argb",
    "to_hex",
    "correct_alpha",
]
