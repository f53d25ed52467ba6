"""
Global constants used throughout the project
"""

from typing import Final

# Tiles are square slices of this many pixels per side
TILE_SIZE: Final[int] = 16

# Alpha channel at or above this value is opaque, below it is transparent
TRANSPARENCY_THRESHOLD: Final[int] = 0xD0

ALPHA_SHIFT: Final[int] = 24
ALPHA_DROP_MASK: Final[int] = 0x00_FF_FF_FF
ALPHA_PUMP_MASK: Final[int] = 0xFF_00_00_00

# Transparent sentinel of a normalized color
TRANSPARENT: Final[int] = 0

MIN_LIGHT_LEVEL: Final[int] = 0
MAX_LIGHT_LEVEL: Final[int] = 8
DEFAULT_LIGHT_LEVEL: Final[int] = 0

DEFAULT_OUTPUT_NAME: Final[str] = "MCIFout.lc3p"

# Values of the placeholder setting that keep placeholders disabled
FALSY_SETTINGS: Final[frozenset[str]] = frozenset({"0", "n", "f", "false"})
