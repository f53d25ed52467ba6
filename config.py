"""
Configuration of a formatting run.
"""

from dataclasses import dataclass

from constants import (
    DEFAULT_LIGHT_LEVEL,
    FALSY_SETTINGS,
    MAX_LIGHT_LEVEL,
    MIN_LIGHT_LEVEL,
    TILE_SIZE,
    TRANSPARENCY_THRESHOLD,
)
from ordering import DEFAULT_ASCEND_FROM, AscendFrom


class InvalidConfigurationError(ValueError):
    """Raised when a configuration value is out of its allowed range."""

    pass


def validate_light_level(light_level: int) -> int:
    if not MIN_LIGHT_LEVEL <= light_level <= MAX_LIGHT_LEVEL:
        raise InvalidConfigurationError(
            f"Light level must be between {MIN_LIGHT_LEVEL} and {MAX_LIGHT_LEVEL}"
            f" (inclusive), got {light_level}"
        )
    return light_level


def parse_empty_setting(setting: str | None) -> bool:
    """
    Whether empty tiles get a placeholder line.

    Absent settings and "0", "n", "f", "false" (any case) disable placeholders,
    anything else enables them.
    """
    if setting is None:
        return False
    return setting.strip().lower() not in FALSY_SETTINGS


@dataclass(frozen=True)
class FormatterConfig:
    tile_size: int = TILE_SIZE
    threshold: int = TRANSPARENCY_THRESHOLD
    light_level: int = DEFAULT_LIGHT_LEVEL
    placeholder: bool = False
    ascend_from: AscendFrom = DEFAULT_ASCEND_FROM
    # Resizing, 0 keeps the dimension
    width: int = 0
    height: int = 0
    method: str = "auto"
    workers: int = 1
    verify: bool = False

    def validate(self) -> "FormatterConfig":
        validate_light_level(self.light_level)
        if self.tile_size < 1:
            raise InvalidConfigurationError(
                f"Tile size must be at least 1, got {self.tile_size}"
            )
        if not 0 <= self.threshold <= 0xFF:
            raise InvalidConfigurationError(
                f"Transparency threshold must be within [0, 255], got {self.threshold}"
            )
        if self.width < 0 or self.height < 0:
            raise InvalidConfigurationError(
                f"Resize dimensions cannot be negative, got {self.width}x{self.height}"
            )
        if self.workers < 1:
            raise InvalidConfigurationError(
                f"At least one worker is needed, got {self.workers}"
            )
        return self

    def resizes(self) -> bool:
        return self.width > 0 or self.height > 0


__all__ = [
    "InvalidConfigurationError",
    "validate_light_level",
    "parse_empty_setting",
    "FormatterConfig",
]
