"""Tests for config.py"""

import pytest

from config import (
    FormatterConfig,
    InvalidConfigurationError,
    parse_empty_setting,
    validate_light_level,
)


class TestLightLevel:
    @pytest.mark.parametrize("level", [0, 4, 8])
    def test_valid(self, level):
        assert validate_light_level(level) == level

    @pytest.mark.parametrize("level", [-1, 9, 100])
    def test_invalid(self, level):
        with pytest.raises(InvalidConfigurationError):
            validate_light_level(level)


class TestEmptySetting:
    @pytest.mark.parametrize("setting", [None, "0", "n", "F", "false", "FALSE"])
    def test_disabled(self, setting):
        assert parse_empty_setting(setting) is False

    @pytest.mark.parametrize("setting", ["1", "y", "true", "yes", "anything"])
    def test_enabled(self, setting):
        assert parse_empty_setting(setting) is True


class TestFormatterConfig:
    def test_defaults_are_valid(self):
        config = FormatterConfig().validate()
        assert config.tile_size == 16
        assert config.threshold == 0xD0
        assert not config.resizes()

    @pytest.mark.parametrize(
        "changes",
        [
            {"light_level": 9},
            {"tile_size": 0},
            {"threshold": 256},
            {"width": -1},
            {"workers": 0},
        ],
    )
    def test_invalid(self, changes):
        with pytest.raises(InvalidConfigurationError):
            FormatterConfig(**changes).validate()

    def test_resizes(self):
        assert FormatterConfig(height=10).resizes()
