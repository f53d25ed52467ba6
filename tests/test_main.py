"""End to end tests of the command line."""

import pytest
from PIL import Image

from constants import DEFAULT_OUTPUT_NAME
from main import build_parser, config_from_args, main, output_path
from ordering import AscendFrom


@pytest.fixture
def sprite(tmp_path):
    """20x20 image: red top half, transparent bottom half."""
    path = tmp_path / "sprite.png"
    image = Image.new("RGBA", (20, 20), (0, 0, 0, 0))
    for x in range(20):
        for y in range(10):
            image.putpixel((x, y), (255, 0, 0, 255))
    image.save(path)
    return path


class TestOutputPath:
    def test_directory_gets_default_name(self, tmp_path):
        assert output_path(tmp_path) == tmp_path / DEFAULT_OUTPUT_NAME

    def test_file_is_kept(self, tmp_path):
        target = tmp_path / "nested" / "out.txt"
        assert output_path(target) == target
        assert target.parent.is_dir()


class TestArguments:
    def test_defaults(self):
        args = build_parser().parse_args(["image.png"])
        config = config_from_args(args)
        assert config.light_level == 0
        assert config.placeholder is False
        assert config.ascend_from is AscendFrom.LOW_Y_LOW_X
        assert config.method == "auto"

    def test_options(self):
        args = build_parser().parse_args(
            ["image.png", "--empty", "yes", "--width", "64", "--ascend-from", "high-y-low-x"]
        )
        config = config_from_args(args)
        assert config.placeholder is True
        assert config.width == 64
        assert config.ascend_from is AscendFrom.HIGH_Y_LOW_X


class TestMain:
    def test_writes_visible_tiles(self, sprite, tmp_path):
        assert main([str(sprite), "-o", str(tmp_path), "--verify"]) == 0
        lines = (tmp_path / DEFAULT_OUTPUT_NAME).read_text().splitlines()
        # Padded to 32x32, red covers rows 6 to 15: only the top band of tiles
        assert len(lines) == 2
        assert lines[0].startswith('{tooltip="x: 1, y: 2",lightLevel=0,listShape={')
        assert "tint=0xFF0000" in lines[0]

    def test_placeholders(self, sprite, tmp_path):
        target = tmp_path / "out.lc3p"
        assert main([str(sprite), "-o", str(target), "--empty", "t", "--light-level", "3"]) == 0
        lines = target.read_text().splitlines()
        assert len(lines) == 4
        assert lines[0] == '{tooltip="x: 1, y: 1",lightLevel=3,listShape={}}'

    def test_invalid_light_level(self, sprite, tmp_path):
        assert main([str(sprite), "-o", str(tmp_path), "--light-level", "9"]) == 1
        assert not (tmp_path / DEFAULT_OUTPUT_NAME).exists()

    def test_unwritable_output(self, sprite, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("")
        assert main([str(sprite), "-o", str(blocker / "out.lc3p")]) == 1

    def test_missing_image(self, tmp_path):
        assert main([str(tmp_path / "missing.png"), "-o", str(tmp_path)]) == 1

    def test_preview(self, sprite, tmp_path, capsys):
        assert main([str(sprite), "-o", str(tmp_path), "--preview", "--workers", "2"]) == 0
        assert "Tile x: 1, y: 2" in capsys.readouterr().out
