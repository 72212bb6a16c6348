"""
Tests for the headless command line entry point.
"""

import pytest
from PIL import Image

from squarepad.cli import main


class TestCli:
    def test_writes_square_png(self, png_file, tmp_path, capsys):
        source = png_file("wide.png", 400, 200)
        output = tmp_path / "out.png"

        assert main([str(source), "-o", str(output)]) == 0

        with Image.open(output) as result:
            assert result.size == (400, 400)
            assert result.convert("RGBA").getpixel((0, 0)) == (250, 0, 0, 255)
        out = capsys.readouterr().out.splitlines()
        assert out == ["Размер: 400 × 400px | Соотношение сторон: 1:1 | Фон: rgb(250, 0, 0)"]

    def test_compact_and_data_uri(self, png_file, tmp_path, capsys):
        source = png_file("tall.png", 20, 50, (0, 200, 0, 255))
        output = tmp_path / "out.png"

        assert main([str(source), "-o", str(output), "--compact", "--data-uri"]) == 0

        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "50×50px | 1:1 | rgb(0, 200, 0)"
        assert lines[1].startswith("data:image/png;base64,")

    def test_non_image_input_fails(self, tmp_path):
        source = tmp_path / "readme.txt"
        source.write_text("not an image", encoding="utf-8")
        assert main([str(source), "-o", str(tmp_path / "out.png")]) == 1
        assert not (tmp_path / "out.png").exists()

    def test_missing_input_fails(self, tmp_path):
        assert main([str(tmp_path / "missing.png"), "-o", str(tmp_path / "out.png")]) == 1

    def test_invalid_stride_is_usage_error(self, png_file):
        with pytest.raises(SystemExit) as excinfo:
            main([str(png_file()), "--stride", "0"])
        assert excinfo.value.code == 2
