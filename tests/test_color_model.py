"""
Unit tests for RGBColor.
"""

import pytest

from squarepad.models.color_model import RGBColor, WHITE


class TestRGBColor:
    """Formatting and integer packing."""

    def test_css_and_hex(self):
        color = RGBColor(250, 0, 0)
        assert color.to_css() == "rgb(250, 0, 0)"
        assert color.to_hex() == "#fa0000"
        assert str(color) == "rgb(250, 0, 0)"

    def test_white_fallback_hex(self):
        assert WHITE.to_hex() == "#ffffff"

    def test_pack_layout(self):
        assert RGBColor(10, 20, 30).pack() == (10 << 16) | (20 << 8) | 30

    def test_unpack_restores_color(self):
        color = RGBColor(250, 120, 0)
        assert RGBColor.unpack(color.pack()) == color

    def test_out_of_range_channel_rejected(self):
        with pytest.raises(ValueError):
            RGBColor(256, 0, 0)
