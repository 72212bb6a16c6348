"""
Unit tests for preview fitting and info formatting.
"""

import pytest

from squarepad.errors import DegenerateGeometry
from squarepad.models.geometry_model import DisplayFitSpec
from squarepad.services.layout_service import fit_rect, format_original_info

CASES = [
    (800, 400, 400, None),
    (200, 100, 400, None),
    (300, 600, 400, None),
    (1000, 333, 400, None),
    (333, 1000, 400, 250),
    (1920, 1080, 400, 350),
    (1920, 1080, 300, 120.6),
    (1001, 1000, 1, None),
    (5, 5, 400, 3),
    (392, 1571, 107, 26.95218405278705),
    (1000, 999, 400, 120.6),
    (800, 400, 400, 0.5),
]


class TestFitRect:
    """Aspect-preserving bounded preview size."""

    def test_landscape_bounded_by_width(self):
        assert fit_rect(800, 400, 400) == DisplayFitSpec(400, 200)

    def test_small_image_not_upscaled(self):
        assert fit_rect(200, 100, 400) == DisplayFitSpec(200, 100)

    def test_portrait_bounded_by_height(self):
        assert fit_rect(300, 600, 400) == DisplayFitSpec(200, 400)

    def test_square_uses_height_branch(self):
        assert fit_rect(500, 500, 300) == DisplayFitSpec(300, 300)

    def test_container_caps_width(self):
        assert fit_rect(800, 400, 400, 300) == DisplayFitSpec(300, 150)

    @pytest.mark.parametrize("container", [None, 0, -10])
    def test_non_positive_container_ignored(self, container):
        assert fit_rect(800, 400, 400, container) == DisplayFitSpec(400, 200)

    @pytest.mark.parametrize("width, height, max_dim, container", CASES)
    def test_idempotent(self, width, height, max_dim, container):
        first = fit_rect(width, height, max_dim, container)
        second = fit_rect(first.display_width, first.display_height, max_dim, container)
        assert second == first

    @pytest.mark.parametrize("width, height, max_dim, container", [c for c in CASES if c[3] and c[3] >= 1])
    def test_never_exceeds_container(self, width, height, max_dim, container):
        assert fit_rect(width, height, max_dim, container).display_width <= container

    def test_fractional_container_rounds_before_capping(self):
        """Rounding up must not push the width past the container."""
        assert fit_rect(392, 1571, 107, 26.95218405278705) == DisplayFitSpec(26, 104)

    def test_sub_pixel_container_ignored(self):
        assert fit_rect(800, 400, 400, 0.5) == DisplayFitSpec(400, 200)

    def test_degenerate_input_rejected(self):
        with pytest.raises(DegenerateGeometry):
            fit_rect(0, 100, 400)
        with pytest.raises(DegenerateGeometry):
            fit_rect(100, 100, 0)


class TestOriginalInfo:
    def test_compact(self):
        assert format_original_info(400, 200, compact=True) == "400×200px | 2.00:1"

    def test_expanded(self):
        assert format_original_info(300, 600, compact=False) == "Размер: 300 × 600px | Соотношение сторон: 0.50:1"
