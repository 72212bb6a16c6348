"""
Unit tests for the processing flow and session lifecycle.
"""

import pytest
from PIL import Image

from conftest import make_image_data
from squarepad.config import AppConfig
from squarepad.errors import DegenerateGeometry
from squarepad.models.color_model import RGBColor
from squarepad.models.session_model import Session
from squarepad.services.process_service import ProcessService

WIDE = 1024
NARROW = 500


@pytest.fixture
def service():
    return ProcessService(AppConfig())


@pytest.fixture
def red_data(red_400x200):
    return make_image_data(red_400x200, "red.png")


class TestProcess:
    """Sample -> compose -> preview, committed to the session."""

    def test_red_scenario(self, service, red_data):
        session = Session()
        result = service.process(session, red_data, viewport_width=WIDE)

        assert session.result is result
        assert session.image is red_data
        assert session.dominant_color == RGBColor(250, 0, 0)
        assert result.spec.side == 400
        assert result.spec.offset_y == 100
        assert session.square_surface.size == (400, 400)
        assert session.original_surface.size == (400, 200)

    def test_expanded_info_on_wide_viewport(self, service, red_data):
        session = Session()
        service.process(session, red_data, viewport_width=WIDE)
        assert session.original_info == "Размер: 400 × 200px | Соотношение сторон: 2.00:1"
        assert session.square_info == "Размер: 400 × 400px | Соотношение сторон: 1:1 | Фон: rgb(250, 0, 0)"

    def test_compact_info_and_smaller_preview_on_narrow_viewport(self, service, red_data):
        session = Session()
        service.process(session, red_data, viewport_width=NARROW)
        assert session.original_info == "400×200px | 2.00:1"
        assert session.square_info == "400×400px | 1:1 | rgb(250, 0, 0)"
        assert session.original_surface.size == (300, 150)

    def test_container_width_limits_preview(self, service, red_data):
        session = Session()
        service.process(session, red_data, viewport_width=WIDE, container_width=200)
        assert session.original_surface.size == (200, 100)
        # the square itself is never scaled
        assert session.square_surface.size == (400, 400)

    def test_failure_leaves_previous_state(self, service, red_data, monkeypatch):
        session = Session()
        first = service.process(session, red_data, viewport_width=WIDE)

        def _boom(_image):
            raise DegenerateGeometry("boom")

        monkeypatch.setattr(service._sampler, "sample", _boom)
        other = make_image_data(Image.new("RGBA", (10, 10), (0, 0, 255, 255)), "blue.png")
        with pytest.raises(DegenerateGeometry):
            service.process(session, other, viewport_width=WIDE)

        assert session.result is first
        assert session.image is red_data


class TestRelayout:
    def test_without_image_is_noop(self, service):
        session = Session()
        assert service.relayout(session, viewport_width=WIDE) is None
        assert session.result is None

    def test_reuses_sampled_color(self, service, red_data, monkeypatch):
        session = Session()
        service.process(session, red_data, viewport_width=WIDE)

        def _unexpected(_image):
            raise AssertionError("color must not be resampled on relayout")

        monkeypatch.setattr(service._sampler, "sample", _unexpected)
        result = service.relayout(session, viewport_width=NARROW)

        assert result.info == "400×400px | 1:1 | rgb(250, 0, 0)"
        assert session.original_surface.size == (300, 150)

    def test_repeated_relayout_is_stable(self, service, red_data):
        session = Session()
        service.process(session, red_data, viewport_width=WIDE, container_width=250)
        first = service.relayout(session, viewport_width=WIDE, container_width=250)
        second = service.relayout(session, viewport_width=WIDE, container_width=250)
        assert first.png_bytes == second.png_bytes
        assert session.original_surface.size == (250, 125)


class TestResetAndSave:
    def test_reset_clears_everything(self, service, red_data):
        session = Session()
        service.process(session, red_data, viewport_width=WIDE)
        original_surface = session.original_surface
        square_surface = session.square_surface

        session.reset()

        assert session.image is None
        assert session.result is None
        assert session.dominant_color is None
        assert session.original_info == ""
        assert session.square_info == ""
        assert original_surface.is_blank()
        assert square_surface.is_blank()
        assert session.original_surface.is_blank()
        assert session.square_surface.is_blank()

    def test_reset_on_fresh_session(self):
        session = Session()
        session.reset()
        assert not session.has_image

    def test_save_without_result(self, service, tmp_path):
        with pytest.raises(ValueError):
            service.save_result(Session(), tmp_path / "out.png")

    def test_save_writes_png(self, service, red_data, tmp_path):
        session = Session()
        result = service.process(session, red_data, viewport_width=WIDE)
        path = service.save_result(session, tmp_path / "resized-image-1x1.png")
        assert path.read_bytes() == result.png_bytes
