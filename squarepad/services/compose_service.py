"""Компоновка квадратного изображения с полями доминирующего цвета.

Принципы:
- SRP: только геометрия квадрата и операции рисования.
- DIP: рисование идёт через `DrawingSurface`; по умолчанию новый `PillowSurface`.
"""
from __future__ import annotations

import base64
import logging
from typing import Optional

from PIL import Image

from squarepad.errors import DegenerateGeometry
from squarepad.models.color_model import RGBColor
from squarepad.models.geometry_model import SquareCanvasSpec, SquareResult
from squarepad.services.layout_service import format_square_info
from squarepad.services.surface import DrawingSurface, PillowSurface

_compose_logger = logging.getLogger("SquarePad.compose")


def square_canvas_spec(width: int, height: int, background: RGBColor) -> SquareCanvasSpec:
    """Сторона квадрата и смещение для центрирования.

    Смещения округляются вниз: при нечётной разнице лишний пиксель поля
    всегда оказывается справа/снизу.
    """
    if width < 1 or height < 1:
        raise DegenerateGeometry(f"Изображение нулевой площади: {width}×{height}")
    side = max(width, height)
    return SquareCanvasSpec(
        side=side,
        offset_x=(side - width) // 2,
        offset_y=(side - height) // 2,
        background=background,
    )


def to_data_uri(png_bytes: bytes) -> str:
    """Кодирует PNG в data URI."""
    b64_data = base64.b64encode(png_bytes).decode("ascii")
    return f"data:image/png;base64,{b64_data}"


class SquareCompositor:
    def compose(
        self,
        image: Image.Image,
        background: RGBColor,
        compact: bool = False,
        surface: Optional[DrawingSurface] = None,
    ) -> SquareResult:
        """Размещает изображение по центру квадрата со стороной `max(w, h)`.

        Args:
            image: Исходное изображение; рисуется в натуральную величину.
            background: Цвет полей.
            compact: Краткий формат строки описания.
            surface: Поверхность для рисования; по умолчанию создаётся новая.

        Returns:
            `SquareResult` с готовым изображением, PNG-байтами, геометрией и описанием.
        """
        spec = square_canvas_spec(image.width, image.height, background)
        canvas = surface if surface is not None else PillowSurface()

        canvas.resize(spec.side, spec.side)
        canvas.fill_rect(0, 0, spec.side, spec.side, background)
        canvas.draw_image(image, (spec.offset_x, spec.offset_y, image.width, image.height))

        png_bytes = canvas.export_encoded("PNG")
        result_image = canvas.snapshot()

        _compose_logger.debug(
            f"Composed {image.width}x{image.height} onto {spec.side}x{spec.side} "
            f"at ({spec.offset_x}, {spec.offset_y}), background {background.to_css()}"
        )
        return SquareResult(
            image=result_image,
            png_bytes=png_bytes,
            spec=spec,
            info=format_square_info(spec.side, background, compact),
        )
