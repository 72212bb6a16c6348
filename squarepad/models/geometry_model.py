"""Геометрия квадратного холста и превью."""
from __future__ import annotations

from dataclasses import dataclass

from PIL import Image

from squarepad.models.color_model import RGBColor


@dataclass(frozen=True)
class SquareCanvasSpec:
    """Размер квадратного холста и смещение исходного изображения.

    Fields:
        side: Сторона квадрата, `max(width, height)`.
        offset_x: Левый отступ, `(side - width) // 2`.
        offset_y: Верхний отступ, `(side - height) // 2`.
        background: Цвет заливки полей.
    """
    side: int
    offset_x: int
    offset_y: int
    background: RGBColor


@dataclass(frozen=True)
class DisplayFitSpec:
    display_width: int
    display_height: int


@dataclass(frozen=True)
class SquareResult:
    """Результат компоновки: изображение, PNG и строка описания."""
    image: Image.Image
    png_bytes: bytes
    spec: SquareCanvasSpec
    info: str
