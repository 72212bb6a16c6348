"""Состояние одного окна: текущее изображение, результат и превью.

Принципы:
- SRP: только данные сеанса и их сброс; вычисления в `ProcessService`.
- Явное владение: вместо глобальных полей окна состояние передаётся объектом.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from squarepad.models.color_model import RGBColor
from squarepad.models.geometry_model import SquareResult
from squarepad.models.image_model import ImageData
from squarepad.services.surface import PillowSurface


@dataclass
class Session:
    """Производные данные текущего изображения.

    Fields:
        image: Загруженное изображение или `None`.
        dominant_color: Найденный цвет фона.
        result: Готовый квадрат (PNG и описание).
        original_surface: Буфер превью исходного изображения.
        square_surface: Буфер квадратного результата.
        original_info: Текст под превью оригинала.
        square_info: Текст под превью результата.
    """
    image: Optional[ImageData] = None
    dominant_color: Optional[RGBColor] = None
    result: Optional[SquareResult] = None
    original_surface: PillowSurface = field(default_factory=PillowSurface)
    square_surface: PillowSurface = field(default_factory=PillowSurface)
    original_info: str = ""
    square_info: str = ""

    @property
    def has_image(self) -> bool:
        return self.image is not None

    def reset(self) -> None:
        """Возвращает сеанс к пустому состоянию: буферы прозрачные, тексты пустые."""
        self.image = None
        self.dominant_color = None
        self.result = None
        self.original_surface.clear()
        self.square_surface.clear()
        self.original_info = ""
        self.square_info = ""
