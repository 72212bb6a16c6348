"""Поверхность рисования поверх `PIL.Image`.

Принципы:
- ISP: узкий протокол `DrawingSurface`: ровно те операции, что нужны алгоритмам.
- DIP: сэмплер и компоновщик зависят от протокола, а не от Pillow напрямую.

Семантика близка к 2D-канве: `resize` перевыделяет буфер и делает его
прозрачным, `draw_image` заменяет пиксели под изображением без смешивания.
"""
from __future__ import annotations

import io
from typing import Optional, Protocol, Tuple, Union

import numpy as np
from PIL import Image

from squarepad.errors import DegenerateGeometry
from squarepad.models.color_model import RGBColor

Rect = Tuple[int, int, int, int]  # x, y, w, h
ColorLike = Union[RGBColor, Tuple[int, int, int], Tuple[int, int, int, int]]

_TRANSPARENT = (0, 0, 0, 0)


class DrawingSurface(Protocol):
    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def resize(self, width: int, height: int) -> None: ...

    def clear(self) -> None: ...

    def fill_rect(self, x: int, y: int, width: int, height: int, color: ColorLike) -> None: ...

    def draw_image(self, image: Image.Image, dest_rect: Rect, src_rect: Optional[Rect] = None) -> None: ...

    def read_pixels(self, x: int, y: int, width: int, height: int) -> bytes: ...

    def export_encoded(self, fmt: str = "PNG") -> bytes: ...

    def snapshot(self) -> Optional[Image.Image]: ...


def _to_rgba(color: ColorLike) -> Tuple[int, int, int, int]:
    if isinstance(color, RGBColor):
        return (color.r, color.g, color.b, 255)
    if len(color) == 3:
        r, g, b = color
        return (r, g, b, 255)
    r, g, b, a = color
    return (r, g, b, a)


class PillowSurface:
    """RGBA-буфер в памяти. До первого `resize` (ширина/высота 0) не выделен."""

    def __init__(self, width: int = 0, height: int = 0) -> None:
        self._image: Optional[Image.Image] = None
        if width > 0 and height > 0:
            self.resize(width, height)

    @property
    def width(self) -> int:
        return self._image.width if self._image is not None else 0

    @property
    def height(self) -> int:
        return self._image.height if self._image is not None else 0

    @property
    def size(self) -> Tuple[int, int]:
        return (self.width, self.height)

    def resize(self, width: int, height: int) -> None:
        """Перевыделяет буфер заданного размера, содержимое становится прозрачным."""
        if width < 1 or height < 1:
            raise DegenerateGeometry(f"Недопустимый размер поверхности: {width}×{height}")
        self._image = Image.new("RGBA", (int(width), int(height)), _TRANSPARENT)

    def clear(self) -> None:
        """Очищает буфер до полностью прозрачного, размер сохраняется."""
        if self._image is None:
            return
        self._image.paste(_TRANSPARENT, (0, 0, self._image.width, self._image.height))

    def fill_rect(self, x: int, y: int, width: int, height: int, color: ColorLike) -> None:
        image = self._require_image()
        left = max(0, x)
        top = max(0, y)
        right = min(image.width, x + width)
        bottom = min(image.height, y + height)
        if right <= left or bottom <= top:
            return
        image.paste(_to_rgba(color), (left, top, right, bottom))

    def draw_image(self, image: Image.Image, dest_rect: Rect, src_rect: Optional[Rect] = None) -> None:
        """Рисует `image` (или его часть `src_rect`) в прямоугольник `dest_rect`.

        При несовпадении размеров изображение масштабируется билинейно.
        Пиксели под изображением заменяются целиком, альфа-смешивания нет.
        """
        target = self._require_image()
        src = image if image.mode == "RGBA" else image.convert("RGBA")
        if src_rect is not None:
            sx, sy, sw, sh = src_rect
            src = src.crop((sx, sy, sx + sw, sy + sh))
        dx, dy, dw, dh = dest_rect
        if dw < 1 or dh < 1:
            raise DegenerateGeometry(f"Недопустимый прямоугольник назначения: {dw}×{dh}")
        if src.size != (dw, dh):
            src = src.resize((dw, dh), Image.Resampling.BILINEAR)
        target.paste(src, (dx, dy))

    def read_pixels(self, x: int, y: int, width: int, height: int) -> bytes:
        """Возвращает байты RGBA построчно; области вне буфера читаются как прозрачные."""
        if width < 1 or height < 1:
            raise DegenerateGeometry(f"Недопустимая область чтения: {width}×{height}")
        image = self._require_image()
        return image.crop((x, y, x + width, y + height)).tobytes()

    def export_encoded(self, fmt: str = "PNG") -> bytes:
        image = self._require_image()
        buffer = io.BytesIO()
        image.save(buffer, format=fmt)
        return buffer.getvalue()

    def snapshot(self) -> Optional[Image.Image]:
        """Копия текущего буфера (для отображения), `None` если не выделен."""
        return self._image.copy() if self._image is not None else None

    def is_blank(self) -> bool:
        """Все пиксели полностью прозрачны (или буфер не выделен)."""
        if self._image is None:
            return True
        alpha = np.asarray(self._image)[..., 3]
        return not alpha.any()

    def _require_image(self) -> Image.Image:
        if self._image is None:
            raise DegenerateGeometry("Поверхность не выделена: вызовите resize()")
        return self._image
