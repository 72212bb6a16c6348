"""Модель цвета.

Принципы:
- SRP: представление цвета и его упаковка в целочисленный ключ.
- Чистый код: неизменяемое значение, легко проверяется тестами.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RGBColor:
    """Цвет без альфа-канала, каналы 0..255."""
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name, value in (("r", self.r), ("g", self.g), ("b", self.b)):
            if not 0 <= value <= 255:
                raise ValueError(f"Канал {name} вне диапазона 0..255: {value}")

    def to_css(self) -> str:
        return f"rgb({self.r}, {self.g}, {self.b})"

    def to_hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    def pack(self) -> int:
        """Упаковывает каналы в 24-битный ключ `r << 16 | g << 8 | b`."""
        return (self.r << 16) | (self.g << 8) | self.b

    @classmethod
    def unpack(cls, key: int) -> "RGBColor":
        return cls((key >> 16) & 0xFF, (key >> 8) & 0xFF, key & 0xFF)

    def __str__(self) -> str:
        return self.to_css()


WHITE = RGBColor(255, 255, 255)
