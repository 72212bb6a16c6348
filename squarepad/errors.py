"""Исключения предметной области.

Наследуются от `ValueError`, чтобы вызывающий код, ожидающий ошибки значения
(как при загрузке изображения), продолжал работать без изменений.
"""
from __future__ import annotations


class SquarePadError(Exception):
    """Базовая ошибка обработки изображения."""


class InvalidInputType(SquarePadError, ValueError):
    """Файл не является изображением (MIME-тип не `image/*`)."""


class DecodeFailure(SquarePadError, ValueError):
    """Байты не удалось декодировать как изображение."""


class DegenerateGeometry(SquarePadError, ValueError):
    """Нулевая или отрицательная площадь там, где требуется изображение."""
