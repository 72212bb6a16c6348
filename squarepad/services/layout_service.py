"""Расчёт размеров превью и текстовые описания размеров.

Функции чистые: один и тот же вход всегда даёт тот же выход, поэтому их можно
вызывать повторно на каждое (отложенное) изменение размеров окна.
"""
from __future__ import annotations

import math
from typing import Optional

from squarepad.errors import DegenerateGeometry
from squarepad.models.color_model import RGBColor
from squarepad.models.geometry_model import DisplayFitSpec


def fit_rect(
    source_width: int,
    source_height: int,
    max_dimension: int,
    container_width: Optional[float] = None,
) -> DisplayFitSpec:
    """Вписывает изображение в `max_dimension` с сохранением пропорций.

    Для широких изображений ограничивается ширина, для остальных высота.
    Если задана положительная ширина контейнера и превью в неё не помещается,
    обе стороны масштабируются до ширины контейнера (целой части). Контейнер
    уже одного пикселя не учитывается. Размеры округляются до целых пикселей
    (не меньше 1) до сравнения с контейнером, поэтому результат не шире
    контейнера, а повторное применение к нему ничего не меняет.

    Raises:
        DegenerateGeometry: при нулевых размерах источника или предела.
    """
    if source_width < 1 or source_height < 1:
        raise DegenerateGeometry(f"Изображение нулевой площади: {source_width}×{source_height}")
    if max_dimension < 1:
        raise DegenerateGeometry(f"Недопустимый предел превью: {max_dimension}")

    aspect_ratio = source_width / source_height
    if aspect_ratio > 1:
        display_w = float(min(max_dimension, source_width))
        display_h = display_w / aspect_ratio
    else:
        display_h = float(min(max_dimension, source_height))
        display_w = display_h * aspect_ratio

    width = max(1, int(round(display_w)))
    height = max(1, int(round(display_h)))

    # уже 1 px не помещается: такой контейнер игнорируется, как и непозитивный
    cap = math.floor(container_width) if container_width is not None and container_width > 0 else 0
    if cap >= 1 and width > cap:
        width = cap
        height = max(1, int(round(cap / aspect_ratio)))

    return DisplayFitSpec(display_width=width, display_height=height)


def format_original_info(width: int, height: int, compact: bool) -> str:
    ratio = width / height
    if compact:
        return f"{width}×{height}px | {ratio:.2f}:1"
    return f"Размер: {width} × {height}px | Соотношение сторон: {ratio:.2f}:1"


def format_square_info(side: int, background: RGBColor, compact: bool) -> str:
    """Описание результата: сторона дважды, метка «1:1» и цвет фона."""
    color = background.to_css()
    if compact:
        return f"{side}×{side}px | 1:1 | {color}"
    return f"Размер: {side} × {side}px | Соотношение сторон: 1:1 | Фон: {color}"
