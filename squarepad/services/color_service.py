"""Определение доминирующего цвета изображения.

Принципы:
- SRP: только статистика цветов, без компоновки и UI.
- DIP: изображение уменьшается через `DrawingSurface`, а не напрямую средствами PIL.

Алгоритм:
1. Уменьшенная копия: длинная сторона = `sample_size`, короткая по пропорции (>= 1).
2. Обход байтов RGBA с шагом `sample_stride` пикселей. Это разреженная выборка
   для скорости, а не полная гистограмма.
3. Пиксели с альфой < `alpha_threshold` пропускаются; каналы квантуются
   (см. `quantize_channels`) и упаковываются в целочисленный ключ.
4. Побеждает ключ со строго наибольшим счётчиком; при равенстве встреченный первым.
5. Если подходящих пикселей нет, возвращается белый.
"""
from __future__ import annotations

import logging
from typing import Dict, Optional, Tuple

import numpy as np
from PIL import Image

from squarepad.config import AppConfig, DEFAULT_CONFIG
from squarepad.errors import DegenerateGeometry
from squarepad.models.color_model import RGBColor, WHITE
from squarepad.services.surface import DrawingSurface, PillowSurface

_color_logger = logging.getLogger("SquarePad.color")


def sample_dimensions(width: int, height: int, sample_size: int) -> Tuple[int, int]:
    """Размер уменьшенной копии с сохранением пропорций.

    Короткая сторона усекается (как при установке размера канвы) и не бывает меньше 1.

    Raises:
        DegenerateGeometry: если у исходного изображения нулевая площадь.
    """
    if width < 1 or height < 1:
        raise DegenerateGeometry(f"Изображение нулевой площади: {width}×{height}")
    aspect_ratio = width / height
    if aspect_ratio > 1:
        sample_w = sample_size
        sample_h = int(sample_size / aspect_ratio)
    else:
        sample_h = sample_size
        sample_w = int(sample_size * aspect_ratio)
    return max(1, sample_w), max(1, sample_h)


def quantize_channels(channels: np.ndarray, step: int) -> np.ndarray:
    """Округляет каналы до ближайшего кратного `step` (половина вверх).

    Результат ограничен сверху наибольшим кратным `step`, не превышающим 255,
    поэтому при шаге 10 значения лежат в {0, 10, ..., 250}: 255 -> 250.
    """
    top = (255 // step) * step
    values = channels.astype(np.int32)
    return np.minimum((values + step // 2) // step * step, top)


def build_frequency_table(pixels: np.ndarray, alpha_threshold: int, step: int) -> Dict[int, int]:
    """Строит таблицу частот `упакованный ключ -> счётчик` в порядке первого появления.

    Args:
        pixels: Массив (N, 4) uint8, уже прорежённый.
        alpha_threshold: Минимальная альфа учитываемого пикселя.
        step: Шаг квантования.
    """
    opaque = pixels[pixels[:, 3] >= alpha_threshold]
    if opaque.size == 0:
        return {}
    q = quantize_channels(opaque[:, :3], step)
    keys = (q[:, 0] << 16) | (q[:, 1] << 8) | q[:, 2]
    unique_keys, first_index, counts = np.unique(keys, return_index=True, return_counts=True)
    order = np.argsort(first_index, kind="stable")
    return {int(unique_keys[i]): int(counts[i]) for i in order}


def pick_dominant(table: Dict[int, int]) -> Optional[RGBColor]:
    """Ключ со строго наибольшим счётчиком; при равенстве выигрывает более ранний."""
    max_count = 0
    dominant_key: Optional[int] = None
    for key, count in table.items():
        if count > max_count:
            max_count = count
            dominant_key = key
    if dominant_key is None:
        return None
    return RGBColor.unpack(dominant_key)


class DominantColorSampler:
    def __init__(self, config: AppConfig = DEFAULT_CONFIG) -> None:
        self._config = config

    def sample(self, image: Image.Image, surface: Optional[DrawingSurface] = None) -> RGBColor:
        """Возвращает доминирующий (квантованный) цвет изображения.

        Args:
            image: Декодированное изображение.
            surface: Поверхность для уменьшенной копии; по умолчанию создаётся новая.

        Returns:
            `RGBColor` с каналами, кратными шагу квантования, либо белый,
            если все выбранные пиксели прозрачны.
        """
        cfg = self._config
        sample_w, sample_h = sample_dimensions(image.width, image.height, cfg.sample_size)
        _color_logger.debug(
            f"Sampling {image.width}x{image.height} at {sample_w}x{sample_h}, stride={cfg.sample_stride}"
        )

        work = surface if surface is not None else PillowSurface()
        work.resize(sample_w, sample_h)
        work.draw_image(image, (0, 0, sample_w, sample_h))
        data = work.read_pixels(0, 0, sample_w, sample_h)

        pixels = np.frombuffer(data, dtype=np.uint8).reshape(-1, 4)[:: cfg.sample_stride]
        table = build_frequency_table(pixels, cfg.alpha_threshold, cfg.quantization_step)
        dominant = pick_dominant(table)
        if dominant is None:
            _color_logger.warning("No opaque pixels sampled, falling back to white")
            return WHITE

        _color_logger.debug(f"Dominant color {dominant.to_css()} among {len(table)} buckets")
        return dominant
