"""Параметры приложения: константы алгоритмов и политика отображения.

Принципы:
- SRP: только значения по умолчанию и простые правила выбора, без логики обработки.
- Неизменяемость (`frozen=True`): переопределения делаются через `dataclasses.replace`.
"""
from __future__ import annotations

from dataclasses import dataclass

# Сэмплирование доминирующего цвета
SAMPLE_SIZE = 200  # px по длинной стороне
SAMPLE_STRIDE = 4  # каждый 4-й пиксель (16 байт RGBA)
ALPHA_THRESHOLD = 128
QUANTIZATION_STEP = 10

# Отображение
COMPACT_BREAKPOINT = 768  # px ширины окна
MAX_DISPLAY_SIZE = 400
MAX_DISPLAY_SIZE_COMPACT = 300
CONTAINER_PADDING = 20
RESIZE_DEBOUNCE_MS = 250

DOWNLOAD_FILENAME = "resized-image-1x1.png"


@dataclass(frozen=True)
class AppConfig:
    """Набор настраиваемых параметров.

    Fields:
        sample_size: Длинная сторона уменьшенной копии для подсчёта цветов.
        sample_stride: Шаг обхода пикселей (1 = каждый пиксель).
        alpha_threshold: Пиксели с альфой ниже порога не учитываются.
        quantization_step: Шаг квантования каналов.
        compact_breakpoint: Ширина окна, начиная с которой (и меньше) используется компактный вид.
        max_display_size: Предел превью в обычном режиме.
        max_display_size_compact: Предел превью в компактном режиме.
        container_padding: Отступ внутри панели превью.
        resize_debounce_ms: Пауза перед перерисовкой после изменения размеров окна.
        download_filename: Имя файла по умолчанию при сохранении.
    """
    sample_size: int = SAMPLE_SIZE
    sample_stride: int = SAMPLE_STRIDE
    alpha_threshold: int = ALPHA_THRESHOLD
    quantization_step: int = QUANTIZATION_STEP
    compact_breakpoint: int = COMPACT_BREAKPOINT
    max_display_size: int = MAX_DISPLAY_SIZE
    max_display_size_compact: int = MAX_DISPLAY_SIZE_COMPACT
    container_padding: int = CONTAINER_PADDING
    resize_debounce_ms: int = RESIZE_DEBOUNCE_MS
    download_filename: str = DOWNLOAD_FILENAME

    def __post_init__(self) -> None:
        if self.sample_size < 1:
            raise ValueError(f"sample_size должен быть >= 1, получено {self.sample_size}")
        if self.sample_stride < 1:
            raise ValueError(f"sample_stride должен быть >= 1, получено {self.sample_stride}")
        if self.quantization_step < 1:
            raise ValueError(f"quantization_step должен быть >= 1, получено {self.quantization_step}")

    def is_compact(self, viewport_width: int) -> bool:
        """Компактный режим для узких окон."""
        return viewport_width <= self.compact_breakpoint

    def max_display_for(self, viewport_width: int) -> int:
        return self.max_display_size_compact if self.is_compact(viewport_width) else self.max_display_size


DEFAULT_CONFIG = AppConfig()
