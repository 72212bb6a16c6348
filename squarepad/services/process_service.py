"""Сценарий обработки: цвет фона -> квадрат -> превью.

Принципы:
- SRP: оркестрация сервисов и фиксация результата в `Session`.
- Атомарность: сеанс меняется только после успешного выполнения всех шагов,
  при ошибке предыдущий результат остаётся нетронутым.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from squarepad.config import AppConfig, DEFAULT_CONFIG
from squarepad.models.color_model import RGBColor
from squarepad.models.geometry_model import SquareResult
from squarepad.models.image_model import ImageData
from squarepad.models.session_model import Session
from squarepad.services.color_service import DominantColorSampler
from squarepad.services.compose_service import SquareCompositor
from squarepad.services.layout_service import fit_rect, format_original_info
from squarepad.services.surface import PillowSurface

_process_logger = logging.getLogger("SquarePad.process")


class ProcessService:
    def __init__(self, config: AppConfig = DEFAULT_CONFIG) -> None:
        self.config = config
        self._sampler = DominantColorSampler(config)
        self._compositor = SquareCompositor()

    def process(
        self,
        session: Session,
        image_data: ImageData,
        viewport_width: int,
        container_width: Optional[float] = None,
    ) -> SquareResult:
        """Полный цикл для нового изображения.

        Args:
            session: Сеанс, в который записывается результат.
            image_data: Декодированное изображение.
            viewport_width: Ширина окна; определяет компактность и предел превью.
            container_width: Доступная ширина панели превью (без отступов).

        Returns:
            Готовый `SquareResult` (он же сохраняется в `session.result`).
        """
        color = self._sampler.sample(image_data.pil_image)
        return self._render(session, image_data, color, viewport_width, container_width)

    def relayout(
        self,
        session: Session,
        viewport_width: int,
        container_width: Optional[float] = None,
    ) -> Optional[SquareResult]:
        """Перерисовка после изменения размеров окна. Без изображения ничего не делает."""
        if session.image is None:
            return None
        color = session.dominant_color
        if color is None:
            color = self._sampler.sample(session.image.pil_image)
        return self._render(session, session.image, color, viewport_width, container_width)

    def save_result(self, session: Session, file_path: str | Path) -> Path:
        """Записывает PNG текущего результата.

        Raises:
            ValueError: если сохранять нечего.
        """
        if session.result is None:
            raise ValueError("Нет изображения для сохранения. Сначала откройте изображение.")
        path = Path(file_path)
        path.write_bytes(session.result.png_bytes)
        _process_logger.info(f"Saved {session.result.spec.side}x{session.result.spec.side} result to {path}")
        return path

    # ---- Helpers ----
    def _render(
        self,
        session: Session,
        image_data: ImageData,
        color: RGBColor,
        viewport_width: int,
        container_width: Optional[float],
    ) -> SquareResult:
        compact = self.config.is_compact(viewport_width)
        max_display = self.config.max_display_for(viewport_width)

        square_surface = PillowSurface()
        result = self._compositor.compose(image_data.pil_image, color, compact=compact, surface=square_surface)

        fit = fit_rect(image_data.width, image_data.height, max_display, container_width)
        original_surface = PillowSurface()
        original_surface.resize(fit.display_width, fit.display_height)
        original_surface.draw_image(image_data.pil_image, (0, 0, fit.display_width, fit.display_height))
        _process_logger.debug(
            f"Preview {image_data.width}x{image_data.height} -> {fit.display_width}x{fit.display_height} "
            f"(max {max_display}, container {container_width}, compact={compact})"
        )

        session.image = image_data
        session.dominant_color = color
        session.result = result
        session.original_surface = original_surface
        session.square_surface = square_surface
        session.original_info = format_original_info(image_data.width, image_data.height, compact)
        session.square_info = result.info
        return result
