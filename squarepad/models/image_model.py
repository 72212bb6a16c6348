"""Модели данных для изображений.

Принципы:
- SRP: только структура данных, без логики обработки.
- Чистый код: неизменяемость (`frozen=True`) для предсказуемости.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from PIL import Image


@dataclass(frozen=True)
class ImageData:
    """Неизменяемая модель декодированного изображения и его метаданные.

    Fields:
        path: Путь к исходному файлу (или условное имя для данных из памяти).
        pil_image: Загруженное изображение PIL в режиме RGBA.
        width: Ширина, px.
        height: Высота, px.
        mode: Режим исходного файла до конвертации, например "P" или "RGB".
        size_bytes: Размер файла, если доступен.
        mime_type: MIME-тип, по которому файл прошёл проверку.
    """
    path: Path
    pil_image: Image.Image
    width: int
    height: int
    mode: str
    size_bytes: Optional[int]
    mime_type: str = "image/png"

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height
