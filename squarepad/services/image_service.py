"""Загрузка изображений с диска и упаковка метаданных.

Принципы:
- SRP: класс отвечает только за проверку типа, декодирование и базовые свойства.
- OCP: новые источники (стрим, URL) можно добавить отдельными методами.
- LSP/ISP: возвращает `ImageData` с предсказуемыми полями; интерфейс узкий и конкретный.
"""
from __future__ import annotations

import io
import logging
import mimetypes
from pathlib import Path
from typing import Optional

from PIL import Image, UnidentifiedImageError

from squarepad.errors import DecodeFailure, InvalidInputType
from squarepad.models.image_model import ImageData

_image_logger = logging.getLogger("SquarePad.image")


def guess_mime_type(file_path: str | Path) -> Optional[str]:
    mime_type, _encoding = mimetypes.guess_type(str(file_path))
    return mime_type


def ensure_image_mime(mime_type: Optional[str], source: str) -> str:
    """Проверяет, что MIME-тип вида `image/*`.

    Raises:
        InvalidInputType: если тип не определён или не является изображением.
    """
    if not mime_type or not mime_type.startswith("image/"):
        raise InvalidInputType(f"Файл не является изображением: {source} ({mime_type or 'тип неизвестен'})")
    return mime_type


class ImageService:
    def load_image(self, file_path: str | Path) -> ImageData:
        """Загружает изображение с диска и возвращает его вместе с метаданными.

        Args:
            file_path: Путь до файла изображения.

        Returns:
            `ImageData` c `PIL.Image.Image` (в режиме RGBA), размерами, режимом и размером файла.

        Raises:
            FileNotFoundError: если путь не существует или не указывает на файл.
            InvalidInputType: если расширение не соответствует MIME-типу изображения.
            DecodeFailure: если содержимое не распознано как изображение.
        """
        path = Path(file_path)
        if not path.exists() or not path.is_file():
            raise FileNotFoundError(f"Файл не найден: {path}")

        mime_type = ensure_image_mime(guess_mime_type(path), str(path))

        try:
            size_bytes: Optional[int] = path.stat().st_size
        except OSError:
            size_bytes = None

        data = path.read_bytes()
        image_data = self._decode(data, path=path, mime_type=mime_type, size_bytes=size_bytes)
        _image_logger.info(f"Loaded {path} ({image_data.width}x{image_data.height}, {image_data.mode})")
        return image_data

    def _decode(self, data: bytes, path: Path, mime_type: str, size_bytes: Optional[int]) -> ImageData:
        try:
            with Image.open(io.BytesIO(data)) as opened:
                source_mode = opened.mode
                pil_image = opened.convert("RGBA")
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as exc:
            raise DecodeFailure(f"Не удалось декодировать изображение: {path}") from exc

        width, height = pil_image.size
        if width < 1 or height < 1:
            raise DecodeFailure(f"Изображение нулевой площади: {path}")

        return ImageData(
            path=path,
            pil_image=pil_image,
            width=width,
            height=height,
            mode=source_mode,
            size_bytes=size_bytes,
            mime_type=mime_type,
        )
