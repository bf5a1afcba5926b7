"""Декодированное изображение вместе с тем, что о нём нужно задаче уменьшения.

Формат хранится отдельно: результат кодируется в том же формате, что и исходник,
даже если расширение файла говорит другое.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from PIL import Image


@dataclass(frozen=True)
class ImageData:
    """Fields:
        path: Путь к исходному файлу.
        pil_image: Изображение PIL в режиме "RGBA".
        width: Ширина, px.
        height: Высота, px.
        format: Формат по содержимому файла ("JPEG", "PNG", "GIF").
        size_bytes: Размер файла, если доступен (пишется в отладочный лог).
    """
    path: Path
    pil_image: Image.Image
    width: int
    height: int
    format: str
    size_bytes: Optional[int]
