"""Загрузка и сохранение изображений (кодеки Pillow).

Принципы:
- SRP: класс отвечает только за декодирование/кодирование и извлечение свойств.
- OCP: новые форматы добавляются расширением `SUPPORTED_FORMATS`.
- LSP/ISP: возвращает `ImageData` с предсказуемыми полями; интерфейс узкий и конкретный.
"""
from __future__ import annotations

from pathlib import Path
from typing import BinaryIO, Optional

from PIL import Image, UnidentifiedImageError

from images_resizer.models.image_model import ImageData

# Формат определяется по содержимому, расширение файла не учитывается
SUPPORTED_FORMATS = ("JPEG", "PNG", "GIF")


class ImageService:
    def load_image(self, file_path: str | Path) -> ImageData:
        """Загружает изображение с диска и возвращает его вместе с метаданными.

        Args:
            file_path: Путь до файла изображения.

        Returns:
            `ImageData` c `PIL.Image.Image` (в режиме RGBA), размерами, форматом и размером файла.

        Raises:
            FileNotFoundError: если путь не существует или не указывает на файл.
            ValueError: если содержимое не распознано как JPEG, PNG или GIF.
        """
        path = Path(file_path)
        if not path.exists() or not path.is_file():
            raise FileNotFoundError(f"File not found: {path}")

        try:
            with Image.open(path, formats=SUPPORTED_FORMATS) as src:
                image_format = src.format
                pil_image = src.convert("RGBA")
        except UnidentifiedImageError as exc:
            raise ValueError(f"Not a supported image: {path}") from exc
        except OSError as exc:
            # усечённые и повреждённые файлы
            raise ValueError(f"Cannot decode image {path}: {exc}") from exc

        width, height = pil_image.size
        try:
            size_bytes: Optional[int] = path.stat().st_size
        except OSError:
            size_bytes = None

        return ImageData(
            path=path,
            pil_image=pil_image,
            width=width,
            height=height,
            format=image_format,
            size_bytes=size_bytes,
        )

    def _check_encodable(self, image: Image.Image, image_format: str) -> None:
        if image_format not in SUPPORTED_FORMATS:
            raise ValueError(f"Unsupported output format: {image_format}")
        if image.width == 0 or image.height == 0:
            raise ValueError(f"Cannot encode empty image ({image.width}x{image.height})")

    def encode(self, image: Image.Image, image_format: str, stream: BinaryIO) -> None:
        """
        Кодирует изображение в поток с настройками формата по умолчанию.
        JPEG не хранит альфа-канал, поэтому он отбрасывается.
        """
        self._check_encodable(image, image_format)
        if image_format == "JPEG" and image.mode != "RGB":
            image = image.convert("RGB")
        image.save(stream, format=image_format)

    def save_image(self, image: Image.Image, image_format: str, file_path: str | Path) -> Path:
        """Создаёт файл результата и записывает в него изображение. Файл закрывается в любом случае.

        Непригодное для записи изображение отклоняется до создания файла.
        """
        self._check_encodable(image, image_format)
        path = Path(file_path)
        with path.open("wb") as out:
            self.encode(image, image_format, out)
        return path
