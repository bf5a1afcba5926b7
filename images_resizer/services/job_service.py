from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from images_resizer.models.job_model import ResizeJob
from images_resizer.services.image_service import ImageService
from images_resizer.services.resize_service import ResizeService

logger = logging.getLogger(__name__)


class JobService:
    def __init__(self, image_service: Optional[ImageService] = None, resize_service: Optional[ResizeService] = None) -> None:
        self._image_service = image_service or ImageService()
        self._resize_service = resize_service or ResizeService()

    def process(self, job: ResizeJob, factor: float) -> Path:
        """
        Одна задача целиком: декодирование -> уменьшение -> кодирование -> запись.
        Результат кодируется в формате, определённом по содержимому,
        а имя файла сохраняет исходное расширение (даже если они не совпадают).
        """
        image_data = self._image_service.load_image(job.source_path)
        resized = self._resize_service.resize(image_data.pil_image, factor)
        out_path = self._image_service.save_image(resized, image_data.format, job.output_path)
        logger.debug(
            "%s: %dx%d %s (%s bytes) -> %dx%d %s",
            job.filename, image_data.width, image_data.height, image_data.format, image_data.size_bytes,
            resized.width, resized.height, out_path.name,
        )
        return out_path
