"""Поиск изображений в каталоге и построение списка задач.

Принципы:
- SRP: только перечисление файлов и фильтрация, без чтения содержимого.
- Чистый код: уже уменьшенные файлы (с маркером в имени) не попадают в задачи повторно.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List

from images_resizer.models.job_model import RESIZED_MARKER, ResizeJob

IMAGE_EXTENSIONS = {".jpg", ".jpeg", ".png", ".gif"}

logger = logging.getLogger(__name__)


class TaskService:
    def is_eligible(self, filename: str) -> bool:
        """Расширение из списка (без учёта регистра) и в имени нет маркера `_resized`."""
        name, ext = os.path.splitext(filename)
        return ext.lower() in IMAGE_EXTENSIONS and RESIZED_MARKER not in name

    def list_eligible(self, directory: str | Path) -> List[str]:
        """Имена подходящих файлов каталога (без рекурсии) в порядке листинга (по имени).

        Raises:
            FileNotFoundError: если каталог не существует.
        """
        path = Path(directory)
        if not path.is_dir():
            raise FileNotFoundError(f"Directory not found: {path}")

        eligible = [
            entry.name
            for entry in sorted(path.iterdir(), key=lambda p: p.name)
            if entry.is_file() and self.is_eligible(entry.name)
        ]
        logger.debug("Found %d image(s) to resize in %s", len(eligible), path)
        return eligible

    def build_jobs(self, directory: str | Path) -> List[ResizeJob]:
        path = Path(directory)
        return [ResizeJob(directory=path, filename=name) for name in self.list_eligible(path)]
