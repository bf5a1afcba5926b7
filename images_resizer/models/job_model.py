"""Модели задач и результатов пакетной обработки.

Принципы:
- SRP: только структуры данных, которыми обмениваются планировщик, воркеры и сборщик.
- Чистый код: задачи неизменяемы и не зависят друг от друга.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

RESIZED_MARKER = "_resized"


@dataclass(frozen=True)
class ResizeJob:
    """Одна задача: исходный файл в каталоге и путь результата.

    Fields:
        directory: Каталог исходного файла (результат пишется туда же).
        filename: Имя исходного файла с расширением.
    """
    directory: Path
    filename: str

    @property
    def name(self) -> str:
        """Имя файла без расширения."""
        return os.path.splitext(self.filename)[0]

    @property
    def ext(self) -> str:
        """Исходное расширение, регистр сохраняется."""
        return os.path.splitext(self.filename)[1]

    @property
    def source_path(self) -> Path:
        return Path(self.directory) / self.filename

    @property
    def output_path(self) -> Path:
        return Path(self.directory) / f"{self.name}{RESIZED_MARKER}{self.ext}"


@dataclass(frozen=True)
class JobCompletion:
    """Сообщение воркера об успешно выполненной задаче."""
    filename: str
    worker: int
    output_path: Path


@dataclass(frozen=True)
class JobFailure:
    """Сообщение воркера об ошибке. Сборщик превращает его в фатальную ошибку запуска."""
    job: ResizeJob
    worker: int
    error: BaseException


@dataclass(frozen=True)
class JobResult:
    """Результат, принятый сборщиком.

    Fields:
        filename: Имя исходного файла.
        index: Порядковый номер приёма (0..N-1), а не время завершения.
        worker: Номер воркера, выполнившего задачу.
    """
    filename: str
    index: int
    worker: int


@dataclass
class RunSummary:
    results: List[JobResult] = field(default_factory=list)
    elapsed: float = 0.0
