"""Конфигурация одного запуска.

Принципы:
- SRP: хранит и валидирует параметры, ничего не запускает.
- Чистый код: ошибки конфигурации обнаруживаются до обработки любого файла.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from images_resizer.models.errors import ConfigError

DEFAULT_DIRECTORY = "."
DEFAULT_FACTOR = 0.5
DEFAULT_WORKERS = 5

STRATEGIES = ("pool", "sequential", "per_job")


@dataclass(frozen=True)
class ResizeConfig:
    """Параметры запуска.

    Fields:
        directory: Каталог с изображениями (без рекурсии).
        factor: Коэффициент масштабирования из интервала (0.0, 1.0).
        workers: Размер пула воркеров для стратегии "pool".
        strategy: "pool" | "sequential" | "per_job".
    """
    directory: Path = Path(DEFAULT_DIRECTORY)
    factor: float = DEFAULT_FACTOR
    workers: int = DEFAULT_WORKERS
    strategy: str = "pool"

    def __post_init__(self) -> None:
        # границы интервала не допускаются
        if not 0.0 < self.factor < 1.0:
            raise ConfigError(f"Scaling factor must be in (0.0, 1.0), got {self.factor}")
        if self.workers < 1:
            raise ConfigError(f"Number of workers must be positive, got {self.workers}")
        if self.strategy not in STRATEGIES:
            raise ConfigError(f"Unknown strategy {self.strategy!r}, expected one of {', '.join(STRATEGIES)}")
        object.__setattr__(self, "directory", Path(self.directory))
