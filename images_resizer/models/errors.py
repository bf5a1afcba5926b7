"""Исключения уровня приложения."""
from __future__ import annotations


class ConfigError(ValueError):
    """Некорректная конфигурация запуска (коэффициент, число воркеров, стратегия)."""


class ResizeJobError(RuntimeError):
    """Задача завершилась ошибкой; весь запуск считается проваленным.

    Fields:
        filename: Имя исходного файла, на котором произошла ошибка.
    """

    def __init__(self, filename: str, message: str) -> None:
        super().__init__(f"{filename}: {message}")
        self.filename = filename
