"""Контроллер запуска: оркестрация сервисов для одного прохода по каталогу.

SOLID:
- SRP: класс связывает перечисление задач, планировщик и обработку (без алгоритмов).
- DIP: зависит от сервисов как от ролей; конкретные реализации подставляются полями.
Clean Code:
- Тяжёлая логика вынесена в сервисы, контроллер только измеряет время и пишет отчёт.
"""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from functools import partial

from images_resizer.models.config_model import ResizeConfig
from images_resizer.models.job_model import RunSummary
from images_resizer.services.job_service import JobService
from images_resizer.services.scheduler_service import SchedulerService
from images_resizer.services.task_service import TaskService

logger = logging.getLogger(__name__)

RULE = "-" * 80


@dataclass
class ResizeController:
    """Выполняет один запуск по конфигурации.

    Ответственности:
    - Построение списка задач через `TaskService`.
    - Выбор стратегии планировщика и передача ему обработчика задачи.
    - Отчёт о затраченном времени.
    """
    _task_service: TaskService = TaskService()
    _job_service: JobService = JobService()
    _scheduler: SchedulerService = SchedulerService()

    def run(self, config: ResizeConfig) -> RunSummary:
        start = time.perf_counter()
        logger.info(RULE)

        jobs = self._task_service.build_jobs(config.directory)
        process = partial(self._job_service.process, factor=config.factor)

        if config.strategy == "sequential":
            results = self._scheduler.run_sequential(jobs, process)
        elif config.strategy == "per_job":
            results = self._scheduler.run_per_job(jobs, process)
        else:
            results = self._scheduler.run_pool(jobs, process, workers=config.workers)

        elapsed = time.perf_counter() - start
        logger.info(RULE)
        logger.info("Resize images time: %.3fs", elapsed)
        return RunSummary(results=results, elapsed=elapsed)
