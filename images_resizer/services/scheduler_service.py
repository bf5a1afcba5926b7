"""Планировщик: раздача задач пулу воркеров и сбор результатов (fan-out/fan-in).

Принципы:
- SRP: управляет только потоками и очередями; сама работа передаётся как `process(job)`.
- Чистый код: общие между потоками только две потокобезопасные очереди и флаг отмены.

Поведение при ошибке: любая ошибка задачи фатальна для всего запуска.
Задачи из очереди после ошибки не запускаются, уже выполняющиеся не отменяются,
записанные файлы остаются на диске.
"""
from __future__ import annotations

import logging
import queue
import threading
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from images_resizer.models.config_model import DEFAULT_WORKERS
from images_resizer.models.errors import ResizeJobError
from images_resizer.models.job_model import JobCompletion, JobFailure, JobResult, ResizeJob
from images_resizer.services.collector_service import CollectorService, Message

logger = logging.getLogger(__name__)

ProcessFn = Callable[[ResizeJob], Path]


class SchedulerService:
    def __init__(self, collector: Optional[CollectorService] = None) -> None:
        self._collector = collector or CollectorService()

    # ---------- Вспомогательные функции ----------
    def _execute(self, job: ResizeJob, worker: int, results: "queue.Queue[Message]", process: ProcessFn) -> bool:
        """Выполняет одну задачу и кладёт ровно одно сообщение в очередь результатов."""
        logger.info("Resizing %s (worker %d)", job.filename, worker)
        try:
            out_path = process(job)
        except BaseException as exc:
            # передаётся координатору, он и завершает запуск
            results.put(JobFailure(job=job, worker=worker, error=exc))
            if not isinstance(exc, Exception):
                raise
            return False
        results.put(JobCompletion(filename=job.filename, worker=worker, output_path=out_path))
        return True

    def _worker_loop(
        self,
        worker: int,
        jobs: "queue.Queue[Optional[ResizeJob]]",
        results: "queue.Queue[Message]",
        process: ProcessFn,
        abort: threading.Event,
    ) -> None:
        while True:
            job = jobs.get()
            # None - маркер закрытия очереди
            if job is None or abort.is_set():
                return
            if not self._execute(job, worker, results, process):
                return

    # ---------- Стратегии ----------
    def run_pool(self, jobs: Sequence[ResizeJob], process: ProcessFn, workers: int = DEFAULT_WORKERS) -> List[JobResult]:
        """
        Фиксированный пул из `workers` потоков над общей очередью задач.
        Блокирует вызывающего, пока не будут приняты все N результатов.
        """
        if workers < 1:
            raise ValueError(f"Number of workers must be positive, got {workers}")

        total = len(jobs)
        # по слоту на задачу и на маркер закрытия для каждого воркера
        job_queue: "queue.Queue[Optional[ResizeJob]]" = queue.Queue(maxsize=total + workers)
        results: "queue.Queue[Message]" = queue.Queue(maxsize=max(total, 1))
        abort = threading.Event()

        threads = [
            threading.Thread(
                target=self._worker_loop,
                args=(i, job_queue, results, process, abort),
                name=f"resize-worker-{i}",
                daemon=True,
            )
            for i in range(workers)
        ]
        for thread in threads:
            thread.start()

        for job in jobs:
            job_queue.put(job)
        for _ in threads:
            job_queue.put(None)

        try:
            collected = self._collector.collect(results, total)
        except ResizeJobError:
            # выполняющиеся задачи не ждём
            abort.set()
            raise

        for thread in threads:
            thread.join()
        return collected

    def run_sequential(self, jobs: Sequence[ResizeJob], process: ProcessFn) -> List[JobResult]:
        """Задачи по одной в потоке вызывающего; каждый результат принимается сразу."""
        results: "queue.Queue[Message]" = queue.Queue(maxsize=1)
        collected: List[JobResult] = []
        for index, job in enumerate(jobs):
            self._execute(job, 0, results, process)
            collected.append(self._collector.receive(results, index))
        return collected

    def run_per_job(self, jobs: Sequence[ResizeJob], process: ProcessFn) -> List[JobResult]:
        """Отдельный поток на каждую задачу, без ограничения параллелизма."""
        total = len(jobs)
        results: "queue.Queue[Message]" = queue.Queue(maxsize=max(total, 1))
        threads = [
            threading.Thread(
                target=self._execute,
                args=(job, i, results, process),
                name=f"resize-job-{i}",
                daemon=True,
            )
            for i, job in enumerate(jobs)
        ]
        for thread in threads:
            thread.start()

        collected = self._collector.collect(results, total)
        for thread in threads:
            thread.join()
        return collected
