"""Сборщик результатов: принимает ровно N сообщений от воркеров в порядке поступления."""
from __future__ import annotations

import logging
import queue
from typing import List, Union

from images_resizer.models.errors import ResizeJobError
from images_resizer.models.job_model import JobCompletion, JobFailure, JobResult

logger = logging.getLogger(__name__)

Message = Union[JobCompletion, JobFailure]


class CollectorService:
    def receive(self, results: "queue.Queue[Message]", index: int) -> JobResult:
        """Блокируется до следующего сообщения. Ошибка воркера фатальна для всего запуска."""
        message = results.get()
        if isinstance(message, JobFailure):
            raise ResizeJobError(message.job.filename, str(message.error)) from message.error
        logger.info("%s OK [%d]", message.filename, index)
        return JobResult(filename=message.filename, index=index, worker=message.worker)

    def collect(self, results: "queue.Queue[Message]", total: int) -> List[JobResult]:
        """Ровно `total` приёмов; индекс = порядок приёма, а не время завершения."""
        return [self.receive(results, index) for index in range(total)]
