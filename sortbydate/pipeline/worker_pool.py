"""Bounded worker pool draining a shared job queue."""

import queue
import threading
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Iterable

from loguru import logger

from sortbydate.config.settings import DEFAULT_BUFFER, DEFAULT_WORKERS

# Marks the queue as closed; one is enqueued per worker
_CLOSED = object()


@dataclass
class PoolStats:
    """
    Outcome of a pool run.

    Attributes:
        total: Jobs processed (succeeded + failed).
        succeeded: Jobs whose handler returned normally.
        failed: Jobs whose handler raised.
        elapsed: Wall-clock duration in seconds.
    """

    total: int = 0
    succeeded: int = 0
    failed: int = 0
    elapsed: float = 0.0


class WorkerPool:
    """
    Fixed set of worker threads sharing one bounded FIFO queue.

    The producer blocks while the queue is full. After the last job one
    sentinel per worker closes the queue; run() returns once every worker
    has drained it and exited. A job that raises is logged and counted as
    failed without affecting the other jobs.

    Example:
        pool = WorkerPool(processor.process, workers=8, buffer=100, progress=bar)
        stats = pool.run(paths)
    """

    def __init__(
        self,
        handler: Callable[[Path], Any],
        workers: int = DEFAULT_WORKERS,
        buffer: int = DEFAULT_BUFFER,
        progress=None,
        debug: bool = False,
    ) -> None:
        """
        Args:
            handler: Called once per job.
            workers: Number of worker threads (>= 1).
            buffer: Queue capacity (>= 1).
            progress: Object with an ``advance()`` method, called once per job.
            debug: Log which worker handles each job.

        Raises:
            ValueError: If workers or buffer is below 1.
        """
        if workers < 1:
            raise ValueError(f"workers must be at least 1, got {workers}")
        if buffer < 1:
            raise ValueError(f"buffer must be at least 1, got {buffer}")

        self.handler = handler
        self.workers = workers
        self.buffer = buffer
        self.progress = progress
        self.debug = debug
        self._lock = threading.Lock()
        self._stats = PoolStats()

    def _record(self, success: bool) -> None:
        with self._lock:
            self._stats.total += 1
            if success:
                self._stats.succeeded += 1
            else:
                self._stats.failed += 1

    def _handle(self, worker_id: int, job: Path) -> None:
        log = logger.bind(worker=worker_id)
        if self.debug:
            log.debug(f"Worker {worker_id} handling {job}")

        try:
            self.handler(job)
        except Exception as e:
            log.error(f"Failed processing {job}: {e}")
            self._record(success=False)
        else:
            self._record(success=True)
        finally:
            if self.progress is not None:
                self.progress.advance()

    def _worker(self, worker_id: int, jobs: "queue.Queue") -> None:
        while True:
            job = jobs.get()
            try:
                if job is _CLOSED:
                    return
                self._handle(worker_id, job)
            finally:
                jobs.task_done()

    def run(self, jobs: Iterable[Path]) -> PoolStats:
        """
        Process every job and wait for all workers to finish.

        Args:
            jobs: Job paths, enqueued in order.

        Returns:
            PoolStats for this run.
        """
        start = time.monotonic()
        self._stats = PoolStats()
        job_queue: "queue.Queue" = queue.Queue(maxsize=self.buffer)

        threads = [
            threading.Thread(
                target=self._worker,
                args=(worker_id, job_queue),
                name=f"sortbydate-worker-{worker_id}",
            )
            for worker_id in range(1, self.workers + 1)
        ]
        for thread in threads:
            thread.start()

        try:
            for job in jobs:
                job_queue.put(job)
        finally:
            for _ in threads:
                job_queue.put(_CLOSED)
            for thread in threads:
                thread.join()

        self._stats.elapsed = time.monotonic() - start
        logger.debug(
            f"Pool finished: {self._stats.succeeded} succeeded, "
            f"{self._stats.failed} failed in {self._stats.elapsed:.2f}s"
        )
        return self._stats
