"""Tests for the bounded worker pool."""

import threading
import time
from collections import Counter
from pathlib import Path

import pytest

from sortbydate.pipeline.worker_pool import PoolStats, WorkerPool


def _jobs(count):
    return [Path(f"/in/file{i}.jpg") for i in range(count)]


class RecordingHandler:
    """Handler recording every job it sees, optionally failing some."""

    def __init__(self, fail_on=(), delay=0.0):
        self.seen = []
        self.fail_on = set(fail_on)
        self.delay = delay
        self._lock = threading.Lock()

    def __call__(self, job):
        if self.delay:
            time.sleep(self.delay)
        with self._lock:
            self.seen.append(job)
        if job in self.fail_on:
            raise PermissionError(f"cannot read {job}")


class TestWorkerPoolValidation:
    """Tests for pool parameter validation."""

    def test_rejects_zero_workers(self):
        """At least one worker is required."""
        with pytest.raises(ValueError):
            WorkerPool(lambda job: None, workers=0)

    def test_rejects_zero_buffer(self):
        """Queue capacity must be positive."""
        with pytest.raises(ValueError):
            WorkerPool(lambda job: None, buffer=0)


class TestWorkerPoolRun:
    """Tests for WorkerPool.run."""

    @pytest.mark.parametrize("count,workers,buffer", [
        (0, 1, 1),
        (1, 1, 1),
        (1, 8, 100),
        (7, 3, 1),
        (50, 1, 1),
        (50, 8, 2),
        (100, 16, 100),
        (3, 10, 1),
    ])
    def test_every_job_processed_once(self, count, workers, buffer, progress):
        """Each job is handled exactly once and the pool terminates."""
        handler = RecordingHandler()
        jobs = _jobs(count)

        stats = WorkerPool(handler, workers=workers, buffer=buffer, progress=progress).run(jobs)

        assert Counter(handler.seen) == Counter(jobs)
        assert stats.total == count
        assert stats.succeeded == count
        assert stats.failed == 0
        assert progress.count == count

    def test_failure_does_not_stop_siblings(self, progress):
        """A failing job is counted and the others still complete."""
        jobs = _jobs(10)
        handler = RecordingHandler(fail_on={jobs[3]})

        stats = WorkerPool(handler, workers=4, buffer=2, progress=progress).run(jobs)

        assert len(handler.seen) == 10
        assert stats.failed == 1
        assert stats.succeeded == 9
        assert progress.count == 10

    def test_all_failures_still_terminate(self, progress):
        """The pool finishes even when every job fails."""
        jobs = _jobs(20)
        handler = RecordingHandler(fail_on=set(jobs))

        stats = WorkerPool(handler, workers=3, buffer=1, progress=progress).run(jobs)

        assert stats.failed == 20
        assert progress.count == 20

    def test_runs_concurrently(self):
        """Jobs are spread over several worker threads."""
        names = set()
        lock = threading.Lock()

        def handler(job):
            time.sleep(0.01)
            with lock:
                names.add(threading.current_thread().name)

        WorkerPool(handler, workers=4, buffer=4).run(_jobs(20))

        assert len(names) > 1
        assert all(name.startswith("sortbydate-worker-") for name in names)

    def test_single_worker_preserves_order(self):
        """One worker drains the FIFO queue in order."""
        handler = RecordingHandler()
        jobs = _jobs(25)

        WorkerPool(handler, workers=1, buffer=3).run(jobs)

        assert handler.seen == jobs

    def test_generator_jobs(self):
        """Any iterable of jobs is accepted."""
        handler = RecordingHandler()

        stats = WorkerPool(handler, workers=2, buffer=1).run(p for p in _jobs(5))

        assert stats.total == 5

    def test_no_threads_left_behind(self):
        """All workers have exited when run() returns."""
        WorkerPool(RecordingHandler(), workers=5, buffer=2).run(_jobs(12))

        leftovers = [t for t in threading.enumerate() if t.name.startswith("sortbydate-worker-")]
        assert leftovers == []

    def test_debug_mode(self, progress):
        """Debug logging does not change the outcome."""
        stats = WorkerPool(RecordingHandler(), workers=2, progress=progress, debug=True).run(_jobs(4))

        assert stats.succeeded == 4

    def test_reports_elapsed_time(self):
        """Elapsed time is measured."""
        stats = WorkerPool(RecordingHandler(delay=0.01), workers=1).run(_jobs(2))

        assert stats.elapsed > 0

    def test_stats_reset_between_runs(self):
        """Each run reports its own counts."""
        pool = WorkerPool(RecordingHandler(), workers=2)
        pool.run(_jobs(3))

        stats = pool.run(_jobs(2))

        assert stats.total == 2


class TestPoolStats:
    """Tests for PoolStats defaults."""

    def test_defaults(self):
        """All counts start at zero."""
        assert PoolStats() == PoolStats(total=0, succeeded=0, failed=0, elapsed=0.0)
