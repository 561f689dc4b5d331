"""Media sorting pipeline."""

from sortbydate.pipeline.processor import FileProcessor
from sortbydate.pipeline.worker_pool import PoolStats, WorkerPool
from sortbydate.pipeline.orchestrator import SortOrchestrator

__all__ = [
    "FileProcessor",
    "PoolStats",
    "WorkerPool",
    "SortOrchestrator",
]
