"""Pipeline orchestration: collect files, run the pool, report."""

import time
from dataclasses import replace
from datetime import timedelta
from typing import Optional

from loguru import logger

from sortbydate.config.context import SortConfig
from sortbydate.filesystem.discovery import collect_files
from sortbydate.pipeline.processor import FileProcessor
from sortbydate.pipeline.worker_pool import PoolStats, WorkerPool
from sortbydate.transfer.executor import TransferExecutor, create_executor
from sortbydate.ui.progress import ProgressReporter


class SortOrchestrator:
    """
    Runs a complete sort: enumerate, process concurrently, summarize.

    Enumeration finishes before the first job is queued so the progress
    total is exact from the start.
    """

    def __init__(
        self,
        config: SortConfig,
        extractor,
        executor: Optional[TransferExecutor] = None,
        show_progress: bool = True,
    ) -> None:
        """
        Args:
            config: Run configuration.
            extractor: Date extractor shared by all workers.
            executor: Transfer executor; chosen from config when omitted.
            show_progress: Display the tqdm bar.
        """
        self.config = config
        self.extractor = extractor
        self.executor = executor or create_executor(config)
        self.show_progress = show_progress

    def run(self) -> PoolStats:
        """
        Sort every file under the input directory.

        Returns:
            PoolStats with elapsed time covering enumeration and processing.
        """
        start = time.monotonic()
        config = self.config

        collection = collect_files(config.input_dir)
        processor = FileProcessor(config, self.extractor, self.executor)

        with ProgressReporter(collection.total, disable=not self.show_progress) as progress:
            pool = WorkerPool(
                processor.process,
                workers=config.workers,
                buffer=config.buffer,
                progress=progress,
                debug=config.debug,
            )
            stats = pool.run(collection.paths)

        stats = replace(stats, elapsed=time.monotonic() - start)
        logger.info(
            f"Processing finished. Total files: {collection.total}, "
            f"Elapsed time: {timedelta(seconds=stats.elapsed)}"
        )
        if stats.failed:
            logger.warning(f"{stats.failed} file(s) could not be processed")
        return stats
