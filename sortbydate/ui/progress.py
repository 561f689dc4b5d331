"""Thread-safe progress reporting with tqdm."""

import threading
from typing import Optional

from tqdm import tqdm


class ProgressReporter:
    """
    Progress bar shared by all workers.

    Each call to advance() counts one processed job, successful or not.
    """

    def __init__(self, total: int, desc: str = "Processing", disable: bool = False) -> None:
        """
        Args:
            total: Number of jobs expected.
            desc: Bar label.
            disable: Hide the bar (counting still happens).
        """
        self.total = total
        self.count = 0
        self._lock = threading.Lock()
        self._bar: Optional[tqdm] = tqdm(
            total=total,
            desc=desc,
            unit="file",
            ncols=80,
            leave=False,
            disable=disable,
        )

    def advance(self, step: int = 1) -> None:
        """Record processed jobs."""
        with self._lock:
            self.count += step
            if self._bar is not None:
                self._bar.update(step)

    def close(self) -> None:
        """Close the underlying bar."""
        with self._lock:
            if self._bar is not None:
                self._bar.close()
                self._bar = None

    def __enter__(self) -> "ProgressReporter":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
