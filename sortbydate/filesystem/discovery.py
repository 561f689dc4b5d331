"""File discovery: enumerate every regular file under the input directory."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from loguru import logger

from sortbydate.config.settings import SYSTEM_DIRECTORIES


@dataclass
class CollectionResult:
    """
    Files found under the input directory.

    Attributes:
        paths: Absolute paths of regular files, one job each.
        total: Number of files collected.
    """

    paths: List[Path] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.paths)


def is_system_directory(name: str) -> bool:
    """Check if a directory name is an OS-internal metadata folder."""
    return name in SYSTEM_DIRECTORIES


def _scan_directory(directory: Path, paths: List[Path], pending: List[Path]) -> None:
    """Append regular files of one directory to paths and subdirectories to pending."""
    try:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda entry: entry.name)
    except PermissionError:
        logger.warning(f"Skipping directory due to permission error: {directory}")
        return
    except OSError as e:
        logger.warning(f"Ignoring walk error for {directory}: {e}")
        return

    subdirectories = []
    for entry in entries:
        try:
            if entry.is_dir(follow_symlinks=False):
                if is_system_directory(entry.name):
                    logger.info(f"Skipping system folder: {entry.path}")
                    continue
                subdirectories.append(Path(entry.path))
            elif entry.is_file(follow_symlinks=False):
                paths.append(Path(entry.path))
            else:
                logger.debug(f"Ignoring non-regular entry: {entry.path}")
        except OSError as e:
            logger.warning(f"Ignoring walk error for {entry.path}: {e}")

    # Reversed so the first subdirectory is popped next
    pending.extend(reversed(subdirectories))


def collect_files(input_dir: Path) -> CollectionResult:
    """
    Collect every regular file under input_dir.

    System folders (Spotlight, fseventsd, document revisions) are skipped
    without descending into them. Unreadable subtrees are skipped and other
    errors are logged; neither aborts the traversal. File contents are
    never opened.

    Args:
        input_dir: Root directory to scan.

    Returns:
        CollectionResult with the full, materialized job list.
    """
    result = CollectionResult()
    pending = [input_dir.absolute()]
    while pending:
        _scan_directory(pending.pop(), result.paths, pending)
    logger.info(f"Estimated total files: {result.total}")
    return result
