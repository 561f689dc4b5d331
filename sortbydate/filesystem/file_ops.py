"""File operations for moving and copying media files."""

import os
import shutil
from pathlib import Path

from loguru import logger

from sortbydate.exceptions import TransferError

COPY_CHUNK_SIZE = 1024 * 1024


def ensure_directory(directory: Path) -> None:
    """
    Create a directory and its parents if absent.

    Args:
        directory: Directory to create.

    Raises:
        TransferError: If the directory cannot be created.
    """
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise TransferError(f"failed to create dir {directory}: {e}") from e


def copy_file(source: Path, destination: Path) -> None:
    """
    Copy a file and flush it to disk before returning.

    The content is streamed into the destination, which is then fsynced;
    permissions and timestamps are copied afterwards. An existing
    destination is overwritten.

    Args:
        source: Source file path.
        destination: Destination file path.

    Raises:
        TransferError: If reading, writing or syncing fails.
    """
    try:
        with open(source, 'rb') as src, open(destination, 'wb') as dst:
            shutil.copyfileobj(src, dst, COPY_CHUNK_SIZE)
            dst.flush()
            os.fsync(dst.fileno())
        shutil.copystat(source, destination)
    except OSError as e:
        raise TransferError(f"failed to copy {source} -> {destination}: {e}") from e

    logger.debug(f"File copied: {destination}")


def move_file(source: Path, destination: Path) -> None:
    """
    Move a file with an atomic rename.

    Only works within one filesystem; a cross-device move fails and leaves
    the source where it is. An existing destination is replaced.

    Args:
        source: Source file path.
        destination: Destination file path.

    Raises:
        TransferError: If the rename fails.
    """
    try:
        os.replace(source, destination)
    except OSError as e:
        raise TransferError(f"failed to move {source} -> {destination}: {e}") from e

    logger.debug(f"File moved: {destination}")
