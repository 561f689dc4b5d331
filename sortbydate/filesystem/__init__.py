"""Filesystem operations for media organization."""

from sortbydate.filesystem.discovery import (
    CollectionResult,
    collect_files,
    is_system_directory,
)
from sortbydate.filesystem.paths import (
    Destination,
    date_folders,
    resolve_destination,
)
from sortbydate.filesystem.file_ops import (
    ensure_directory,
    copy_file,
    move_file,
)

__all__ = [
    "CollectionResult",
    "collect_files",
    "is_system_directory",
    "Destination",
    "date_folders",
    "resolve_destination",
    "ensure_directory",
    "copy_file",
    "move_file",
]
