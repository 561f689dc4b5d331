"""Configuration settings and constants for the sortbydate package."""

from typing import FrozenSet, Tuple

# Worker pool defaults
DEFAULT_WORKERS: int = 8
DEFAULT_BUFFER: int = 100

# Log file, created in the working directory
LOG_FILE: str = "sortbydate.log"

# OS-internal metadata directories never descended into
SYSTEM_DIRECTORIES: FrozenSet[str] = frozenset({
    ".DocumentRevisions-V100",
    ".Spotlight-V100",
    ".fseventsd",
})

# Metadata tags searched for a capture date, in priority order
PRIMARY_DATE_TAG: str = "DateTimeOriginal"
METADATA_DATE_TAGS: Tuple[str, ...] = (PRIMARY_DATE_TAG, "CreateDate", "DateCreated")
FILE_MODIFY_DATE_TAG: str = "FileModifyDate"

# Accepted exiftool date layouts, tried in order
EXIF_DATE_FORMATS: Tuple[str, ...] = (
    "%Y:%m:%d %H:%M:%S%z",
    "%Y:%m:%d %H:%M:%S",
    "%Y:%m:%d",
)

# External commands
SSH_COMMAND: str = "ssh"
RSYNC_COMMAND: str = "rsync"
RSYNC_ARCHIVE_FLAGS: str = "-aHAXv"
