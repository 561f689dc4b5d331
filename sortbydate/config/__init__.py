"""Configuration and CLI handling."""

from sortbydate.config.settings import (
    DEFAULT_WORKERS,
    DEFAULT_BUFFER,
    LOG_FILE,
    SYSTEM_DIRECTORIES,
    PRIMARY_DATE_TAG,
    METADATA_DATE_TAGS,
    FILE_MODIFY_DATE_TAG,
    EXIF_DATE_FORMATS,
)
from sortbydate.config.context import (
    OutputTarget,
    SortConfig,
    classify_output,
    is_remote_output,
)
from sortbydate.config.cli import (
    create_parser,
    parse_arguments,
    args_to_config,
    validate_config,
)

__all__ = [
    "DEFAULT_WORKERS",
    "DEFAULT_BUFFER",
    "LOG_FILE",
    "SYSTEM_DIRECTORIES",
    "PRIMARY_DATE_TAG",
    "METADATA_DATE_TAGS",
    "FILE_MODIFY_DATE_TAG",
    "EXIF_DATE_FORMATS",
    "OutputTarget",
    "SortConfig",
    "classify_output",
    "is_remote_output",
    "create_parser",
    "parse_arguments",
    "args_to_config",
    "validate_config",
]
