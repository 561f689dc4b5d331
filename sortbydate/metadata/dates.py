"""Capture date parsing and tag-priority resolution."""

from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Mapping, Optional, Sequence, Tuple

from loguru import logger

from sortbydate.config.settings import (
    EXIF_DATE_FORMATS,
    FILE_MODIFY_DATE_TAG,
    METADATA_DATE_TAGS,
)


@dataclass(frozen=True)
class ExtractionResult:
    """
    Best-effort capture date for a file.

    Attributes:
        timestamp: Parsed date, None when no usable date was found.
        tag: Metadata tag that supplied the date, empty when none did.
    """

    timestamp: Optional[datetime] = None
    tag: str = ""

    @property
    def found(self) -> bool:
        """True when both a timestamp and its source tag are present."""
        return self.timestamp is not None and bool(self.tag)


def date_tags(use_file_modify_date: bool = False) -> Tuple[str, ...]:
    """
    Return the ordered list of tags searched for a date.

    Args:
        use_file_modify_date: Append FileModifyDate as a last fallback.
    """
    if use_file_modify_date:
        return METADATA_DATE_TAGS + (FILE_MODIFY_DATE_TAG,)
    return METADATA_DATE_TAGS


def parse_exif_date(value: str) -> datetime:
    """
    Parse an exiftool date string.

    Supported layouts, tried in order:
    - ``2006:01:02 15:04:05+02:00`` (with UTC offset)
    - ``2006:01:02 15:04:05``
    - ``2006:01:02``

    Dates without an offset are interpreted as UTC.

    Args:
        value: Raw tag value.

    Returns:
        Timezone-aware datetime.

    Raises:
        ValueError: If no layout matches.
    """
    for layout in EXIF_DATE_FORMATS:
        try:
            parsed = datetime.strptime(value, layout)
        except ValueError:
            continue
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed

    raise ValueError(f"unrecognized date format: {value}")


def find_date(
    fields: Mapping[str, Any],
    tags: Sequence[str],
    path: Optional[Path] = None,
) -> ExtractionResult:
    """
    Return the first tag, in order, whose value parses as a date.

    Malformed values are logged and skipped so later tags still get a chance.

    Args:
        fields: Metadata as returned by exiftool (tag name -> value).
        tags: Tags to consult, highest priority first.
        path: File the metadata belongs to, for log context.

    Returns:
        ExtractionResult, empty if no tag yields a date.
    """
    for tag in tags:
        value = fields.get(tag)
        if not isinstance(value, str):
            continue
        try:
            return ExtractionResult(timestamp=parse_exif_date(value), tag=tag)
        except ValueError as e:
            logger.warning(f"[EXIF] Error parsing date '{value}' for tag '{tag}' in file {path}: {e}")

    logger.info(f"[EXIF] No valid date found in metadata for {path}")
    return ExtractionResult()
