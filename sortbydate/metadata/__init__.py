"""Metadata extraction (capture dates)."""

from sortbydate.metadata.dates import (
    ExtractionResult,
    date_tags,
    parse_exif_date,
    find_date,
)
from sortbydate.metadata.exif import ExifToolService

__all__ = [
    "ExtractionResult",
    "date_tags",
    "parse_exif_date",
    "find_date",
    "ExifToolService",
]
