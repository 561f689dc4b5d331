"""Exiftool-backed capture date extraction."""

import json
import threading
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import exiftool
from exiftool.exceptions import ExifToolException
from loguru import logger

from sortbydate.exceptions import BackendError, ExtractionError
from sortbydate.metadata.dates import ExtractionResult, date_tags, find_date

# Plain tag names (no -G group prefix), numeric values for non-date tags
EXIFTOOL_COMMON_ARGS: List[str] = ["-n"]

# Tag exiftool sets when it could only partially read a file
EXIFTOOL_ERROR_TAG: str = "Error"


def default_helper_factory() -> exiftool.ExifToolHelper:
    """
    Build the exiftool helper used in production.

    The exit status is not checked: exiftool exits 1 for files it flags
    with an Error tag but still reports their readable fields, such as
    FileModifyDate. An empty output still raises.
    """
    return exiftool.ExifToolHelper(common_args=EXIFTOOL_COMMON_ARGS, check_execute=False)


class ExifToolService:
    """
    Shared exiftool session with serialized access.

    A single long-running exiftool process is started once and reused for
    every file. Calls are guarded by a lock: at most one extraction is in
    flight at any time, regardless of how many workers are running.

    Usage:
        with ExifToolService() as service:
            result = service.extract_date(path)
    """

    def __init__(
        self,
        helper_factory: Callable[[], Any] = default_helper_factory,
        debug: bool = False,
    ) -> None:
        """
        Initialize the service without starting exiftool.

        Args:
            helper_factory: Callable returning an ExifToolHelper-like object.
            debug: Dump full metadata at debug level.
        """
        self._helper_factory = helper_factory
        self._helper: Optional[Any] = None
        self._lock = threading.Lock()
        self.debug = debug

    @property
    def running(self) -> bool:
        """True once the exiftool process has been started."""
        return self._helper is not None

    def start(self) -> None:
        """
        Start the exiftool process.

        Raises:
            BackendError: If exiftool cannot be started.
        """
        if self._helper is not None:
            return
        try:
            helper = self._helper_factory()
            helper.run()
        except (ExifToolException, OSError, RuntimeError, ValueError) as e:
            raise BackendError(f"Failed to initialize exiftool: {e}") from e
        self._helper = helper
        logger.debug("exiftool session started")

    def close(self) -> None:
        """Terminate the exiftool process if running."""
        with self._lock:
            if self._helper is None:
                return
            try:
                self._helper.terminate()
            except ExifToolException as e:
                logger.warning(f"[EXIF] Error while stopping exiftool: {e}")
            finally:
                self._helper = None
        logger.debug("exiftool session closed")

    def __enter__(self) -> "ExifToolService":
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def read_metadata(self, path: Path) -> Dict[str, Any]:
        """
        Read all metadata fields of a file.

        Args:
            path: File to inspect.

        Returns:
            Tag name -> value mapping, empty if exiftool returned nothing.

        Raises:
            BackendError: If the service is not started.
            ExtractionError: If exiftool fails on this file.
        """
        with self._lock:
            if self._helper is None:
                raise BackendError("exiftool session is not running")
            try:
                metadata = self._helper.get_metadata(str(path))
            except ExifToolException as e:
                raise ExtractionError(f"exiftool failed on {path}: {e}") from e

        if not metadata:
            return {}
        return dict(metadata[0])

    def extract_date(self, path: Path, use_file_modify_date: bool = False) -> ExtractionResult:
        """
        Extract the best-effort capture date of a file.

        Checks DateTimeOriginal, CreateDate and DateCreated, and optionally
        FileModifyDate; the first parseable value wins.

        Args:
            path: File to inspect.
            use_file_modify_date: Consult FileModifyDate as a last fallback.

        Returns:
            ExtractionResult, empty when no usable date exists.
        """
        fields = self.read_metadata(path)
        if not fields:
            logger.warning(f"[EXIF] No metadata extracted for {path}")
            return ExtractionResult()

        if EXIFTOOL_ERROR_TAG in fields:
            logger.warning(f"[EXIF] exiftool reported an error for {path}: {fields[EXIFTOOL_ERROR_TAG]}")

        if self.debug:
            logger.debug(f"Metadata for {path}:\n{json.dumps(fields, indent=2, default=str)}")

        return find_date(fields, date_tags(use_file_modify_date), path)
