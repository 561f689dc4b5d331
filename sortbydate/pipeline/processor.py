"""Per-file processing: extract date, resolve destination, transfer."""

from datetime import datetime
from pathlib import Path

from loguru import logger

from sortbydate.config.context import SortConfig
from sortbydate.config.settings import PRIMARY_DATE_TAG
from sortbydate.exceptions import DateRejectedError, NoDateError
from sortbydate.filesystem.paths import Destination, resolve_destination
from sortbydate.transfer.executor import TransferExecutor


class FileProcessor:
    """
    Processes one job at a time; safe to share between workers.

    The extractor is any object with an
    ``extract_date(path, use_file_modify_date) -> ExtractionResult`` method,
    normally an ExifToolService.
    """

    def __init__(self, config: SortConfig, extractor, executor: TransferExecutor) -> None:
        self.config = config
        self.extractor = extractor
        self.executor = executor

    def extract_date(self, path: Path) -> datetime:
        """
        Return the accepted capture date of a file.

        Args:
            path: File to inspect.

        Returns:
            Capture date.

        Raises:
            DateRejectedError: If only DateTimeOriginal is accepted and the
                date came from another tag.
            NoDateError: If no tag yielded a date.
        """
        result = self.extractor.extract_date(
            path, use_file_modify_date=self.config.use_file_modify_date
        )

        if self.config.only_datetimeoriginal and result.tag != PRIMARY_DATE_TAG:
            logger.info(f"Skipping {path} because it does not have {PRIMARY_DATE_TAG} tag")
            raise DateRejectedError(f"{PRIMARY_DATE_TAG} not found")

        if not result.found:
            logger.warning(f"No valid date found for {path}")
            raise NoDateError("no valid date found in EXIF or file system")

        logger.debug(f"{path}: {result.timestamp.isoformat()} from {result.tag}")
        return result.timestamp

    def process(self, path: Path) -> Destination:
        """
        Sort one file into its YEAR/MONTH destination.

        Args:
            path: File to sort.

        Returns:
            The destination the file was (or, in dry-run, would be) sent to.

        Raises:
            ExtractionError: If no acceptable date exists.
            TransferError: If the transfer fails; the file stays in place.
        """
        timestamp = self.extract_date(path)
        destination = resolve_destination(timestamp, path, self.config.target)
        self.executor.transfer(path, destination)
        return destination

    __call__ = process
