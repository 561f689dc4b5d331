"""Custom exceptions for the sorting pipeline."""


class SortError(Exception):
    """Base class for all sortbydate errors."""

    pass


class ConfigurationError(SortError):
    """Invalid or missing startup configuration (input/output paths, etc.)."""

    pass


class BackendError(SortError):
    """The metadata backend (exiftool) could not be started or used."""

    pass


class ExtractionError(SortError):
    """No usable capture date could be obtained for a file."""

    pass


class NoDateError(ExtractionError):
    """No metadata field yielded a parseable date."""

    pass


class DateRejectedError(ExtractionError):
    """A date was found but rejected by the date-source policy."""

    pass


class TransferError(SortError):
    """Directory creation, copy, move or remote sync failed."""

    pass
