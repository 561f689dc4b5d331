"""Destination path resolution (YEAR/MONTH layout)."""

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path, PurePath
from typing import Optional, Tuple

from sortbydate.config.context import OutputTarget


@dataclass(frozen=True)
class Destination:
    """
    Where a file goes.

    Attributes:
        directory: YEAR/MONTH directory (local Path or remote POSIX path).
        path: Full destination file path inside directory.
        host: ``user@host`` for remote destinations, None locally.
    """

    directory: PurePath
    path: PurePath
    host: Optional[str] = None

    @property
    def remote(self) -> bool:
        return self.host is not None

    @property
    def target(self) -> str:
        """Destination as passed to the transfer command."""
        if self.host is not None:
            return f"{self.host}:{self.path}"
        return str(self.path)


def date_folders(timestamp: datetime) -> Tuple[str, str]:
    """
    Return the (year, month) folder names for a timestamp.

    Examples:
        2023-05-10 -> ("2023", "05")
    """
    return f"{timestamp.year:04d}", f"{timestamp.month:02d}"


def resolve_destination(
    timestamp: datetime,
    source: Path,
    target: OutputTarget,
) -> Destination:
    """
    Compute the destination of a file from its capture date.

    The destination keeps the source base name. Existing files with the
    same name are not deduplicated: the transfer overwrites them.

    Args:
        timestamp: Accepted capture date.
        source: Source file path.
        target: Classified output target.

    Returns:
        Destination for the file.
    """
    year, month = date_folders(timestamp)

    if target.remote:
        directory = target.base / year / month
        return Destination(directory=directory, path=directory / source.name, host=target.host)

    directory = Path(target.root) / year / month
    return Destination(directory=directory, path=directory / source.name)
