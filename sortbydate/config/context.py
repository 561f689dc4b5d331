"""Runtime configuration for a sorting run."""

from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from typing import Optional

from sortbydate.config.settings import DEFAULT_BUFFER, DEFAULT_WORKERS


@dataclass(frozen=True)
class OutputTarget:
    """
    Classified output destination.

    Attributes:
        remote: True for a ``user@host:path`` destination.
        root: Local output root (local targets only).
        host: ``user@host`` part (remote targets only).
        base: Base directory on the remote host (remote targets only).
    """

    remote: bool
    root: Optional[Path] = None
    host: Optional[str] = None
    base: Optional[PurePosixPath] = None


def is_remote_output(output: str) -> bool:
    """Check whether an output string designates a remote destination."""
    return "@" in output and ":" in output


def classify_output(output: str) -> OutputTarget:
    """
    Classify an output string as a local directory or a remote descriptor.

    A string containing both ``@`` and ``:`` is remote and split on its
    first ``:`` into host and base path.

    Args:
        output: Raw ``-o`` value.

    Returns:
        OutputTarget describing the destination.
    """
    if is_remote_output(output):
        host, _, base = output.partition(":")
        return OutputTarget(remote=True, host=host, base=PurePosixPath(base))
    return OutputTarget(remote=False, root=Path(output))


@dataclass(frozen=True)
class SortConfig:
    """
    Immutable configuration shared by every component of a run.

    Attributes:
        input_dir: Directory scanned for media files.
        output: Raw output string (local directory or remote descriptor).
        workers: Number of concurrent workers.
        buffer: Capacity of the job queue.
        copy_mode: If True, copy files instead of moving them.
        dry_run: If True, only log the intended actions.
        debug: If True, enable debug logging.
        only_datetimeoriginal: Reject files whose date does not come
            from DateTimeOriginal.
        use_file_modify_date: Fall back to the filesystem modify date.
        target: Output classification, computed once from ``output``.
    """

    input_dir: Path
    output: str
    workers: int = DEFAULT_WORKERS
    buffer: int = DEFAULT_BUFFER
    copy_mode: bool = False
    dry_run: bool = False
    debug: bool = False
    only_datetimeoriginal: bool = False
    use_file_modify_date: bool = False
    target: OutputTarget = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "target", classify_output(self.output))

    @property
    def is_remote(self) -> bool:
        """True when results are synced to a remote host."""
        return self.target.remote
