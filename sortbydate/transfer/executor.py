"""Transfer executors: local copy/move or remote ssh + rsync."""

import shlex
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List

from loguru import logger

from sortbydate.config.context import SortConfig
from sortbydate.config.settings import RSYNC_ARCHIVE_FLAGS, RSYNC_COMMAND, SSH_COMMAND
from sortbydate.exceptions import TransferError
from sortbydate.filesystem.file_ops import copy_file, ensure_directory, move_file
from sortbydate.filesystem.paths import Destination


def remote_shell_path(path: str) -> str:
    """
    Quote a path for the remote shell, keeping a leading ``~`` expandable.

    Examples:
        '/my photos/2023' -> "'/my photos/2023'"
        '~/backup/2023' -> '~/backup/2023'
    """
    if path == "~":
        return path
    if path.startswith("~/"):
        return "~/" + shlex.quote(path[2:])
    return shlex.quote(path)


class TransferExecutor(ABC):
    """
    Base class for moving a file to its resolved destination.

    Handles dry-run mode and logging; subclasses only create the
    destination directory and send the file.
    """

    def __init__(self, copy_mode: bool = False, dry_run: bool = False) -> None:
        self.copy_mode = copy_mode
        self.dry_run = dry_run

    @property
    def action(self) -> str:
        return "Copy" if self.copy_mode else "Move"

    def transfer(self, source: Path, destination: Destination) -> None:
        """
        Transfer one file.

        In dry-run mode the intended action is logged and nothing else
        happens: no directory creation, no copy, no remote call.

        Args:
            source: Source file path.
            destination: Resolved destination.

        Raises:
            TransferError: If directory creation or the transfer fails.
        """
        if self.dry_run:
            logger.info(f"[DRY-RUN] {self.action}: {source} → {destination.target}")
            return

        self.prepare(destination)
        logger.info(f"{self.action}: {source} → {destination.target}")
        self.send(source, destination)

    @abstractmethod
    def prepare(self, destination: Destination) -> None:
        """Ensure the destination directory exists."""

    @abstractmethod
    def send(self, source: Path, destination: Destination) -> None:
        """Copy or move the file into the existing destination directory."""


class LocalExecutor(TransferExecutor):
    """Transfers within the local filesystem."""

    def prepare(self, destination: Destination) -> None:
        ensure_directory(Path(destination.directory))

    def send(self, source: Path, destination: Destination) -> None:
        if self.copy_mode:
            copy_file(source, Path(destination.path))
        else:
            move_file(source, Path(destination.path))


class RemoteExecutor(TransferExecutor):
    """
    Transfers to a remote host.

    The YEAR/MONTH directory is created with ``ssh host mkdir -p`` and the
    file is sent with ``rsync -aHAXv``. In move mode rsync is asked to
    remove the source, which it only does once the transfer succeeded.
    """

    def run_command(self, args: List[str]) -> None:
        """
        Run an external command.

        Raises:
            TransferError: If the command cannot start or exits non-zero.
        """
        logger.debug(f"Executing: {' '.join(args)}")
        try:
            completed = subprocess.run(args, capture_output=True, text=True, check=False)
        except OSError as e:
            raise TransferError(f"failed to run {args[0]}: {e}") from e

        if completed.returncode != 0:
            output = (completed.stdout or "") + (completed.stderr or "")
            raise TransferError(
                f"{args[0]} exited with status {completed.returncode}, output: {output.strip()}"
            )

    def mkdir_command(self, destination: Destination) -> List[str]:
        return [SSH_COMMAND, destination.host, "mkdir", "-p", remote_shell_path(str(destination.directory))]

    def rsync_command(self, source: Path, destination: Destination) -> List[str]:
        args = [RSYNC_COMMAND, RSYNC_ARCHIVE_FLAGS]
        if not self.copy_mode:
            args.append("--remove-source-files")
        args.extend([str(source), destination.target])
        return args

    def prepare(self, destination: Destination) -> None:
        try:
            self.run_command(self.mkdir_command(destination))
        except TransferError as e:
            raise TransferError(f"failed to create remote dir {destination.directory}: {e}") from e

    def send(self, source: Path, destination: Destination) -> None:
        try:
            self.run_command(self.rsync_command(source, destination))
        except TransferError as e:
            raise TransferError(f"failed to rsync {source}: {e}") from e


def create_executor(config: SortConfig) -> TransferExecutor:
    """
    Select the executor matching the output target.

    Args:
        config: Run configuration.

    Returns:
        RemoteExecutor for ``user@host:path`` outputs, LocalExecutor otherwise.
    """
    executor_class = RemoteExecutor if config.is_remote else LocalExecutor
    return executor_class(copy_mode=config.copy_mode, dry_run=config.dry_run)
