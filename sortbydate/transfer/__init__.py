"""File transfer to local or remote destinations."""

from sortbydate.transfer.executor import (
    TransferExecutor,
    LocalExecutor,
    RemoteExecutor,
    create_executor,
    remote_shell_path,
)

__all__ = [
    "TransferExecutor",
    "LocalExecutor",
    "RemoteExecutor",
    "create_executor",
    "remote_shell_path",
]
