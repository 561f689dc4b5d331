"""User interface: console output and progress reporting."""

from sortbydate.ui.console import ConsoleUI
from sortbydate.ui.progress import ProgressReporter

__all__ = [
    "ConsoleUI",
    "ProgressReporter",
]
