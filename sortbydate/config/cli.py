"""Command-line interface argument parsing."""

import argparse
from pathlib import Path
from typing import List, Optional

from loguru import logger

from sortbydate import __version__
from sortbydate.config.context import SortConfig
from sortbydate.config.settings import DEFAULT_BUFFER, DEFAULT_WORKERS
from sortbydate.exceptions import ConfigurationError

EPILOG = """\
examples:
  sortbydate -i /path/to/input -o /path/to/output
  sortbydate -i /path/to/input -o user@host:/remote/path --copy
  sortbydate -i /path/to/input -o /path/to/output --dry-run
"""


def positive_int(value: str) -> int:
    """argparse type accepting integers >= 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1: {number}")
    return number


def create_parser() -> argparse.ArgumentParser:
    """
    Create the argument parser for the CLI.

    Long options accept both the single-dash (``-workers``) and the
    double-dash (``--workers``) spelling.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog='sortbydate',
        description="""
        Organize media files by date (YYYY/MM) using EXIF data,
        with optional remote rsync transfer.
        """,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    # Required paths, checked after logging is configured
    parser.add_argument(
        '-i', '--input',
        default=None,
        help="input directory (required)"
    )

    parser.add_argument(
        '-o', '--output',
        default=None,
        help="output: local directory or remote destination user@host:/remote/path (required)"
    )

    # Pool sizing
    parser.add_argument(
        '-workers', '--workers',
        type=positive_int,
        default=DEFAULT_WORKERS,
        help=f"number of concurrent workers (default: {DEFAULT_WORKERS})"
    )

    parser.add_argument(
        '-buffer', '--buffer',
        type=positive_int,
        default=DEFAULT_BUFFER,
        help=f"job queue capacity (default: {DEFAULT_BUFFER})"
    )

    # Mode flags
    parser.add_argument(
        '-copy', '--copy',
        action='store_true',
        help="copy instead of move (keep original files)"
    )

    parser.add_argument(
        '-debug', '--debug',
        action='store_true',
        help="enable debug logging"
    )

    parser.add_argument(
        '-dry-run', '--dry-run',
        action='store_true',
        help="show what would be done, without moving/copying files"
    )

    # Date source policy
    parser.add_argument(
        '-only-datetimeoriginal', '--only-datetimeoriginal',
        action='store_true',
        help="only process files with a DateTimeOriginal tag"
    )

    parser.add_argument(
        '-use-file-modify-date', '--use-file-modify-date',
        action='store_true',
        help="use the file modify date as a last fallback"
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f"%(prog)s {__version__}"
    )

    return parser


def parse_arguments(args: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Args:
        args: List of argument strings (None for sys.argv).

    Returns:
        Parsed Namespace object.
    """
    parser = create_parser()
    return parser.parse_args(args)


def args_to_config(namespace: argparse.Namespace) -> SortConfig:
    """
    Convert argparse Namespace to an immutable SortConfig.

    Args:
        namespace: Parsed argparse Namespace.

    Returns:
        SortConfig instance.

    Raises:
        ConfigurationError: If the input or output path is missing.
    """
    if not namespace.input or not namespace.output:
        raise ConfigurationError("Input (-i) and output (-o) directories are required")

    return SortConfig(
        input_dir=Path(namespace.input),
        output=namespace.output,
        workers=namespace.workers,
        buffer=namespace.buffer,
        copy_mode=namespace.copy,
        dry_run=namespace.dry_run,
        debug=namespace.debug,
        only_datetimeoriginal=namespace.only_datetimeoriginal,
        use_file_modify_date=namespace.use_file_modify_date,
    )


def validate_config(config: SortConfig) -> None:
    """
    Validate startup paths.

    Args:
        config: Configuration to check.

    Raises:
        ConfigurationError: If the input directory is unusable.
    """
    if not config.input_dir.exists():
        raise ConfigurationError(f"Input directory {config.input_dir} does not exist")
    if not config.input_dir.is_dir():
        raise ConfigurationError(f"Input path {config.input_dir} is not a directory")

    if config.is_remote:
        logger.debug(f"Remote output: host={config.target.host} base={config.target.base}")
    else:
        logger.debug(f"Local output: {config.target.root}")
