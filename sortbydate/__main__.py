"""Entry point for the sortbydate package.

This module provides the command-line entry point for the media sorting tool.
Run with: python -m sortbydate -i <input> -o <output>
"""

import sys
from typing import List, Optional

from loguru import logger

from sortbydate.config import (
    LOG_FILE,
    SortConfig,
    args_to_config,
    parse_arguments,
    validate_config,
)
from sortbydate.exceptions import BackendError, ConfigurationError
from sortbydate.metadata import ExifToolService
from sortbydate.pipeline import PoolStats, SortOrchestrator
from sortbydate.ui import ConsoleUI


def setup_logging(debug: bool = False) -> None:
    """
    Configure loguru logging.

    All events are appended to the log file in the working directory.

    Args:
        debug: If True, enable debug-level logging.
    """
    logger.remove()
    logger.configure(extra={"worker": "main"})
    logger.add(
        LOG_FILE,
        level="DEBUG" if debug else "INFO",
        mode="a",
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[worker]} | {message}",
    )


def display_configuration(config: SortConfig, console: ConsoleUI) -> None:
    """
    Display the current configuration to the user.

    Args:
        config: Run configuration.
        console: Console UI instance.
    """
    mode_parts = ["[cyan]COPY[/cyan]" if config.copy_mode else "[cyan]MOVE[/cyan]"]
    if config.dry_run:
        mode_parts.append("[yellow]DRY-RUN[/yellow]")
    mode_status = " ".join(mode_parts)

    sources = "DateTimeOriginal only" if config.only_datetimeoriginal else "EXIF dates"
    if config.use_file_modify_date:
        sources += " + file modify date"

    destination = "remote" if config.is_remote else "local"

    console.print_panel(
        f"[bold]Sort configuration[/bold]\n"
        f"Input: [cyan]{config.input_dir}[/cyan]\n"
        f"Output: [cyan]{config.output}[/cyan] ({destination})\n"
        f"Workers: {config.workers}  Buffer: {config.buffer}\n"
        f"Date sources: {sources}\n"
        f"Mode: {mode_status}",
        title="Sort by date",
    )


def display_summary(stats: PoolStats, console: ConsoleUI) -> None:
    """Print the end-of-run counts."""
    message = (
        f"Processed {stats.total} file(s) in {stats.elapsed:.1f}s: "
        f"{stats.succeeded} sorted, {stats.failed} failed"
    )
    if stats.failed:
        console.print_warning(f"{message} (see {LOG_FILE})")
    else:
        console.print_success(message)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the media sorting tool.

    Args:
        argv: Command-line arguments (None for sys.argv).

    Returns:
        Exit code: 0 once every file was attempted, 1 on a fatal startup error.
    """
    # -h/--help exits here, before any other processing
    namespace = parse_arguments(argv)

    setup_logging(namespace.debug)
    console = ConsoleUI()

    try:
        config = args_to_config(namespace)
        validate_config(config)
    except ConfigurationError as e:
        logger.error(str(e))
        console.print_error(str(e))
        return 1

    if config.dry_run:
        console.print_warning(
            "DRY-RUN MODE\n\n"
            "• No directory will be created\n"
            "• No file will be copied or moved\n"
            "• Intended actions are written to the log"
        )

    display_configuration(config, console)

    service = ExifToolService(debug=config.debug)
    try:
        service.start()
    except BackendError as e:
        logger.error(str(e))
        console.print_error(str(e))
        return 1

    try:
        logger.info(f"Starting sort: {config.input_dir} -> {config.output}")
        stats = SortOrchestrator(config, service).run()
    finally:
        service.close()

    display_summary(stats, console)
    return 0


if __name__ == "__main__":
    sys.exit(main())
