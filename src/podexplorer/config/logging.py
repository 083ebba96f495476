"""Logging setup for the Podcast Explorer CLI."""

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

FILE_LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def setup_logging(
    verbose: bool = False,
    log_file: Path | None = None,
    level: str = "WARNING",
) -> logging.Logger:
    """Configure the package logger.

    Console output goes to stderr through rich so it never mixes with
    ``--json`` output on stdout.

    Args:
        verbose: Force DEBUG level
        log_file: Optional file that receives the same records
        level: Level name used when not verbose

    Returns:
        The configured ``podexplorer`` logger
    """
    log_level = logging.DEBUG if verbose else getattr(logging, level.upper(), logging.WARNING)

    logger = logging.getLogger("podexplorer")
    logger.setLevel(log_level)
    logger.handlers.clear()
    logger.propagate = False

    console_handler = RichHandler(
        console=Console(stderr=True),
        show_time=verbose,
        show_path=verbose,
        rich_tracebacks=True,
        markup=False,
    )
    console_handler.setLevel(log_level)
    logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT))
        logger.addHandler(file_handler)
        # File gets everything regardless of console verbosity
        logger.setLevel(logging.DEBUG)

    return logger
