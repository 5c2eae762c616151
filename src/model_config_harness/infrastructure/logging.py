"""Logging configuration using Rich and standard logging."""

import logging
from pathlib import Path

from rich.logging import RichHandler

from model_config_harness.constants import DATE_FORMAT, LOG_FORMAT


def setup_logging(log_level: str = "INFO", log_file: Path | None = None) -> None:
    """Configure the root logger with a Rich console handler and an optional file handler.

    Args:
        log_level: The logging level for the console (DEBUG, INFO, WARNING, ERROR).
        log_file: Optional path to a log file, which always receives DEBUG records.

    Raises:
        ValueError: If ``log_level`` is not a known level name.
    """
    level = getattr(logging, log_level.upper(), None)
    if not isinstance(level, int):
        msg = f"Invalid log level: {log_level}"
        raise ValueError(msg)  # noqa: TRY004

    logger = logging.getLogger()
    logger.setLevel(logging.DEBUG)

    # Remove existing handlers to avoid duplicates
    if logger.handlers:
        logger.handlers.clear()

    console_handler = RichHandler(
        rich_tracebacks=True,
        markup=False,
        show_path=False,
        show_time=True,
        show_level=True,
    )
    console_handler.setLevel(level)
    logger.addHandler(console_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(file_handler)
