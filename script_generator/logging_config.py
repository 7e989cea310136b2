"""Logging configuration for the script generator.

Modules obtain their logger through :func:`get_logger`. Nothing is
configured on import; the CLI calls :func:`setup_logging` once at startup.
"""

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: str | int = "WARNING", log_file: str | Path | None = None
) -> logging.Logger:
    """Configure the package logger with a rich console handler.

    Args:
        level: Log level name or number for the console handler.
        log_file: Optional file that receives DEBUG and above.

    Returns:
        The configured package logger.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    package_logger = logging.getLogger("script_generator")
    package_logger.setLevel(logging.DEBUG)
    package_logger.handlers.clear()
    package_logger.propagate = False

    console_handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    console_handler.setLevel(level)
    package_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        package_logger.addHandler(file_handler)

    return package_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the given name.

    Args:
        name: The name for the logger (typically __name__ of the module).

    Returns:
        A logger instance.
    """
    return logging.getLogger(name)
