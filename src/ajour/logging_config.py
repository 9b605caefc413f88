"""Logging configuration for Ajour.

All loggers live below the ``ajour`` namespace. ``setup_logging`` is called
once from ``ajour.app.main``; library use without it leaves logging to the
host application.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

LOGGER_NAME = "ajour"

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
CONSOLE_FORMAT = "%(levelname)s - %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(debug: bool = False, log_dir: Optional[Path] = None) -> logging.Logger:
    """Configure the ``ajour`` logger.

    Everything is written to ajour.log. With ``debug`` the same records are
    echoed to stdout. Calling this again replaces the previous handlers.

    Args:
        debug: Echo log records to the console
        log_dir: Directory for ajour.log, defaults to the config directory

    Returns:
        The ``ajour`` logger
    """
    # Imported here: the config package itself logs through get_logger
    from .config.paths import AppPaths

    log_dir = log_dir if log_dir is not None else AppPaths.config_dir()
    log_dir.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    _remove_handlers(logger)

    logger.addHandler(_file_handler(log_dir / AppPaths.LOG_FILE_NAME))
    if debug:
        logger.addHandler(_console_handler())
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get the logger of a module, e.g. ``get_logger("directories")``."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def _file_handler(log_file: Path) -> logging.Handler:
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _console_handler() -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    return handler


def _remove_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
