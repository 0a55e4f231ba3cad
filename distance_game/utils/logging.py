"""
Logging utilities for the Distance Game.

Handlers live on the package logger ("distance_game"); each module asks
for a child logger named after itself and inherits them.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

PACKAGE_LOGGER = "distance_game"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    format_string: str = LOG_FORMAT
) -> logging.Logger:
    """
    Configure the package logger, replacing any earlier setup.

    Args:
        level: Logging level for the whole package
        log_file: Optional path to log file
        format_string: Record format

    Returns:
        The package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(format_string, datefmt="%Y-%m-%d %H:%M:%S")
    handlers = [logging.StreamHandler(sys.stdout)]

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Logger for a module of this package.

    Args:
        name: Module name (usually __name__); None for the package logger
    """
    package = logging.getLogger(PACKAGE_LOGGER)
    if not package.handlers:
        setup_logging()

    if not name or name == PACKAGE_LOGGER:
        return package
    if not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)
