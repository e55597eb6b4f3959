"""
Logging configuration for gradle-docs.
Provides a centralized logger shared by the locator, the version provider and the CLI.
"""
import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "gradle-docs"


class ColoredFormatter(logging.Formatter):
    """Formatter that colors the level name of each record."""

    LEVEL_COLORS = {
        logging.DEBUG: '\033[36m',
        logging.INFO: '\033[32m',
        logging.WARNING: '\033[33m',
        logging.ERROR: '\033[31m',
        logging.CRITICAL: '\033[35m',
    }
    RESET = '\033[0m'

    def format(self, record):
        color = self.LEVEL_COLORS.get(record.levelno)
        if color is None:
            return super().format(record)
        levelname = record.levelname
        record.levelname = f"{color}{levelname}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = levelname


def setup_logger(name: str = ROOT_LOGGER_NAME, level: int = logging.WARNING) -> logging.Logger:
    """
    Set up the application logger.

    Args:
        name: Logger name
        level: Logging level (default: WARNING)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Reconfigure in place when a handler is already attached
    if logger.handlers:
        set_log_level(level, name)
        return logger

    logger.setLevel(level)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(ColoredFormatter(fmt='%(levelname)-8s %(name)s: %(message)s'))

    logger.addHandler(handler)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Optional component name. If None, returns the root gradle-docs logger.

    Returns:
        Logger instance
    """
    if name is None:
        return logging.getLogger(ROOT_LOGGER_NAME)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def set_log_level(level: int, name: str = ROOT_LOGGER_NAME):
    """Update the level of the named logger and all of its handlers."""
    logger = logging.getLogger(name)
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.setLevel(level)


# Initialize the main logger
_main_logger = setup_logger()
