"""
Logging configuration for the vsop87 package.

All modules obtain their logger through get_logger so that output format
and level are controlled in one place.
"""

import logging
import os
import sys

# Debug messages (per-block truncation counts, downloads) are suppressed by default
DEFAULT_LOG_LEVEL = logging.WARNING

LOG_LEVEL_ENV = "VSOP87_LOG_LEVEL"

FORMATTER = logging.Formatter(
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
)

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def get_logger(name: str) -> logging.Logger:
    """
    Get a configured logger for the given name.

    Args:
        name: Name for the logger, typically __name__ of the calling module

    Returns:
        A configured logger instance
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        # Inherit an explicitly set package level, else fall back to the environment
        root_logger = logging.getLogger("vsop87")
        log_level = root_logger.level if root_logger.level != logging.NOTSET else _get_log_level()
        logger.setLevel(log_level)

        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(FORMATTER)
        logger.addHandler(handler)

    return logger


def _get_log_level() -> int:
    """
    Get the logging level from the VSOP87_LOG_LEVEL environment variable.

    Returns:
        The appropriate logging level as an int
    """
    log_level_str = os.environ.get(LOG_LEVEL_ENV, "").upper()
    return _LEVELS.get(log_level_str, DEFAULT_LOG_LEVEL)


def set_log_level(level: int) -> None:
    """
    Set the logging level for all vsop87 loggers.

    Args:
        level: The logging level to set (e.g., logging.DEBUG)
    """
    logger = logging.getLogger("vsop87")
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.setLevel(level)

    # Loggers created by get_logger carry their own level and handler
    for name, child in logging.Logger.manager.loggerDict.items():
        if name.startswith("vsop87.") and isinstance(child, logging.Logger):
            child.setLevel(level)
            for handler in child.handlers:
                handler.setLevel(level)
