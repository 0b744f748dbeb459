"""
Shared helpers for the vsop87 command line.

This module handles logging configuration and the date formats accepted by
the commands.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict

from ..logging import set_log_level
from ..space_time.julian import datetime_to_julian


def configure_logging(args: Dict[str, Any]) -> None:
    """
    Configure logging based on command line flags.

    Args:
        args: Dictionary with "quiet", "debug" and "verbose" entries
    """
    quiet = args.get("quiet", False)
    debug = args.get("debug", False)
    verbosity = args.get("verbose", 0)

    if quiet:
        log_level = logging.ERROR
    elif debug:
        log_level = logging.DEBUG
    else:
        # 0 -> WARNING, 1 -> INFO, 2+ -> DEBUG
        if verbosity == 0:
            log_level = logging.WARNING
        elif verbosity == 1:
            log_level = logging.INFO
        else:
            log_level = logging.DEBUG

    set_log_level(log_level)
    logging.getLogger("vsop87").debug(
        f"Logging configured with level {logging.getLevelName(log_level)}"
    )


def parse_date_input(date_str: str) -> float:
    """Parse a date given on the command line into a Julian date.

    Args:
        date_str: One of
            - Julian date (e.g., "2451545.0")
            - ISO format with timezone (e.g., "2024-03-15T20:00:00+00:00")
            - ISO format without timezone, taken as UTC
            - "now"

    Raises:
        ValueError: If date string is invalid
    """
    if date_str.lower() == "now":
        return datetime_to_julian(datetime.now(timezone.utc))

    try:
        return float(date_str.strip("' "))
    except ValueError:
        try:
            dt = datetime.fromisoformat(date_str)
        except ValueError:
            raise ValueError(f"Invalid date format: {date_str}")
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        return datetime_to_julian(dt)
