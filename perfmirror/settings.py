"""Environment configuration.

Reads PERFMIRROR_* variables; every value has a default.
"""

import logging
import os

logger = logging.getLogger(__name__)

DEFAULT_STORE_PATH = "perfmirror_store.json"
DEFAULT_TREND_WEEKS = 12


def get_store_path() -> str:
    """Path of the JSON store from PERFMIRROR_STORE_PATH."""
    path = os.getenv("PERFMIRROR_STORE_PATH", "") or DEFAULT_STORE_PATH
    logger.info("Store path: %s", path)
    return path


def get_trend_weeks() -> int:
    """Length of the weekly trend series from PERFMIRROR_TREND_WEEKS.

    Raises:
        ValueError: If the variable is set but is not a positive integer.
    """
    raw = os.getenv("PERFMIRROR_TREND_WEEKS", "")
    if not raw:
        return DEFAULT_TREND_WEEKS
    try:
        weeks = int(raw)
    except ValueError as e:
        raise ValueError(f"PERFMIRROR_TREND_WEEKS must be an integer, got {raw!r}") from e
    if weeks <= 0:
        raise ValueError(f"PERFMIRROR_TREND_WEEKS must be positive, got {weeks}")
    logger.info("Trend window: %d weeks", weeks)
    return weeks
