"""ISO week helpers.

Weeks start on Monday and are identified as ``YYYY-W##`` using the ISO
year, so the first days of January can belong to week 52/53 of the
previous year and the last days of December to week 01 of the next one.
"""

from __future__ import annotations

from datetime import date, timedelta
import re

from perfmirror.models import InvalidWeekError


_WEEK_RE = re.compile(r"^(\d{4})-W(\d{2})$")


def week_identifier(day: date) -> str:
    """Return the ``YYYY-W##`` identifier of the ISO week containing *day*."""
    iso_year, iso_week, _ = day.isocalendar()
    return f"{iso_year}-W{iso_week:02d}"


def parse_week(week_id: str) -> tuple[int, int]:
    """Split a week identifier into ``(year, week)``.

    Raises:
        InvalidWeekError: If *week_id* is malformed or names a week the ISO
            year does not have.
    """
    match = _WEEK_RE.match(week_id)
    if match is None:
        raise InvalidWeekError(f"Invalid week identifier: {week_id!r}")
    year, week = int(match.group(1)), int(match.group(2))
    if not 1 <= week <= _weeks_in_year(year):
        raise InvalidWeekError(f"Week {week} does not exist in {year}")
    return year, week


def week_start_date(week_id: str) -> date:
    """Monday that begins *week_id*."""
    year, week = parse_week(week_id)
    return date.fromisocalendar(year, week, 1)


def current_week(today: date | None = None) -> str:
    return week_identifier(today or date.today())


def recent_weeks(n: int, today: date | None = None) -> list[str]:
    """*n* consecutive week identifiers, oldest first, ending at *today*'s week."""
    anchor = today or date.today()
    return [week_identifier(anchor - timedelta(weeks=i)) for i in reversed(range(max(n, 0)))]


def format_week(week_id: str) -> str:
    """Chart label for a week, e.g. ``Jan 29, 2024``."""
    start = week_start_date(week_id)
    return f"{start:%b} {start.day}, {start.year}"


def _weeks_in_year(year: int) -> int:
    # Dec 28 always falls in the last ISO week of its year.
    return date(year, 12, 28).isocalendar()[1]
