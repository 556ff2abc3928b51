"""Calendar helpers shared by the payoff engine."""

from __future__ import annotations

import calendar
from datetime import date, datetime


def as_date(value: date | datetime) -> date:
    """Drop any time-of-day so comparisons happen on calendar dates."""

    if isinstance(value, datetime):
        return value.date()
    return value


def add_months(value: date | datetime, months: int) -> date:
    """Return the same day ``months`` later, clamped to the end of shorter months."""

    start = as_date(value)
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    day = min(start.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def days_between(start: date | datetime, end: date | datetime) -> int:
    """Whole days from ``start`` to ``end`` (negative when ``end`` is earlier)."""

    return (as_date(end) - as_date(start)).days
