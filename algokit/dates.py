"""Calendar arithmetic on plain day, month, year triples."""

from __future__ import annotations

import calendar

__all__ = ["next_date"]

_THIRTY_DAY_MONTHS = {4, 6, 9, 11}


def _days_in_month(month: int, year: int) -> int:
    if month == 2:
        return 29 if calendar.isleap(year) else 28
    return 30 if month in _THIRTY_DAY_MONTHS else 31


def next_date(day: int, month: int, year: int) -> tuple[int, int, int]:
    """Return the (day, month, year) that follows the given Gregorian date."""
    if not 1 <= month <= 12:
        raise ValueError(f"month must be between 1 and 12, got {month}")
    last = _days_in_month(month, year)
    if not 1 <= day <= last:
        raise ValueError(f"day must be between 1 and {last}, got {day}")
    if day < last:
        return day + 1, month, year
    if month < 12:
        return 1, month + 1, year
    return 1, 1, year + 1