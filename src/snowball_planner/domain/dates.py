from __future__ import annotations

import calendar
from datetime import date

from snowball_planner.domain.errors import ValidationError


def is_leap_year(year: int) -> bool:
    return calendar.isleap(year)


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def days_in_month(year: int, month: int) -> int:
    if not 1 <= month <= 12:
        raise ValidationError(
            f"Invalid month: {month}. Month must be between 1 and 12.", month=month
        )
    return calendar.monthrange(year, month)[1]


def add_months(start: date, months: int) -> date:
    """
    Shift a date by whole months, clamping the day to the target month.

    Jan 31 + 1 month is Feb 28 (or Feb 29 in a leap year), never Mar 3.
    """
    year = start.year + (start.month - 1 + months) // 12
    month = (start.month - 1 + months) % 12 + 1
    day = min(start.day, days_in_month(year, month))
    return date(year, month, day)
