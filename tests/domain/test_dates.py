from datetime import date

import pytest

from snowball_planner.domain.dates import (
    add_months,
    days_in_month,
    days_in_year,
    is_leap_year,
)
from snowball_planner.domain.errors import ValidationError


@pytest.mark.parametrize(
    "year, expected",
    [(2024, True), (2025, False), (1900, False), (2000, True)],
)
def test_is_leap_year(year: int, expected: bool) -> None:
    assert is_leap_year(year) is expected


def test_days_in_year() -> None:
    assert days_in_year(2024) == 366
    assert days_in_year(2026) == 365


def test_days_in_february() -> None:
    assert days_in_month(2024, 2) == 29
    assert days_in_month(2023, 2) == 28


def test_days_in_month_rejects_invalid_month() -> None:
    with pytest.raises(ValidationError, match="Invalid month: 13"):
        days_in_month(2024, 13)


def test_add_months_wraps_year() -> None:
    assert add_months(date(2026, 11, 15), 3) == date(2027, 2, 15)


def test_add_months_clamps_day() -> None:
    assert add_months(date(2024, 1, 31), 1) == date(2024, 2, 29)
    assert add_months(date(2025, 1, 31), 1) == date(2025, 2, 28)


def test_add_negative_months() -> None:
    assert add_months(date(2026, 1, 10), -2) == date(2025, 11, 10)
