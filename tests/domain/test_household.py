from __future__ import annotations

from decimal import Decimal

from snowball_planner.domain.frequency import Frequency
from snowball_planner.domain.household import (
    RecurringAmount,
    UniversalCreditConfig,
    calculate_taper,
    monthly_total,
)
from snowball_planner.domain.money import Money

UC_CONFIG = UniversalCreditConfig(taper_rate=Decimal("0.55"), work_allowance=Money("400"))


def test_recurring_amount_monthly_equivalent() -> None:
    item = RecurringAmount(amount=Money("120"), frequency=Frequency.WEEKLY)

    assert item.monthly_equivalent == Money("520")


def test_monthly_total_mixes_frequencies_and_skips_one_time() -> None:
    items = [
        RecurringAmount(amount=Money("1500"), frequency=Frequency.MONTHLY),
        RecurringAmount(amount=Money("120"), frequency=Frequency.WEEKLY),
        RecurringAmount(amount=Money("2400"), frequency=Frequency.ANNUAL),
        RecurringAmount(amount=Money("999"), frequency=Frequency.ONE_TIME),
    ]

    assert monthly_total(items) == Money("2220")


def test_monthly_total_of_nothing_is_zero() -> None:
    assert monthly_total([]) == Money.zero()


def test_taper_applies_above_work_allowance() -> None:
    """(1400 - 400) x 0.55 = 550"""
    assert calculate_taper(Money("1400"), UC_CONFIG) == Money("550")


def test_no_taper_at_or_below_work_allowance() -> None:
    assert calculate_taper(Money("400"), UC_CONFIG) == Money.zero()
    assert calculate_taper(Money("250"), UC_CONFIG) == Money.zero()
