from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

from snowball_planner.domain.frequency import Frequency, to_monthly_equivalent
from snowball_planner.domain.money import Money, sum_money


@dataclass(frozen=True, slots=True)
class RecurringAmount:
    """An income or expense record, as supplied by the caller."""

    amount: Money
    frequency: Frequency
    # Expenses covered directly by Universal Credit do not reduce disposable income
    is_uc_paid: bool = False

    @property
    def monthly_equivalent(self) -> Money:
        return to_monthly_equivalent(self.amount, self.frequency)


@dataclass(frozen=True, slots=True)
class UniversalCreditConfig:
    """Universal Credit taper parameters, e.g. taper_rate=Decimal("0.55")."""

    taper_rate: Decimal
    work_allowance: Money


@dataclass(frozen=True, slots=True)
class DisposableIncome:
    gross_income: Money
    total_expenses: Money
    uc_taper: Money
    disposable_income: Money


def monthly_total(items: Iterable[RecurringAmount]) -> Money:
    """Sum of monthly equivalents; one-time items add nothing."""
    return sum_money(item.monthly_equivalent for item in items)


def calculate_taper(gross_income: Money, config: UniversalCreditConfig) -> Money:
    """
    Universal Credit reduction: max(0, (income - work allowance) x taper rate).
    """
    excess = gross_income - config.work_allowance
    if excess.amount <= 0:
        return Money.zero()
    return excess * config.taper_rate
