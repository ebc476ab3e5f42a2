"""Interest calculations for debt projections.

Rounding policy:
- Interest postings are rounded to 2 decimal places with ROUND_HALF_UP
- Balances carried between months are never rounded; only the final figure
  returned by project_future_balance / total_interest is
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from snowball_planner.domain.dates import add_months, days_in_year
from snowball_planner.domain.errors import NegativeDuration
from snowball_planner.domain.money import Money


# 50 years of monthly ticks
DEFAULT_MAX_MONTHS = 600

_PERCENT = 100
_MONTHS_PER_YEAR = 12


def monthly_interest(balance: Money, annual_rate_percent: Decimal) -> Money:
    """
    Interest charged for one month: balance x (APR / 100 / 12), rounded half up.

    Never negative: a zero or negative balance, or a zero or negative rate,
    accrues nothing.

    Example:
        monthly_interest(Money("1000"), Decimal("18")) == Money("15.00")
    """
    if balance.amount <= 0 or annual_rate_percent <= 0:
        return Money.zero()

    interest = balance * annual_rate_percent / (_PERCENT * _MONTHS_PER_YEAR)
    return interest.round()


def daily_interest(balance: Money, annual_rate_percent: Decimal, on_date: date) -> Money:
    """
    Interest charged for one day, using 366 days in leap years and 365 otherwise.

    Example:
        daily_interest(Money("1000"), Decimal("18"), date(2024, 1, 15)) == Money("0.49")
    """
    if balance.amount <= 0 or annual_rate_percent <= 0:
        return Money.zero()

    interest = balance * annual_rate_percent / (_PERCENT * days_in_year(on_date.year))
    return interest.round()


def project_future_balance(
    balance: Money,
    annual_rate_percent: Decimal,
    monthly_payment: Money,
    months: int,
) -> Money:
    """
    Balance left after `months` of accrue-then-pay cycles.

    Raises:
        NegativeDuration: If months is negative
    """
    if months < 0:
        raise NegativeDuration("Number of months cannot be negative", months=months)

    if months == 0:
        return balance

    if balance.amount <= 0:
        return Money.zero()

    current = balance
    for _ in range(months):
        current = current + monthly_interest(current, annual_rate_percent)
        current = current - monthly_payment

        if current.amount <= 0:
            return Money.zero()

    return current.round()


def months_to_payoff(
    balance: Money,
    annual_rate_percent: Decimal,
    monthly_payment: Money,
    max_months: int = DEFAULT_MAX_MONTHS,
) -> int | None:
    """
    Number of monthly payments needed to clear a single debt.

    Returns None when the payment never gets ahead of the interest or the
    debt is still outstanding after `max_months`.
    """
    if balance.amount <= 0:
        return 0

    if monthly_payment <= monthly_interest(balance, annual_rate_percent):
        return None

    current = balance
    months = 0
    while current.amount > 0 and months < max_months:
        months += 1
        current = current + monthly_interest(current, annual_rate_percent)
        current = current - monthly_payment

    if current.amount <= 0:
        return months

    return None


def payoff_date(
    balance: Money,
    annual_rate_percent: Decimal,
    monthly_payment: Money,
    start: date,
) -> date | None:
    months = months_to_payoff(balance, annual_rate_percent, monthly_payment)
    if months is None:
        return None
    return add_months(start, months)


def total_interest(
    balance: Money,
    annual_rate_percent: Decimal,
    monthly_payment: Money,
    max_months: int = DEFAULT_MAX_MONTHS,
) -> Money | None:
    """
    Interest paid over the life of a single debt.

    The last payment is capped at the outstanding balance, so it may be
    smaller than `monthly_payment`. Returns None if the debt cannot be paid off.
    """
    if monthly_payment <= monthly_interest(balance, annual_rate_percent):
        return None

    current = balance
    paid = Money.zero()
    months = 0
    while current.amount > 0 and months < max_months:
        months += 1
        interest = monthly_interest(current, annual_rate_percent)
        paid = paid + interest
        current = current + interest
        current = current - min(monthly_payment, current)

    if current.amount > 0:
        return None

    return paid.round()
