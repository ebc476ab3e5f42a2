from __future__ import annotations

import logging
from typing import Sequence

from snowball_planner.domain.debt import Debt
from snowball_planner.domain.money import Money, sum_money
from snowball_planner.domain.snowball import DebtPayment, DebtPaymentSchedule

logger = logging.getLogger(__name__)


def calculate_rollover(current_payment: Money, next_minimum: Money) -> Money:
    """Payment on the next debt once the focused debt is cleared: its minimum plus the freed payment."""
    return next_minimum + current_payment


def calculate_monthly_payments(
    ordered_debts: Sequence[Debt], disposable_income: Money
) -> DebtPaymentSchedule:
    """
    Allocate one month's payments across debts already in snowball order.

    Paid debts are skipped: they take no payment and their minimums do not
    count. The first active debt receives its minimum plus every penny of
    disposable income left after all minimums; every other active debt
    receives exactly its minimum.
    When income does not cover the minimums the extra is clamped to zero and
    each debt still gets its minimum.
    """
    active = [d for d in ordered_debts if d.is_active]
    if not active:
        return DebtPaymentSchedule(per_debt_payments=[], total_monthly_payment=Money.zero())

    total_minimums = sum_money(d.minimum_payment for d in active)
    extra = max(disposable_income - total_minimums, Money.zero())

    payments = [
        DebtPayment(
            debt_id=debt.id,
            name=debt.name,
            balance=debt.balance,
            minimum_payment=debt.minimum_payment,
            monthly_payment=debt.minimum_payment + extra if position == 1 else debt.minimum_payment,
            snowball_position=position,
        )
        for position, debt in enumerate(active, start=1)
    ]

    return DebtPaymentSchedule(
        per_debt_payments=payments,
        total_monthly_payment=sum_money(p.monthly_payment for p in payments),
    )


class CalculateMonthlyPayments:
    """
    Use case for this month's snowball payment schedule.

    Responsibilities:
    - Skip debts that are already paid
    - Allocate disposable income across the remaining debts in the given order
    - Report (but tolerate) income that does not cover the minimum payments
    """

    def execute(self, ordered_debts: Sequence[Debt], disposable_income: Money) -> DebtPaymentSchedule:
        minimums = [d.minimum_payment for d in ordered_debts if d.is_active]
        total_minimums = sum_money(minimums)

        if minimums and disposable_income < total_minimums:
            logger.warning(
                "Disposable income does not cover minimum payments",
                extra={
                    "disposable_income": disposable_income.to_fixed(),
                    "total_minimums": total_minimums.to_fixed(),
                },
            )

        schedule = calculate_monthly_payments(ordered_debts, disposable_income)

        logger.debug(
            "Monthly payments calculated",
            extra={
                "debt_count": len(schedule.per_debt_payments),
                "total_monthly_payment": schedule.total_monthly_payment.to_fixed(),
            },
        )
        return schedule
