from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Callable, Sequence

from snowball_planner.domain.debt import Debt
from snowball_planner.domain.interest import monthly_interest
from snowball_planner.domain.money import Money, sum_money
from snowball_planner.domain.snowball import (
    DebtFreeProjection,
    MonthlyProjection,
    ProjectedDebtRow,
)
from snowball_planner.infra.config import max_projection_months
from snowball_planner.use_cases.order_debts import order_debts

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _WorkingDebt:
    """Simulation-private copy of a debt; the caller's Debt is never touched."""

    debt_id: str
    name: str
    balance: Money
    interest_rate: Decimal
    minimum_payment: Money
    is_paid_off: bool = False

    @classmethod
    def from_debt(cls, debt: Debt) -> _WorkingDebt:
        return cls(
            debt_id=debt.id,
            name=debt.name,
            balance=debt.balance,
            interest_rate=debt.interest_rate,
            minimum_payment=debt.minimum_payment,
        )


@dataclass(frozen=True, slots=True)
class ProjectDebtFreeDate:
    """
    Simulate the snowball month by month until every debt is cleared.

    Each simulated month:
    1. Accrue: every active debt's balance grows by its monthly interest
    2. Allocate: the first active debt in snowball order is focused and gets
       monthly_payment minus the minimums of all active debts on top of its
       own minimum; the others get their minimum
    3. Apply: payments are capped at the debt's balance
    4. Settle: a balance that reaches zero marks the debt paid, freeing its
       payment for the focused debt from the next month on

    The loop stops when all debts are paid (success) or after max_months
    (no projection). A monthly payment below the total of minimum payments
    short-circuits to no projection without simulating.
    """

    max_months: int = field(default_factory=max_projection_months)
    clock: Callable[[], date] = date.today

    def execute(
        self,
        debts: Sequence[Debt],
        monthly_payment: Money,
        start: date | None = None,
    ) -> DebtFreeProjection:
        """
        Args:
            debts: Debts in any order; paid debts are ignored
            monthly_payment: Total amount paid towards debts each month
            start: First simulated month (defaults to today)

        Returns:
            DebtFreeProjection with the month-by-month schedule

        Raises:
            InvalidDebt: If any active debt violates its invariants
        """
        start = start or self.clock()
        active = [d for d in debts if d.is_active]

        if not active:
            return DebtFreeProjection(debt_free_date=start, months_to_debt_free=0, schedule=[])

        for debt in active:
            debt.validate()

        total_minimums = sum_money(d.minimum_payment for d in active)
        if monthly_payment < total_minimums:
            logger.warning(
                "Monthly payment below total minimum payments, no projection possible",
                extra={
                    "monthly_payment": monthly_payment.to_fixed(),
                    "total_minimums": total_minimums.to_fixed(),
                },
            )
            return DebtFreeProjection(debt_free_date=None, months_to_debt_free=None, schedule=[])

        working = [_WorkingDebt.from_debt(d) for d in order_debts(active)]
        schedule: list[MonthlyProjection] = []
        month, year = start.month, start.year
        month_count = 0

        while not all(w.is_paid_off for w in working) and month_count < self.max_months:
            month_count += 1
            schedule.append(_simulate_month(working, monthly_payment, month, year))
            month, year = (1, year + 1) if month == 12 else (month + 1, year)

        if all(w.is_paid_off for w in working):
            debt_free_date = date(year, month, 1)
            logger.info(
                "Debt-free date projected",
                extra={
                    "debt_count": len(working),
                    "months_to_debt_free": month_count,
                    "debt_free_date": debt_free_date.isoformat(),
                },
            )
            return DebtFreeProjection(
                debt_free_date=debt_free_date,
                months_to_debt_free=month_count,
                schedule=schedule,
            )

        logger.warning(
            "Debts not cleared within the projection horizon",
            extra={
                "max_months": self.max_months,
                "remaining_balance": sum_money(w.balance for w in working).to_fixed(),
            },
        )
        return DebtFreeProjection(debt_free_date=None, months_to_debt_free=None, schedule=schedule)


def _simulate_month(
    working: list[_WorkingDebt],
    monthly_payment: Money,
    month: int,
    year: int,
) -> MonthlyProjection:
    already_paid = [w.is_paid_off for w in working]
    starting = [w.balance for w in working]

    # Accrue
    charged: list[Money] = []
    for w in working:
        interest = Money.zero() if w.is_paid_off else monthly_interest(w.balance, w.interest_rate)
        w.balance = w.balance + interest
        charged.append(interest)

    # Allocate
    active = [w for w in working if not w.is_paid_off]
    focused = active[0]
    extra_for_focused = monthly_payment - sum_money(w.minimum_payment for w in active)

    rows: list[ProjectedDebtRow] = []
    for w, was_paid, starting_balance, interest in zip(working, already_paid, starting, charged):
        if was_paid:
            rows.append(
                ProjectedDebtRow(
                    debt_id=w.debt_id,
                    name=w.name,
                    starting_balance=Money.zero(),
                    interest_charged=Money.zero(),
                    payment_applied=Money.zero(),
                    ending_balance=Money.zero(),
                    is_paid_off=True,
                )
            )
            continue

        # Apply
        payment = w.minimum_payment + extra_for_focused if w is focused else w.minimum_payment
        payment = min(payment, w.balance)

        # Settle
        w.balance = w.balance - payment
        if w.balance.amount <= 0:
            w.balance = Money.zero()
            w.is_paid_off = True

        rows.append(
            ProjectedDebtRow(
                debt_id=w.debt_id,
                name=w.name,
                starting_balance=starting_balance,
                interest_charged=interest,
                payment_applied=payment,
                ending_balance=w.balance,
                is_paid_off=w.is_paid_off,
            )
        )

    return MonthlyProjection(month=month, year=year, debts=rows)
