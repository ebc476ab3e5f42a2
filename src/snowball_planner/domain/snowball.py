from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from snowball_planner.domain.money import Money, sum_money


@dataclass(frozen=True, slots=True)
class DebtPayment:
    """One debt's share of this month's payments."""

    debt_id: str
    name: str
    balance: Money
    minimum_payment: Money
    monthly_payment: Money
    snowball_position: int


@dataclass(frozen=True, slots=True)
class DebtPaymentSchedule:
    per_debt_payments: list[DebtPayment]
    total_monthly_payment: Money

    @property
    def focused(self) -> DebtPayment | None:
        """The debt receiving the extra funds, if there is one."""
        return self.per_debt_payments[0] if self.per_debt_payments else None


@dataclass(frozen=True, slots=True)
class ProjectedDebtRow:
    """
    One debt during one simulated month.

    starting_balance + interest_charged - payment_applied == ending_balance
    """

    debt_id: str
    name: str
    starting_balance: Money
    interest_charged: Money
    payment_applied: Money
    ending_balance: Money
    is_paid_off: bool


@dataclass(frozen=True, slots=True)
class MonthlyProjection:
    month: int
    year: int
    debts: list[ProjectedDebtRow] = field(default_factory=list)

    @property
    def interest_charged(self) -> Money:
        return sum_money(row.interest_charged for row in self.debts)

    @property
    def payment_applied(self) -> Money:
        return sum_money(row.payment_applied for row in self.debts)


@dataclass(frozen=True, slots=True)
class DebtFreeProjection:
    """
    Outcome of a snowball simulation.

    debt_free_date and months_to_debt_free are both None when no projection
    is possible: the payment does not cover the minimums, or the debts are
    still outstanding at the safety horizon.
    """

    debt_free_date: date | None
    months_to_debt_free: int | None
    schedule: list[MonthlyProjection] = field(default_factory=list)

    @property
    def is_achievable(self) -> bool:
        return self.debt_free_date is not None

    @property
    def total_interest(self) -> Money:
        return sum_money(month.interest_charged for month in self.schedule)
