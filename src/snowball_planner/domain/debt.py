from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum

from snowball_planner.domain.errors import InvalidDebt
from snowball_planner.domain.money import Money


class DebtStatus(str, Enum):
    ACTIVE = "active"
    PAID = "paid"


@dataclass(frozen=True, slots=True)
class Debt:
    """
    A single tracked debt.

    `interest_rate` is an annual percentage (Decimal("18.99") means 18.99% APR).
    The snowball position is not stored here; it is derived every time the
    debts are ordered.
    """

    id: str
    name: str
    balance: Money
    interest_rate: Decimal
    minimum_payment: Money
    is_ccj: bool = False
    ccj_deadline: date | None = None
    status: DebtStatus = DebtStatus.ACTIVE

    @property
    def is_active(self) -> bool:
        return self.status is DebtStatus.ACTIVE

    @property
    def is_paid(self) -> bool:
        return self.status is DebtStatus.PAID

    def validate(self, require_ccj_deadline: bool = False) -> None:
        """
        Validate debt invariants.

        Args:
            require_ccj_deadline: Reject CCJ debts that carry no deadline

        Raises:
            InvalidDebt: If any invariant is violated, listing every failing field
        """
        errors: list[dict[str, str]] = []

        if self.balance.is_negative:
            errors.append({"field": "balance", "message": "balance must be >= 0"})
        if self.interest_rate < 0:
            errors.append({"field": "interest_rate", "message": "interest_rate must be >= 0"})
        if self.minimum_payment.is_negative:
            errors.append(
                {"field": "minimum_payment", "message": "minimum_payment must be >= 0"}
            )
        if require_ccj_deadline and self.is_ccj and self.ccj_deadline is None:
            errors.append(
                {"field": "ccj_deadline", "message": "ccj_deadline is required for CCJ debts"}
            )
        if self.is_paid and not self.balance.is_zero:
            errors.append({"field": "status", "message": "a paid debt must have a zero balance"})

        if errors:
            raise InvalidDebt(errors=errors, debt_id=self.id)
