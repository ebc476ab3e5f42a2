"""Record a payment against a single debt."""

from __future__ import annotations

import logging
from dataclasses import replace

from snowball_planner.domain.debt import Debt, DebtStatus
from snowball_planner.domain.errors import DebtAlreadyPaid, InvalidAmount, PaymentExceedsBalance
from snowball_planner.domain.money import Money

logger = logging.getLogger(__name__)


class RecordDebtPayment:
    """
    Use case for applying a real payment to a debt.

    Responsibilities:
    - Reject non-positive payments, payments on paid debts and overpayments
    - Return a new Debt with the reduced balance; the input is left untouched
    - Transition the debt to paid when its balance reaches zero
    """

    def execute(self, debt: Debt, amount: Money) -> Debt:
        """
        Raises:
            InvalidAmount: If amount is zero or negative
            DebtAlreadyPaid: If the debt's status is already paid
            PaymentExceedsBalance: If amount is larger than the current balance
        """
        if not amount.is_positive:
            raise InvalidAmount("payment amount must be > 0", amount=amount.to_fixed())

        if debt.is_paid:
            raise DebtAlreadyPaid(debt_id=debt.id)

        if amount > debt.balance:
            raise PaymentExceedsBalance(
                "Payment amount cannot exceed current balance",
                debt_id=debt.id,
                amount=amount.to_fixed(),
                balance=debt.balance.to_fixed(),
            )

        new_balance = debt.balance - amount

        if new_balance.is_zero:
            logger.info("Debt paid off", extra={"debt_id": debt.id, "debt_name": debt.name})
            return replace(debt, balance=Money.zero(), status=DebtStatus.PAID)

        return replace(debt, balance=new_balance)
