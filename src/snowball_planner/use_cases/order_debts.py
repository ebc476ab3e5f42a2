"""Order debts by snowball priority."""

from __future__ import annotations

import logging
from datetime import date
from typing import Sequence

from snowball_planner.domain.debt import Debt

logger = logging.getLogger(__name__)


def _ccj_sort_key(debt: Debt) -> tuple[bool, date]:
    # A CCJ debt without a deadline sorts after every dated one
    return (debt.ccj_deadline is None, debt.ccj_deadline or date.max)


def order_debts(debts: Sequence[Debt]) -> list[Debt]:
    """
    Return a new list of debts in snowball order.

    1. CCJ debts, earliest deadline first (missing deadline last)
    2. Non-CCJ debts, smallest balance first

    CCJ debts always come first regardless of balance. Both sorts are stable,
    so ties keep their input order. The input sequence is never mutated.
    """
    ccj_debts = sorted((d for d in debts if d.is_ccj), key=_ccj_sort_key)
    other_debts = sorted((d for d in debts if not d.is_ccj), key=lambda d: d.balance)

    return [*ccj_debts, *other_debts]


class OrderDebts:
    """
    Use case for producing the snowball priority sequence.

    Responsibilities:
    - Validate every debt before ordering
    - Delegate to order_debts() for the ordering rule
    """

    def execute(self, debts: Sequence[Debt]) -> list[Debt]:
        """
        Raises:
            InvalidDebt: If any debt violates its invariants
        """
        for debt in debts:
            debt.validate()

        ordered = order_debts(debts)

        logger.debug(
            "Debts ordered",
            extra={
                "debt_count": len(ordered),
                "ccj_count": sum(1 for d in ordered if d.is_ccj),
            },
        )
        return ordered
