from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Callable

import pytest

from snowball_planner.domain.debt import Debt, DebtStatus
from snowball_planner.domain.money import Money

DebtFactory = Callable[..., Debt]


@pytest.fixture()
def make_debt() -> DebtFactory:
    """Factory for Debt entities with string shorthand for money fields."""

    def _make(
        id: str,
        balance: str,
        *,
        rate: str = "0",
        minimum: str = "0",
        name: str | None = None,
        is_ccj: bool = False,
        ccj_deadline: date | None = None,
        status: DebtStatus = DebtStatus.ACTIVE,
    ) -> Debt:
        return Debt(
            id=id,
            name=name or f"Debt {id}",
            balance=Money(balance),
            interest_rate=Decimal(rate),
            minimum_payment=Money(minimum),
            is_ccj=is_ccj,
            ccj_deadline=ccj_deadline,
            status=status,
        )

    return _make
