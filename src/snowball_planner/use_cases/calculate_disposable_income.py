from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from snowball_planner.domain.household import (
    DisposableIncome,
    RecurringAmount,
    UniversalCreditConfig,
    calculate_taper,
    monthly_total,
)
from snowball_planner.domain.money import Money

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CalculateDisposableIncome:
    """
    Monthly income left for debt repayment.

    disposable = monthly income - monthly expenses - UC taper

    Every figure is normalized to a monthly equivalent first. Expenses paid
    directly by Universal Credit are left out, and without a UC configuration
    the taper is zero. The result is not clamped and can be negative.
    """

    uc_config: UniversalCreditConfig | None = None

    def execute(
        self,
        incomes: Sequence[RecurringAmount],
        expenses: Sequence[RecurringAmount],
    ) -> DisposableIncome:
        gross_income = monthly_total(incomes)
        total_expenses = monthly_total(e for e in expenses if not e.is_uc_paid)
        uc_taper = (
            calculate_taper(gross_income, self.uc_config) if self.uc_config else Money.zero()
        )
        disposable = gross_income - total_expenses - uc_taper

        logger.debug(
            "Disposable income calculated",
            extra={
                "gross_income": gross_income.to_fixed(),
                "total_expenses": total_expenses.to_fixed(),
                "uc_taper": uc_taper.to_fixed(),
                "disposable_income": disposable.to_fixed(),
            },
        )

        return DisposableIncome(
            gross_income=gross_income,
            total_expenses=total_expenses,
            uc_taper=uc_taper,
            disposable_income=disposable,
        )
