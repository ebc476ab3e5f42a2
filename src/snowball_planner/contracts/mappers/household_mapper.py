from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Sequence

from snowball_planner.domain.errors import InvalidAmount, ValidationError
from snowball_planner.domain.frequency import Frequency
from snowball_planner.domain.household import (
    DisposableIncome,
    RecurringAmount,
    UniversalCreditConfig,
)
from snowball_planner.domain.money import Money
from snowball_planner.contracts.dtos.household import (
    DisposableIncomeDTO,
    RecurringAmountDTO,
    UniversalCreditConfigDTO,
)
from snowball_planner.infra.config import currency_symbol


class HouseholdMapper:
    """Maps income / expense contracts to domain models and back."""

    @staticmethod
    def to_domain_amounts(dtos: Sequence[RecurringAmountDTO], field: str) -> list[RecurringAmount]:
        """
        Converts recurring amount DTOs to domain RecurringAmounts.

        Args:
            dtos: Income or expense DTOs
            field: Collection name used in error paths (e.g., "incomes")

        Raises:
            ValidationError: If any amount is not a valid decimal
        """
        errors: list[dict[str, str]] = []
        items: list[RecurringAmount] = []

        for index, dto in enumerate(dtos):
            try:
                amount = Money(dto.amount)
            except InvalidAmount:
                errors.append(
                    {
                        "field": f"{field}[{index}].amount",
                        "message": f"Must be a valid decimal: {dto.amount}",
                        "code": "INVALID_DECIMAL",
                    }
                )
                continue

            items.append(
                RecurringAmount(
                    amount=amount,
                    frequency=Frequency.parse(dto.frequency),
                    is_uc_paid=dto.is_uc_paid,
                )
            )

        if errors:
            raise ValidationError(errors=errors)

        return items

    @staticmethod
    def to_domain_uc_config(dto: UniversalCreditConfigDTO) -> UniversalCreditConfig:
        """
        Raises:
            ValidationError: If taper_rate or work_allowance is not a valid decimal
        """
        errors: list[dict[str, str]] = []

        try:
            taper_rate = Decimal(dto.taper_rate)
        except (InvalidOperation, ValueError):
            errors.append(
                {
                    "field": "taper_rate",
                    "message": f"Must be a valid decimal: {dto.taper_rate}",
                    "code": "INVALID_DECIMAL",
                }
            )
            taper_rate = Decimal("0")  # Placeholder to continue validation

        try:
            work_allowance = Money(dto.work_allowance)
        except InvalidAmount:
            errors.append(
                {
                    "field": "work_allowance",
                    "message": f"Must be a valid decimal: {dto.work_allowance}",
                    "code": "INVALID_DECIMAL",
                }
            )
            work_allowance = Money.zero()

        if errors:
            raise ValidationError(errors=errors)

        return UniversalCreditConfig(taper_rate=taper_rate, work_allowance=work_allowance)

    @staticmethod
    def to_response(result: DisposableIncome) -> DisposableIncomeDTO:
        return DisposableIncomeDTO(
            gross_income=result.gross_income.to_fixed(),
            total_expenses=result.total_expenses.to_fixed(),
            uc_taper=result.uc_taper.to_fixed(),
            disposable_income=result.disposable_income.to_fixed(),
            disposable_income_display=result.disposable_income.format(currency_symbol()),
        )
