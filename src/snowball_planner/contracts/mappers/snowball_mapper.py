from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Sequence

from snowball_planner.domain.debt import Debt, DebtStatus
from snowball_planner.domain.errors import InvalidAmount, ValidationError
from snowball_planner.domain.money import Money
from snowball_planner.domain.snowball import DebtFreeProjection, DebtPaymentSchedule
from snowball_planner.contracts.dtos.snowball import (
    DebtDTO,
    DebtFreeProjectionDTO,
    DebtPaymentDTO,
    DebtPaymentScheduleDTO,
    MonthlyProjectionDTO,
    ProjectedDebtRowDTO,
)
from snowball_planner.infra.config import currency_symbol


def _parse_money(value: str, field: str, errors: list[dict[str, str]]) -> Money:
    try:
        return Money(value)
    except InvalidAmount:
        errors.append(
            {
                "field": field,
                "message": f"Must be a valid decimal: {value}",
                "code": "INVALID_DECIMAL",
            }
        )
        return Money.zero()  # Placeholder to continue validation


class SnowballMapper:
    """Maps between snowball data contracts and domain models."""

    @staticmethod
    def to_domain_debts(dtos: Sequence[DebtDTO]) -> list[Debt]:
        """
        Converts debt DTOs to domain Debts.

        Handles string → Money / Decimal conversion at the boundary. Every
        invalid field across every debt is reported in one error.

        Raises:
            ValidationError: If any string value cannot be converted to a valid Decimal
        """
        errors: list[dict[str, str]] = []
        debts: list[Debt] = []

        for index, dto in enumerate(dtos):
            prefix = f"debts[{index}]"

            balance = _parse_money(dto.balance, f"{prefix}.balance", errors)
            minimum_payment = _parse_money(
                dto.minimum_payment, f"{prefix}.minimum_payment", errors
            )

            try:
                interest_rate = Decimal(dto.interest_rate_percent)
                if not interest_rate.is_finite():
                    raise InvalidOperation
            except (InvalidOperation, ValueError):
                errors.append(
                    {
                        "field": f"{prefix}.interest_rate_percent",
                        "message": f"Must be a valid decimal: {dto.interest_rate_percent}",
                        "code": "INVALID_DECIMAL",
                    }
                )
                interest_rate = Decimal("0")

            debts.append(
                Debt(
                    id=dto.id,
                    name=dto.name,
                    balance=balance,
                    interest_rate=interest_rate,
                    minimum_payment=minimum_payment,
                    is_ccj=dto.is_ccj,
                    ccj_deadline=dto.ccj_deadline,
                    status=DebtStatus(dto.status),
                )
            )

        if errors:
            raise ValidationError(errors=errors)

        return debts

    @staticmethod
    def to_schedule_response(schedule: DebtPaymentSchedule) -> DebtPaymentScheduleDTO:
        """Converts a payment schedule to its response DTO (Money → 2dp string)."""
        return DebtPaymentScheduleDTO(
            per_debt_payments=[
                DebtPaymentDTO(
                    debt_id=p.debt_id,
                    name=p.name,
                    balance=p.balance.to_fixed(),
                    minimum_payment=p.minimum_payment.to_fixed(),
                    monthly_payment=p.monthly_payment.to_fixed(),
                    snowball_position=p.snowball_position,
                )
                for p in schedule.per_debt_payments
            ],
            total_monthly_payment=schedule.total_monthly_payment.to_fixed(),
            total_monthly_payment_display=schedule.total_monthly_payment.format(currency_symbol()),
        )

    @staticmethod
    def to_projection_response(projection: DebtFreeProjection) -> DebtFreeProjectionDTO:
        """Converts a debt-free projection to its response DTO."""
        total_interest = projection.total_interest
        return DebtFreeProjectionDTO(
            debt_free_date=projection.debt_free_date,
            months_to_debt_free=projection.months_to_debt_free,
            total_interest=total_interest.to_fixed(),
            total_interest_display=total_interest.format(currency_symbol()),
            schedule=[
                MonthlyProjectionDTO(
                    month=month.month,
                    year=month.year,
                    debts=[
                        ProjectedDebtRowDTO(
                            debt_id=row.debt_id,
                            name=row.name,
                            starting_balance=row.starting_balance.to_fixed(),
                            interest_charged=row.interest_charged.to_fixed(),
                            payment_applied=row.payment_applied.to_fixed(),
                            ending_balance=row.ending_balance.to_fixed(),
                            is_paid_off=row.is_paid_off,
                        )
                        for row in month.debts
                    ],
                )
                for month in projection.schedule
            ],
        )
