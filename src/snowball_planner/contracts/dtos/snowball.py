from datetime import date
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class DebtDTO(BaseModel):
    """A debt record as supplied by the calling application."""

    id: str = Field(description="Debt identifier", examples=["debt_1"])
    name: str = Field(description="Display name", examples=["Credit card"])
    balance: str = Field(
        description="Current balance as decimal string",
        examples=["1250.00"],
        pattern=r"^\d+(\.\d+)?$",
    )
    interest_rate_percent: str = Field(
        description="Annual interest rate as a percentage string (e.g., '18.99' = 18.99%)",
        examples=["18.99"],
        pattern=r"^\d+(\.\d+)?$",
    )
    minimum_payment: str = Field(
        description="Minimum monthly payment as decimal string",
        examples=["45.00"],
        pattern=r"^\d+(\.\d+)?$",
    )
    is_ccj: bool = Field(default=False, description="County Court Judgment debt")
    ccj_deadline: date | None = Field(
        default=None, description="Court-ordered repayment deadline for CCJ debts"
    )
    status: Literal["active", "paid"] = Field(default="active")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "debt_1",
                "name": "Credit card",
                "balance": "1250.00",
                "interest_rate_percent": "18.99",
                "minimum_payment": "45.00",
                "is_ccj": False,
                "ccj_deadline": None,
                "status": "active",
            }
        }
    )


class DebtPaymentDTO(BaseModel):
    debt_id: str
    name: str
    balance: str = Field(examples=["1250.00"])
    minimum_payment: str = Field(examples=["45.00"])
    monthly_payment: str = Field(examples=["345.00"])
    snowball_position: int = Field(ge=1, examples=[1])


class DebtPaymentScheduleDTO(BaseModel):
    """This month's payment per debt in snowball order."""

    per_debt_payments: list[DebtPaymentDTO]
    total_monthly_payment: str = Field(examples=["400.00"])
    total_monthly_payment_display: str = Field(examples=["£400.00"])


class ProjectedDebtRowDTO(BaseModel):
    debt_id: str
    name: str
    starting_balance: str
    interest_charged: str
    payment_applied: str
    ending_balance: str
    is_paid_off: bool


class MonthlyProjectionDTO(BaseModel):
    month: int = Field(ge=1, le=12)
    year: int
    debts: list[ProjectedDebtRowDTO]


class DebtFreeProjectionDTO(BaseModel):
    """Projected debt-free date; both date and months are null when no projection is possible."""

    debt_free_date: date | None = Field(examples=["2028-03-01"])
    months_to_debt_free: int | None = Field(examples=[17])
    total_interest: str = Field(examples=["312.48"])
    total_interest_display: str = Field(examples=["£312.48"])
    schedule: list[MonthlyProjectionDTO]
