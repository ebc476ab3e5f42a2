from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class RecurringAmountDTO(BaseModel):
    """Income or expense record with its cadence."""

    amount: str = Field(
        description="Amount as decimal string",
        examples=["450.00"],
        pattern=r"^\d+(\.\d+)?$",
    )
    frequency: Literal["one-time", "weekly", "fortnightly", "monthly", "annual"] = Field(
        examples=["weekly"]
    )
    is_uc_paid: bool = Field(
        default=False, description="Expense paid directly by Universal Credit"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"amount": "450.00", "frequency": "weekly", "is_uc_paid": False}
        }
    )


class UniversalCreditConfigDTO(BaseModel):
    taper_rate: str = Field(
        description="Taper rate as decimal fraction (e.g., '0.55' = 55%)",
        examples=["0.55"],
        pattern=r"^\d+(\.\d+)?$",
    )
    work_allowance: str = Field(examples=["404.00"], pattern=r"^\d+(\.\d+)?$")


class DisposableIncomeDTO(BaseModel):
    gross_income: str = Field(examples=["1950.00"])
    total_expenses: str = Field(examples=["1200.00"])
    uc_taper: str = Field(examples=["0.00"])
    disposable_income: str = Field(examples=["750.00"])
    disposable_income_display: str = Field(examples=["£750.00"])
