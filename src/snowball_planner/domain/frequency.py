"""Recurrence frequencies and monthly-equivalent conversion.

Conversion factors (to a monthly figure):
- weekly: x 52 / 12
- fortnightly: x 26 / 12
- monthly: x 1
- annual: / 12
- one-time: 0, a one-off amount never contributes to a recurring monthly total

No rounding is applied; results keep the full precision of the input.
"""

from __future__ import annotations

from enum import Enum
from fractions import Fraction

from snowball_planner.domain.errors import InvalidFrequency
from snowball_planner.domain.money import Money


class Frequency(str, Enum):
    ONE_TIME = "one-time"
    WEEKLY = "weekly"
    FORTNIGHTLY = "fortnightly"
    MONTHLY = "monthly"
    ANNUAL = "annual"

    @classmethod
    def parse(cls, value: str | Frequency) -> Frequency:
        """
        Parse a frequency from its wire value.

        Raises:
            InvalidFrequency: If the value is not a supported frequency
        """
        if isinstance(value, Frequency):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidFrequency(
                f"frequency must be one of {[f.value for f in cls]}", value=value
            ) from None

    @property
    def is_recurring(self) -> bool:
        return self is not Frequency.ONE_TIME

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS: dict[Frequency, str] = {
    Frequency.ONE_TIME: "One-time",
    Frequency.WEEKLY: "Weekly",
    Frequency.FORTNIGHTLY: "Fortnightly",
    Frequency.MONTHLY: "Monthly",
    Frequency.ANNUAL: "Annual",
}

# Occurrences per year for each recurring frequency
PERIODS_PER_YEAR: dict[Frequency, int] = {
    Frequency.WEEKLY: 52,
    Frequency.FORTNIGHTLY: 26,
    Frequency.MONTHLY: 12,
    Frequency.ANNUAL: 1,
}

MONTHS_PER_YEAR = 12


def to_monthly_equivalent(amount: Money, frequency: Frequency) -> Money:
    """Convert an amount paid at `frequency` to its monthly equivalent."""
    if not frequency.is_recurring:
        return Money.zero()
    if frequency is Frequency.MONTHLY:
        return amount
    return amount * Fraction(PERIODS_PER_YEAR[frequency], MONTHS_PER_YEAR)


def from_monthly_equivalent(monthly: Money, frequency: Frequency) -> Money:
    """
    Convert a monthly amount back to an amount paid at `frequency`.

    A one-time frequency has no inverse, so the monthly amount is returned as is.
    """
    if not frequency.is_recurring or frequency is Frequency.MONTHLY:
        return monthly
    return monthly * Fraction(MONTHS_PER_YEAR, PERIODS_PER_YEAR[frequency])


def to_annual_total(amount: Money, frequency: Frequency) -> Money:
    """Total paid over a year; a one-time amount contributes nothing."""
    if not frequency.is_recurring:
        return Money.zero()
    return amount * PERIODS_PER_YEAR[frequency]
