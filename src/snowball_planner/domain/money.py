from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from fractions import Fraction
from typing import Any, Iterable, Union

from snowball_planner.domain.errors import DivisionByZero, InvalidAmount


DEFAULT_CURRENCY_SYMBOL = "£"
MONEY_PLACES = 2

Factor = Union[Decimal, int, Fraction]


def _to_decimal(value: Any) -> Decimal:
    # bool is an int subclass; floats would leak binary rounding error
    if isinstance(value, (bool, float)):
        raise InvalidAmount(
            f"Money must be built from a Decimal, int or decimal string, got {type(value).__name__}",
            value=str(value),
        )

    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, int):
        amount = Decimal(value)
    elif isinstance(value, str):
        try:
            amount = Decimal(value.strip())
        except InvalidOperation:
            raise InvalidAmount(f"Not a valid decimal amount: {value!r}", value=value) from None
    else:
        raise InvalidAmount(
            f"Unsupported money input type: {type(value).__name__}", value=str(value)
        )

    if not amount.is_finite():
        raise InvalidAmount(f"Money amount must be finite: {value!r}", value=str(value))

    return amount


def _check_factor(factor: Any) -> None:
    if isinstance(factor, (bool, float)) or not isinstance(factor, (Decimal, int, Fraction)):
        raise InvalidAmount(
            f"Factor must be a Decimal, int or Fraction, got {type(factor).__name__}",
            value=str(factor),
        )
    if isinstance(factor, Decimal) and not factor.is_finite():
        raise InvalidAmount(f"Factor must be finite: {factor!r}", value=str(factor))


@dataclass(frozen=True, slots=True, order=True)
class Money:
    """
    Exact base-10 money amount.

    Rounding policy:
    - add / subtract / multiply keep full Decimal precision, nothing is rounded
    - rounding happens only when a caller asks for it via round(), to_fixed()
      or format(), always ROUND_HALF_UP
    """

    amount: Decimal

    def __post_init__(self) -> None:
        object.__setattr__(self, "amount", _to_decimal(self.amount))

    @classmethod
    def zero(cls) -> Money:
        return cls(Decimal("0"))

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def __add__(self, other: object) -> Money:
        if not isinstance(other, Money):
            return NotImplemented
        return Money(self.amount + other.amount)

    def __sub__(self, other: object) -> Money:
        if not isinstance(other, Money):
            return NotImplemented
        return Money(self.amount - other.amount)

    def __mul__(self, factor: Factor) -> Money:
        _check_factor(factor)
        if isinstance(factor, Fraction):
            return Money(self.amount * factor.numerator / factor.denominator)
        return Money(self.amount * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: Factor) -> Money:
        _check_factor(divisor)
        if divisor == 0:
            raise DivisionByZero("Cannot divide money by zero", amount=str(self.amount))
        if isinstance(divisor, Fraction):
            return Money(self.amount * divisor.denominator / divisor.numerator)
        return Money(self.amount / divisor)

    def __neg__(self) -> Money:
        return Money(-self.amount)

    def __abs__(self) -> Money:
        return Money(abs(self.amount))

    # ------------------------------------------------------------------
    # Predicates
    # ------------------------------------------------------------------

    @property
    def is_zero(self) -> bool:
        return self.amount == 0

    @property
    def is_positive(self) -> bool:
        return self.amount > 0

    @property
    def is_negative(self) -> bool:
        return self.amount < 0

    # ------------------------------------------------------------------
    # Rounding and display
    # ------------------------------------------------------------------

    def round(self, places: int = MONEY_PLACES) -> Money:
        """Round to `places` decimal places using ROUND_HALF_UP."""
        quantum = Decimal(1).scaleb(-places)
        with localcontext() as ctx:
            # quantize must hold every integer digit plus the requested places
            ctx.prec = max(ctx.prec, self.amount.adjusted() + 1 + places)
            rounded = self.amount.quantize(quantum, rounding=ROUND_HALF_UP)
            if rounded == 0:
                # Drop the sign of a negative zero
                rounded = abs(rounded)
        return Money(rounded)

    def to_fixed(self, places: int = MONEY_PLACES) -> str:
        """Plain decimal string with exactly `places` fractional digits, e.g. '1234.50'."""
        return str(self.round(places).amount)

    def format(self, symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
        """
        Display string: symbol, grouped integer part, 2 fractional digits.

        Examples: '£0.00', '£1,234.56', '£-50.00'
        """
        rounded = self.round(MONEY_PLACES).amount
        return f"{symbol}{rounded:,f}"

    def __str__(self) -> str:
        return self.format()


def sum_money(amounts: Iterable[Money]) -> Money:
    """Exact sum of money amounts; an empty iterable sums to zero."""
    total = Money.zero()
    for amount in amounts:
        total = total + amount
    return total
