"""Tests for the Money value type."""

from __future__ import annotations

from decimal import Decimal
from fractions import Fraction

import pytest

from snowball_planner.domain.errors import DivisionByZero, InvalidAmount
from snowball_planner.domain.money import Money, sum_money


# ==============================================================================
# Construction
# ==============================================================================


def test_builds_from_string_int_and_decimal() -> None:
    assert Money("12.50").amount == Decimal("12.50")
    assert Money(12).amount == Decimal("12")
    assert Money(Decimal("0.01")).amount == Decimal("0.01")


def test_strips_surrounding_whitespace() -> None:
    assert Money(" 10.00 ") == Money("10.00")


@pytest.mark.parametrize("value", ["abc", "", "12.3.4", "£10"])
def test_rejects_malformed_strings(value: str) -> None:
    with pytest.raises(InvalidAmount, match="Not a valid decimal amount"):
        Money(value)


@pytest.mark.parametrize("value", ["NaN", "Infinity", "-Infinity", Decimal("NaN")])
def test_rejects_non_finite_values(value: object) -> None:
    with pytest.raises(InvalidAmount, match="must be finite"):
        Money(value)  # type: ignore[arg-type]


def test_rejects_floats() -> None:
    """No floats past the boundary."""
    with pytest.raises(InvalidAmount, match="got float"):
        Money(0.1)  # type: ignore[arg-type]


def test_rejects_bool() -> None:
    with pytest.raises(InvalidAmount):
        Money(True)  # type: ignore[arg-type]


def test_rejects_unsupported_types() -> None:
    with pytest.raises(InvalidAmount, match="Unsupported money input type"):
        Money([1])  # type: ignore[arg-type]


# ==============================================================================
# Arithmetic
# ==============================================================================


def test_point_one_plus_point_two_is_exactly_point_three() -> None:
    assert Money("0.1") + Money("0.2") == Money("0.3")


@pytest.mark.parametrize(
    "a, b, c",
    [
        ("0.1", "0.2", "0.3"),
        ("1234.567", "0.0001", "99999.99"),
        ("-5.55", "10.10", "0.005"),
    ],
)
def test_add_is_associative_and_commutative(a: str, b: str, c: str) -> None:
    x, y, z = Money(a), Money(b), Money(c)

    assert x + y == y + x
    assert (x + y) + z == x + (y + z)


def test_subtract() -> None:
    assert Money("100.00") - Money("0.01") == Money("99.99")
    assert (Money("1") - Money("2")).is_negative


def test_add_rejects_non_money() -> None:
    with pytest.raises(TypeError):
        Money("1") + Decimal("1")  # type: ignore[operator]


def test_multiply_keeps_full_precision() -> None:
    result = Money("10.005") * Decimal("3")

    assert result.amount == Decimal("30.015")


def test_multiply_by_int_from_either_side() -> None:
    assert Money("2.50") * 4 == Money("10.00")
    assert 4 * Money("2.50") == Money("10.00")


def test_multiply_by_fraction() -> None:
    assert Money("12") * Fraction(52, 12) == Money("52")


def test_multiply_rejects_float_factor() -> None:
    with pytest.raises(InvalidAmount):
        Money("1") * 1.5  # type: ignore[operator]


def test_divide() -> None:
    assert Money("100") / 4 == Money("25")
    assert Money("100") / Decimal("0.5") == Money("200")
    assert Money("52") / Fraction(52, 12) == Money("12")


@pytest.mark.parametrize("divisor", [0, Decimal("0"), Decimal("0.00")])
def test_divide_by_zero_raises(divisor: object) -> None:
    with pytest.raises(DivisionByZero, match="Cannot divide money by zero"):
        Money("10") / divisor  # type: ignore[operator]


def test_negation_and_absolute_value() -> None:
    assert -Money("5") == Money("-5")
    assert abs(Money("-5")) == Money("5")


def test_comparisons() -> None:
    assert Money("1.00") == Money("1")
    assert Money("0.99") < Money("1")
    assert max(Money("3"), Money("7")) == Money("7")


def test_predicates() -> None:
    assert Money("0.00").is_zero
    assert Money("0.01").is_positive
    assert Money("-0.01").is_negative


def test_sum_money() -> None:
    assert sum_money([Money("0.1")] * 10) == Money("1")
    assert sum_money([]) == Money.zero()


# ==============================================================================
# Rounding and formatting
# ==============================================================================


@pytest.mark.parametrize(
    "value, expected",
    [
        ("15.825", "15.83"),
        ("15.824", "15.82"),
        ("0.005", "0.01"),
        ("-0.005", "-0.01"),
        ("2.5", "2.50"),
    ],
)
def test_round_is_half_up(value: str, expected: str) -> None:
    assert Money(value).round() == Money(expected)
    assert Money(value).to_fixed() == expected


def test_round_to_other_places() -> None:
    assert Money("1.23456").round(4).amount == Decimal("1.2346")
    assert Money("1.5").round(0).amount == Decimal("2")


def test_to_fixed_drops_negative_zero() -> None:
    assert Money("-0.001").to_fixed() == "0.00"


@pytest.mark.parametrize(
    "value, expected",
    [
        ("0", "£0.00"),
        ("5", "£5.00"),
        ("999.999", "£1,000.00"),
        ("1234.56", "£1,234.56"),
        ("1234567.891", "£1,234,567.89"),
        ("-50", "£-50.00"),
        ("-1234.5", "£-1,234.50"),
    ],
)
def test_format(value: str, expected: str) -> None:
    assert Money(value).format() == expected


def test_format_always_has_two_fraction_digits_and_a_symbol() -> None:
    for value in ["0.1", "10", "1000", "12345.678"]:
        formatted = Money(value).format()

        assert formatted.startswith("£")
        assert len(formatted.split(".")[1]) == 2


def test_format_groups_thousands() -> None:
    assert "," in Money("1000").format()
    assert "," not in Money("999.99").format()


def test_format_with_other_symbol() -> None:
    assert Money("1500").format("$") == "$1,500.00"


def test_str_is_formatted_display() -> None:
    assert str(Money("42")) == "£42.00"


def test_rounds_and_formats_amounts_beyond_default_precision() -> None:
    huge = Money("1e27")

    assert huge.to_fixed() == "1" + "0" * 27 + ".00"
    assert huge.format() == "£1" + ",000" * 9 + ".00"
    assert Money("123456789012345678901234567890.125").round() == Money(
        "123456789012345678901234567890.13"
    )
