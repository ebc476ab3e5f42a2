from __future__ import annotations

from decimal import Decimal

from snowball_planner.domain.frequency import Frequency
from snowball_planner.domain.household import RecurringAmount, UniversalCreditConfig
from snowball_planner.domain.money import Money
from snowball_planner.use_cases.calculate_disposable_income import CalculateDisposableIncome

UC_CONFIG = UniversalCreditConfig(taper_rate=Decimal("0.55"), work_allowance=Money("400"))


def monthly(amount: str, **kwargs: bool) -> RecurringAmount:
    return RecurringAmount(amount=Money(amount), frequency=Frequency.MONTHLY, **kwargs)


def test_income_minus_expenses_without_uc() -> None:
    incomes = [monthly("1800"), RecurringAmount(Money("100"), Frequency.WEEKLY)]
    expenses = [monthly("950"), RecurringAmount(Money("600"), Frequency.ANNUAL)]

    result = CalculateDisposableIncome().execute(incomes, expenses)

    assert result.gross_income.round() == Money("2233.33")
    assert result.total_expenses == Money("1000")
    assert result.uc_taper == Money.zero()
    assert result.disposable_income.round() == Money("1233.33")


def test_uc_taper_reduces_disposable_income() -> None:
    result = CalculateDisposableIncome(uc_config=UC_CONFIG).execute(
        [monthly("1400")], [monthly("300")]
    )

    assert result.uc_taper == Money("550")
    assert result.disposable_income == Money("550")


def test_uc_paid_expenses_are_excluded() -> None:
    expenses = [monthly("700", is_uc_paid=True), monthly("200")]

    result = CalculateDisposableIncome().execute([monthly("1000")], expenses)

    assert result.total_expenses == Money("200")
    assert result.disposable_income == Money("800")


def test_one_time_items_do_not_count() -> None:
    incomes = [monthly("1000"), RecurringAmount(Money("5000"), Frequency.ONE_TIME)]

    result = CalculateDisposableIncome().execute(incomes, [])

    assert result.gross_income == Money("1000")


def test_negative_result_is_not_clamped() -> None:
    result = CalculateDisposableIncome().execute([monthly("500")], [monthly("650")])

    assert result.disposable_income == Money("-150")
