from __future__ import annotations

import os

from snowball_planner.domain.interest import DEFAULT_MAX_MONTHS
from snowball_planner.domain.money import DEFAULT_CURRENCY_SYMBOL


def max_projection_months() -> int:
    raw = os.getenv("SNOWBALL_MAX_PROJECTION_MONTHS")

    if not raw:
        return DEFAULT_MAX_MONTHS

    try:
        months = int(raw)
    except ValueError:
        raise RuntimeError(
            f"SNOWBALL_MAX_PROJECTION_MONTHS must be an integer, got {raw!r}"
        ) from None

    if months <= 0:
        raise RuntimeError("SNOWBALL_MAX_PROJECTION_MONTHS must be > 0")

    return months


def currency_symbol() -> str:
    return os.getenv("SNOWBALL_CURRENCY_SYMBOL") or DEFAULT_CURRENCY_SYMBOL
