"""Shared numeric/formatting utilities for breakdown reporting."""

from __future__ import annotations

from typing import Any

import polars as pl

from campaign_breakdowns.config import CURRENCY_DECIMALS, RATE_DECIMALS
from campaign_breakdowns.domain.rates import finite_or_zero


def round_money_expr(column: str, decimals: int = CURRENCY_DECIMALS) -> pl.Expr:
    return pl.col(column).fill_nan(0.0).fill_null(0.0).round(decimals)


def fmt_currency(value: Any, decimals: int = CURRENCY_DECIMALS) -> str:
    amount = finite_or_zero(float(value or 0.0))
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.{decimals}f}"


def fmt_rate(value: Any, decimals: int = RATE_DECIMALS) -> str:
    rate = finite_or_zero(float(value or 0.0))
    return f"{rate:.{decimals}f}%"
