"""Derived rate metrics with an explicit zero-denominator policy."""

from __future__ import annotations

import math

from campaign_breakdowns.domain.buckets import CounterSet, DerivedRates


def finite_or_zero(value: float) -> float:
    if math.isnan(value) or math.isinf(value):
        return 0.0
    return value


def safe_ratio(num: float, den: float) -> float:
    if den <= 0:
        return 0.0
    return finite_or_zero(num / den)


def derive_rates(counters: CounterSet) -> DerivedRates:
    return DerivedRates(
        ctr=finite_or_zero(safe_ratio(counters.clicks, counters.impressions) * 100),
        conv_rate=finite_or_zero(safe_ratio(counters.conversions, counters.clicks) * 100),
    )
