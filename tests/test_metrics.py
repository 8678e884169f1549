import math

import pytest

from campaign_breakdowns.application.reporting.metrics import fmt_currency, fmt_rate
from campaign_breakdowns.domain.buckets import CounterSet
from campaign_breakdowns.domain.rates import derive_rates, safe_ratio


def test_zero_impressions_gives_zero_ctr():
    rates = derive_rates(CounterSet(impressions=0, clicks=5, conversions=1))

    assert rates.ctr == 0.0
    assert rates.conv_rate == pytest.approx(20.0)


def test_zero_clicks_gives_zero_conversion_rate():
    rates = derive_rates(CounterSet(impressions=100, clicks=0, conversions=3))

    assert rates.ctr == 0.0
    assert rates.conv_rate == 0.0


@pytest.mark.parametrize(
    "counters",
    [CounterSet(), CounterSet(-10, 5, 2), CounterSet(10, -5, 2), CounterSet(1e308, 1e308, 1e308)],
)
def test_rates_are_always_numeric(counters):
    rates = derive_rates(counters)

    assert not math.isnan(rates.ctr)
    assert not math.isnan(rates.conv_rate)


def test_rates_for_regular_bucket():
    rates = derive_rates(CounterSet(impressions=200, clicks=10, conversions=4))

    assert rates.ctr == pytest.approx(5.0)
    assert rates.conv_rate == pytest.approx(40.0)


def test_safe_ratio_non_positive_denominator():
    assert safe_ratio(5, 0) == 0.0
    assert safe_ratio(5, -1) == 0.0


def test_formatting_helpers():
    assert fmt_rate(12.3456) == "12.35%"
    assert fmt_rate(None) == "0.00%"
    assert fmt_currency(1234.5) == "$1,234.50"
    assert fmt_currency(-2) == "-$2.00"
