"""Immutable accumulators produced by one aggregation pass."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Mapping


@dataclass(frozen=True)
class CounterSet:
    impressions: float = 0.0
    clicks: float = 0.0
    conversions: float = 0.0

    def plus(self, other: "CounterSet") -> "CounterSet":
        return CounterSet(
            impressions=self.impressions + other.impressions,
            clicks=self.clicks + other.clicks,
            conversions=self.conversions + other.conversions,
        )


@dataclass(frozen=True)
class DerivedRates:
    """Percent rates; both are 0.0 when their denominator is not positive."""

    ctr: float = 0.0
    conv_rate: float = 0.0


@dataclass(frozen=True)
class AggregationBucket:
    """Per-key totals for one dimension.

    ``spend`` and ``revenue`` are either allocated shares of campaign totals
    (gender, age group) or sums of per-entry values (device, region, week).
    ``sub_groups`` holds per-gender counters for the age-group view.
    """

    key: str
    counters: CounterSet = CounterSet()
    spend: float = 0.0
    revenue: float = 0.0
    sub_groups: Mapping[str, CounterSet] = field(default_factory=dict)
    rates: DerivedRates = DerivedRates()
    sub_group_rates: Mapping[str, DerivedRates] = field(default_factory=dict)

    @property
    def impressions(self) -> float:
        return self.counters.impressions

    @property
    def clicks(self) -> float:
        return self.counters.clicks

    @property
    def conversions(self) -> float:
        return self.counters.conversions

    @property
    def ctr(self) -> float:
        return self.rates.ctr

    @property
    def conv_rate(self) -> float:
        return self.rates.conv_rate

    def add_counters(self, counters: CounterSet, sub_group: str | None = None) -> "AggregationBucket":
        if sub_group is None:
            return replace(self, counters=self.counters.plus(counters))
        sub_groups = dict(self.sub_groups)
        sub_groups[sub_group] = sub_groups.get(sub_group, CounterSet()).plus(counters)
        return replace(self, counters=self.counters.plus(counters), sub_groups=sub_groups)

    def add_money(self, spend: float = 0.0, revenue: float = 0.0) -> "AggregationBucket":
        return replace(self, spend=self.spend + spend, revenue=self.revenue + revenue)

    def with_rates(self, rates: DerivedRates, sub_group_rates: Mapping[str, DerivedRates]) -> "AggregationBucket":
        return replace(self, rates=rates, sub_group_rates=dict(sub_group_rates))

    def sub_group(self, name: str) -> CounterSet:
        return self.sub_groups.get(name, CounterSet())

    def sub_group_rate(self, name: str) -> DerivedRates:
        return self.sub_group_rates.get(name, DerivedRates())

    def to_dict(self) -> dict[str, Any]:
        return {
            "key": self.key,
            "impressions": self.impressions,
            "clicks": self.clicks,
            "conversions": self.conversions,
            "spend": self.spend,
            "revenue": self.revenue,
            "ctr": self.ctr,
            "conv_rate": self.conv_rate,
            "sub_groups": {
                name: {
                    "impressions": counters.impressions,
                    "clicks": counters.clicks,
                    "conversions": counters.conversions,
                    "ctr": self.sub_group_rate(name).ctr,
                    "conv_rate": self.sub_group_rate(name).conv_rate,
                }
                for name, counters in self.sub_groups.items()
            },
        }
