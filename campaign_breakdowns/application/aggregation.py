"""Dimension aggregator: breakdown entries -> per-key buckets.

Each dimension is a fold over the campaign records. The accumulator is a
``dict[str, AggregationBucket]`` of frozen buckets; every step returns a new
mapping, so a run never touches state outside its own call.

Monetary allocation (gender, age group) follows
``allocated_k = campaign_total * (b_k / B)`` when ``B > 0`` and contributes
nothing otherwise. The gender basis ``B`` is the sum across the campaign's
demographic entries; the age-group basis is the campaign's own ``clicks`` /
``conversions`` fields. Device, region and week buckets sum per-entry
spend/revenue directly.
"""

from __future__ import annotations

import logging
from functools import reduce
from typing import Callable, Dict, Iterable, Mapping, Sequence

from campaign_breakdowns.domain.buckets import AggregationBucket, CounterSet
from campaign_breakdowns.domain.keys import age_group_key, category_key, gender_key, week_key, week_sort_key
from campaign_breakdowns.domain.models import CampaignRecord
from campaign_breakdowns.domain.rates import derive_rates, finite_or_zero


logger = logging.getLogger(__name__)

GENDER = "gender"
AGE_GROUP = "age_group"
DEVICE = "device"
REGION = "region"
WEEK = "week"
DIMENSIONS: tuple[str, ...] = (GENDER, AGE_GROUP, DEVICE, REGION, WEEK)

Buckets = Dict[str, AggregationBucket]
Folder = Callable[[Buckets, CampaignRecord], Buckets]


def _share(total: float, part: float, basis: float) -> float:
    if basis <= 0:
        return 0.0
    return finite_or_zero(total * finite_or_zero(part / basis))


def _bucket(buckets: Mapping[str, AggregationBucket], key: str) -> AggregationBucket:
    existing = buckets.get(key)
    if existing is None:
        return AggregationBucket(key=key)
    return existing


def _fold_gender(buckets: Buckets, record: CampaignRecord) -> Buckets:
    entries = record.demographic_breakdown
    if not entries:
        return buckets

    updated = dict(buckets)
    clicks_by_key: dict[str, float] = {}
    conversions_by_key: dict[str, float] = {}
    for entry in entries:
        key = gender_key(entry.gender)
        counters = CounterSet(entry.impressions, entry.clicks, entry.conversions)
        updated[key] = _bucket(updated, key).add_counters(counters)
        clicks_by_key[key] = clicks_by_key.get(key, 0.0) + entry.clicks
        conversions_by_key[key] = conversions_by_key.get(key, 0.0) + entry.conversions

    click_basis = sum(clicks_by_key.values())
    conversion_basis = sum(conversions_by_key.values())
    for key in clicks_by_key:
        updated[key] = updated[key].add_money(
            spend=_share(record.spend, clicks_by_key[key], click_basis),
            revenue=_share(record.revenue, conversions_by_key[key], conversion_basis),
        )
    return updated


def _fold_age_group(buckets: Buckets, record: CampaignRecord) -> Buckets:
    entries = record.demographic_breakdown
    if not entries:
        return buckets

    updated = dict(buckets)
    for entry in entries:
        key = age_group_key(entry.age_group)
        counters = CounterSet(entry.impressions, entry.clicks, entry.conversions)
        updated[key] = (
            _bucket(updated, key)
            .add_counters(counters, sub_group=gender_key(entry.gender))
            .add_money(
                spend=_share(record.spend, entry.clicks, record.clicks),
                revenue=_share(record.revenue, entry.conversions, record.conversions),
            )
        )
    return updated


def _fold_device(buckets: Buckets, record: CampaignRecord) -> Buckets:
    if not record.device_performance:
        return buckets
    updated = dict(buckets)
    for entry in record.device_performance:
        key = category_key(entry.device)
        updated[key] = _bucket(updated, key).add_money(spend=entry.spend, revenue=entry.revenue)
    return updated


def _fold_region(buckets: Buckets, record: CampaignRecord) -> Buckets:
    if not record.regional_performance:
        return buckets
    updated = dict(buckets)
    for entry in record.regional_performance:
        key = category_key(entry.region)
        updated[key] = _bucket(updated, key).add_money(spend=entry.spend, revenue=entry.revenue)
    return updated


def _fold_week(buckets: Buckets, record: CampaignRecord) -> Buckets:
    if not record.weekly_performance:
        return buckets
    updated = dict(buckets)
    for entry in record.weekly_performance:
        key = week_key(entry.week_start)
        updated[key] = (
            _bucket(updated, key)
            .add_counters(CounterSet(clicks=entry.clicks, conversions=entry.conversions))
            .add_money(spend=entry.spend, revenue=entry.revenue)
        )
    return updated


FOLDERS: dict[str, Folder] = {
    GENDER: _fold_gender,
    AGE_GROUP: _fold_age_group,
    DEVICE: _fold_device,
    REGION: _fold_region,
    WEEK: _fold_week,
}


def _finalize(bucket: AggregationBucket) -> AggregationBucket:
    sub_group_rates = {name: derive_rates(counters) for name, counters in bucket.sub_groups.items()}
    return bucket.with_rates(derive_rates(bucket.counters), sub_group_rates)


def order_weeks(buckets: Mapping[str, AggregationBucket]) -> Buckets:
    """Return week buckets in ascending calendar order; ties keep encounter order."""
    ordered_keys = sorted(buckets, key=week_sort_key)
    return {key: buckets[key] for key in ordered_keys}


def aggregate(records: Iterable[CampaignRecord], dimension: str) -> Buckets:
    """Aggregate ``records`` along one dimension into ``{key: bucket}``."""
    folder = FOLDERS.get(dimension)
    if folder is None:
        raise ValueError(f"Unknown dimension: {dimension!r}. Expected one of {list(DIMENSIONS)}")

    empty: Buckets = {}
    folded = reduce(folder, records, empty)
    buckets = {key: _finalize(bucket) for key, bucket in folded.items()}
    if dimension == WEEK:
        buckets = order_weeks(buckets)
    logger.debug("Aggregated dimension=%s buckets=%d", dimension, len(buckets))
    return buckets


def aggregate_all(
    records: Sequence[CampaignRecord],
    dimensions: Sequence[str] = DIMENSIONS,
) -> dict[str, Buckets]:
    return {dimension: aggregate(records, dimension) for dimension in dimensions}


def gender_totals(buckets: Mapping[str, AggregationBucket]) -> dict[str, dict[str, float]]:
    """Clicks/spend/revenue per gender; ``male`` and ``female`` are always present."""
    totals: dict[str, dict[str, float]] = {}
    for name in ("male", "female", *buckets):
        bucket = buckets.get(name, AggregationBucket(key=name))
        totals[name] = {"clicks": bucket.clicks, "spend": bucket.spend, "revenue": bucket.revenue}
    return totals
