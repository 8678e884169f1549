"""Bucket formatting for dashboard views (rounding, ordering, reshaping)."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping

import polars as pl

from campaign_breakdowns.application.aggregation import gender_totals, order_weeks
from campaign_breakdowns.application.reporting.metrics import fmt_rate, round_money_expr
from campaign_breakdowns.domain.buckets import AggregationBucket
from campaign_breakdowns.domain.keys import parse_week_start


REGION_COORDINATES: Dict[str, tuple[str, str]] = {
    "Abu Dhabi": ("58%", "60%"),
    "Dubai": ("62%", "55%"),
    "Sharjah": ("63%", "53%"),
    "Riyadh": ("35%", "58%"),
    "Doha": ("50%", "54%"),
    "Kuwait City": ("40%", "30%"),
    "Manama": ("47%", "45%"),
}
UNPLACED_COORDINATES: tuple[str, str] = ("0%", "0%")
TABLE_GENDERS: tuple[str, ...] = ("male", "female")

GENDER_SUMMARY_SCHEMA: Dict[str, Any] = {
    "gender": pl.Utf8,
    "clicks": pl.Float64,
    "spend": pl.Float64,
    "revenue": pl.Float64,
}
AGE_GROUP_SCHEMA: Dict[str, Any] = {
    "age_group": pl.Utf8,
    "spend": pl.Float64,
    "revenue": pl.Float64,
    "clicks": pl.Float64,
    "conversions": pl.Float64,
}
AGE_GENDER_TABLE_SCHEMA: Dict[str, Any] = {
    "age_group": pl.Utf8,
    "impressions": pl.Float64,
    "clicks": pl.Float64,
    "conversions": pl.Float64,
    "ctr": pl.Utf8,
    "conv_rate": pl.Utf8,
}
DEVICE_SCHEMA: Dict[str, Any] = {"device": pl.Utf8, "spend": pl.Float64, "revenue": pl.Float64}
REGION_SCHEMA: Dict[str, Any] = {
    "region": pl.Utf8,
    "spend": pl.Float64,
    "revenue": pl.Float64,
    "x": pl.Utf8,
    "y": pl.Utf8,
}
WEEKLY_SCHEMA: Dict[str, Any] = {
    "week_start": pl.Utf8,
    "week": pl.Utf8,
    "spend": pl.Float64,
    "revenue": pl.Float64,
    "clicks": pl.Float64,
    "conversions": pl.Float64,
}


def _frame(rows: List[Dict[str, Any]], schema: Dict[str, Any], money_columns: tuple[str, ...] = ()) -> pl.DataFrame:
    frame = pl.DataFrame(rows, schema=schema)
    if not money_columns:
        return frame
    return frame.with_columns([round_money_expr(column) for column in money_columns])


def week_label(week_start: str) -> str:
    parsed = parse_week_start(week_start)
    if parsed is None:
        return week_start
    return f"{parsed.strftime('%b')} {parsed.day}"


def gender_summary_frame(buckets: Mapping[str, AggregationBucket]) -> pl.DataFrame:
    rows = [{"gender": name, **values} for name, values in gender_totals(buckets).items()]
    return _frame(rows, GENDER_SUMMARY_SCHEMA, money_columns=("spend", "revenue"))


def age_group_frame(buckets: Mapping[str, AggregationBucket]) -> pl.DataFrame:
    rows = [
        {
            "age_group": key,
            "spend": bucket.spend,
            "revenue": bucket.revenue,
            "clicks": bucket.clicks,
            "conversions": bucket.conversions,
        }
        for key, bucket in buckets.items()
    ]
    return _frame(rows, AGE_GROUP_SCHEMA, money_columns=("spend", "revenue"))


def age_gender_table_frame(buckets: Mapping[str, AggregationBucket], gender: str) -> pl.DataFrame:
    """Per-age table of one gender's counters with formatted rate strings."""
    name = gender.strip().lower()
    if name not in TABLE_GENDERS:
        raise ValueError(f"Unsupported gender table: {gender!r}. Expected one of {list(TABLE_GENDERS)}")

    rows: List[Dict[str, Any]] = []
    for key, bucket in buckets.items():
        counters = bucket.sub_group(name)
        rates = bucket.sub_group_rate(name)
        rows.append(
            {
                "age_group": key,
                "impressions": counters.impressions,
                "clicks": counters.clicks,
                "conversions": counters.conversions,
                "ctr": fmt_rate(rates.ctr),
                "conv_rate": fmt_rate(rates.conv_rate),
            }
        )
    return _frame(rows, AGE_GENDER_TABLE_SCHEMA)


def device_frame(buckets: Mapping[str, AggregationBucket]) -> pl.DataFrame:
    rows = [{"device": key, "spend": bucket.spend, "revenue": bucket.revenue} for key, bucket in buckets.items()]
    return _frame(rows, DEVICE_SCHEMA, money_columns=("spend", "revenue"))


def region_frame(buckets: Mapping[str, AggregationBucket]) -> pl.DataFrame:
    """Heat-map points; regions without known coordinates sit at the origin."""
    rows: List[Dict[str, Any]] = []
    for key, bucket in buckets.items():
        x, y = REGION_COORDINATES.get(key, UNPLACED_COORDINATES)
        rows.append({"region": key, "spend": bucket.spend, "revenue": bucket.revenue, "x": x, "y": y})
    return _frame(rows, REGION_SCHEMA, money_columns=("spend", "revenue"))


def weekly_frame(buckets: Mapping[str, AggregationBucket]) -> pl.DataFrame:
    rows = [
        {
            "week_start": key,
            "week": week_label(key),
            "spend": bucket.spend,
            "revenue": bucket.revenue,
            "clicks": bucket.clicks,
            "conversions": bucket.conversions,
        }
        for key, bucket in order_weeks(buckets).items()
    ]
    return _frame(rows, WEEKLY_SCHEMA, money_columns=("spend", "revenue"))
