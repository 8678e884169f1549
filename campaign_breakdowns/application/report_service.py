"""Dashboard breakdown reporting pipeline."""

from __future__ import annotations

from pathlib import Path
from time import perf_counter
from typing import Any, Dict, Mapping

import polars as pl

from campaign_breakdowns.application.aggregation import (
    AGE_GROUP,
    DEVICE,
    DIMENSIONS,
    GENDER,
    REGION,
    WEEK,
    Buckets,
    aggregate_all,
    gender_totals,
)
from campaign_breakdowns.application.reporting.metrics import fmt_currency
from campaign_breakdowns.application.reporting.views import (
    age_gender_table_frame,
    age_group_frame,
    device_frame,
    gender_summary_frame,
    region_frame,
    weekly_frame,
)
from campaign_breakdowns.config import INPUT_PATH, OUTPUT_DIR
from campaign_breakdowns.infrastructure.json_repository import load_campaign_records
from campaign_breakdowns.infrastructure.report_exporter import save_output_workbook, save_summary_json


SUMMARY_JSON_NAME = "dashboard_summary.json"
SUMMARY_EXCEL_NAME = "dashboard_summary.xlsx"


def build_view_frames(aggregates: Mapping[str, Buckets]) -> Dict[str, pl.DataFrame]:
    """One frame per dashboard view, keyed by worksheet name."""
    age_groups = aggregates.get(AGE_GROUP, {})
    return {
        "gender_summary": gender_summary_frame(aggregates.get(GENDER, {})),
        "age_groups": age_group_frame(age_groups),
        "age_male": age_gender_table_frame(age_groups, "male"),
        "age_female": age_gender_table_frame(age_groups, "female"),
        "devices": device_frame(aggregates.get(DEVICE, {})),
        "regions": region_frame(aggregates.get(REGION, {})),
        "weekly": weekly_frame(aggregates.get(WEEK, {})),
    }


def build_summary(input_path: Path, campaign_count: int, aggregates: Mapping[str, Buckets]) -> dict[str, Any]:
    return {
        "input_path": str(input_path),
        "campaign_count": campaign_count,
        "allocation_basis": {
            "gender": "campaign spend/revenue split by each gender's share of clicks/conversions across the campaign's demographic entries",
            "age_group": "campaign spend/revenue split by each entry's clicks/conversions over the campaign's own click/conversion totals",
            "device_region_week": "per-entry spend/revenue summed without allocation",
        },
        "gender_totals": gender_totals(aggregates.get(GENDER, {})),
        "dimensions": {
            dimension: [bucket.to_dict() for bucket in buckets.values()]
            for dimension, buckets in aggregates.items()
        },
    }


def run_dashboard_pipeline(input_path: Path | None = None, output_dir: Path | None = None) -> dict[str, Any]:
    pipeline_start = perf_counter()
    stage_start = pipeline_start
    stage_timings: list[tuple[str, float]] = []

    def _mark(stage_name: str) -> None:
        nonlocal stage_start
        now = perf_counter()
        stage_timings.append((stage_name, now - stage_start))
        stage_start = now

    source_path = Path(input_path) if input_path is not None else INPUT_PATH
    target_dir = Path(output_dir) if output_dir is not None else OUTPUT_DIR
    output_json_path = target_dir / SUMMARY_JSON_NAME
    output_excel_path = target_dir / SUMMARY_EXCEL_NAME

    records = load_campaign_records(source_path)
    _mark("load_campaign_records")
    aggregates = aggregate_all(records, DIMENSIONS)
    _mark("aggregate_all")
    frames = build_view_frames(aggregates)
    _mark("build_view_frames")

    summary = build_summary(source_path, len(records), aggregates)
    save_summary_json(output_json_path, summary)
    _mark("save_json")
    excel_saved, excel_error_message = save_output_workbook(output_excel_path, frames)
    _mark("save_excel")
    total_elapsed = perf_counter() - pipeline_start

    totals = summary["gender_totals"]
    print(
        "Summary prepared: "
        f"campaigns={len(records)}, "
        + ", ".join(f"{dimension}_buckets={len(aggregates[dimension])}" for dimension in DIMENSIONS)
    )
    print(
        "Gender split: "
        f"male spend={fmt_currency(totals['male']['spend'])} revenue={fmt_currency(totals['male']['revenue'])}, "
        f"female spend={fmt_currency(totals['female']['spend'])} revenue={fmt_currency(totals['female']['revenue'])}"
    )
    stage_text = ", ".join([f"{name}={seconds:.3f}s" for name, seconds in stage_timings])
    print(f"Stage Timing: {stage_text}")
    print(f"Total Elapsed: {total_elapsed:.3f}s")
    print(f"Saved JSON: {output_json_path}")
    if excel_saved:
        print(f"Saved Excel: {output_excel_path}")
    else:
        print(f"Excel save skipped (file may be open/locked): {excel_error_message}")
    return summary
