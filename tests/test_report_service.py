import json

import pytest

from campaign_breakdowns.application.aggregation import aggregate_all
from campaign_breakdowns.application.report_service import build_view_frames, run_dashboard_pipeline


def test_build_view_frames_covers_every_view(records):
    frames = build_view_frames(aggregate_all(records))

    assert list(frames) == ["gender_summary", "age_groups", "age_male", "age_female", "devices", "regions", "weekly"]
    assert frames["devices"].height == 2


def test_run_dashboard_pipeline_writes_outputs(payload_file, tmp_path, capsys):
    output_dir = tmp_path / "output"
    summary = run_dashboard_pipeline(input_path=payload_file, output_dir=output_dir)

    assert summary["campaign_count"] == 2
    assert summary["gender_totals"]["male"]["spend"] == pytest.approx(60.0)
    assert [row["key"] for row in summary["dimensions"]["week"]] == ["2024-10-01", "2024-10-08"]

    saved = json.loads((output_dir / "dashboard_summary.json").read_text(encoding="utf-8"))
    assert saved["campaign_count"] == 2
    assert (output_dir / "dashboard_summary.xlsx").exists()

    out = capsys.readouterr().out
    assert "Summary prepared: campaigns=2" in out
    assert "male spend=$60.00" in out
