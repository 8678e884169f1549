import logging
import os
import subprocess
import sys

import pytest

from campaign_breakdowns import config


def test_parse_non_negative_int_defaults(monkeypatch):
    monkeypatch.delenv("DASHBOARD_CURRENCY_DECIMALS", raising=False)

    assert config._parse_non_negative_int("DASHBOARD_CURRENCY_DECIMALS", 2) == 2


@pytest.mark.parametrize("raw", ["two", "-1"])
def test_parse_non_negative_int_rejects_invalid(monkeypatch, raw):
    monkeypatch.setenv("DASHBOARD_RATE_DECIMALS", raw)

    with pytest.raises(ValueError, match="DASHBOARD_RATE_DECIMALS"):
        config._parse_non_negative_int("DASHBOARD_RATE_DECIMALS", 2)


def test_parse_path_override(monkeypatch, tmp_path):
    monkeypatch.setenv("DASHBOARD_OUTPUT_DIR", str(tmp_path))

    assert config._parse_path("DASHBOARD_OUTPUT_DIR", config.PROJECT_ROOT / "output") == tmp_path


def test_parse_log_level(monkeypatch):
    monkeypatch.setenv("DASHBOARD_LOG_LEVEL", "debug")
    assert config._parse_log_level() == logging.DEBUG

    monkeypatch.setenv("DASHBOARD_LOG_LEVEL", "chatty")
    with pytest.raises(ValueError):
        config._parse_log_level()


def test_engine_imports_without_valid_settings():
    env = {**os.environ, "DASHBOARD_LOG_LEVEL": "verbose"}
    result = subprocess.run(
        [sys.executable, "-c", "from campaign_breakdowns.application.aggregation import aggregate; print(aggregate([], 'week'))"],
        cwd=config.PROJECT_ROOT,
        env=env,
        capture_output=True,
        text=True,
    )

    assert result.returncode == 0, result.stderr
    assert result.stdout.strip() == "{}"
