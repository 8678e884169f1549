"""Environment-driven settings for the breakdown dashboard pipeline."""

from __future__ import annotations

import logging
import os
from pathlib import Path


PROJECT_ROOT = Path(__file__).resolve().parents[1]
LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _parse_non_negative_int(name: str, default: int) -> int:
    raw = os.getenv(name, str(default))
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(f"Invalid {name}: {raw}") from exc
    if value < 0:
        raise ValueError(f"{name} must be >= 0, got {value}")
    return value


def _parse_path(name: str, default: Path) -> Path:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    return Path(raw).expanduser()


def _parse_log_level() -> int:
    raw = os.getenv("DASHBOARD_LOG_LEVEL", "INFO").strip().upper()
    if raw not in LOG_LEVELS:
        raise ValueError(f"DASHBOARD_LOG_LEVEL must be one of {list(LOG_LEVELS)}, got {raw}")
    return getattr(logging, raw)


CURRENCY_DECIMALS = _parse_non_negative_int("DASHBOARD_CURRENCY_DECIMALS", 2)
RATE_DECIMALS = _parse_non_negative_int("DASHBOARD_RATE_DECIMALS", 2)
INPUT_PATH = _parse_path("DASHBOARD_INPUT_PATH", PROJECT_ROOT / "data" / "raw" / "marketing_data.json")
OUTPUT_DIR = _parse_path("DASHBOARD_OUTPUT_DIR", PROJECT_ROOT / "output")
LOG_LEVEL = _parse_log_level()
