"""Group-key normalization shared by every breakdown dimension.

Categorical keys are trimmed; gender is additionally lower-cased. Blank or
absent values fall back to a sentinel so their totals stay visible. Week keys
keep the trimmed ``week_start`` text and are ordered by the parsed ISO date.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any


UNKNOWN_LABEL = "Unknown"
UNKNOWN_GENDER = "unknown"


def _clean_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def category_key(value: Any, sentinel: str = UNKNOWN_LABEL) -> str:
    text = _clean_text(value)
    return text if text else sentinel


def gender_key(value: Any) -> str:
    return category_key(value, sentinel=UNKNOWN_GENDER).lower()


def age_group_key(value: Any) -> str:
    return category_key(value)


def week_key(value: Any) -> str:
    return category_key(value)


def parse_week_start(value: str) -> date | None:
    """Parse an ISO date or datetime string; ``None`` when it is not parsable."""
    text = _clean_text(value)
    if not text:
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        return None


def week_sort_key(value: str) -> tuple[bool, date]:
    parsed = parse_week_start(value)
    if parsed is None:
        return True, date.min
    return False, parsed
