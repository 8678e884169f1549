"""Infrastructure adapter for JSON marketing payloads."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping

from campaign_breakdowns.domain.models import CampaignRecord


logger = logging.getLogger(__name__)


def _campaign_rows(payload: Any) -> list[Any]:
    if isinstance(payload, Mapping):
        campaigns = payload.get("campaigns")
        if campaigns is None:
            return []
        if isinstance(campaigns, list):
            return campaigns
        raise ValueError(f"'campaigns' must be a list, got {type(campaigns).__name__}")
    if isinstance(payload, list):
        return payload
    raise ValueError(f"Unsupported payload: expected an object with 'campaigns' or a list, got {type(payload).__name__}")


def parse_campaign_records(payload: Any) -> list[CampaignRecord]:
    records: list[CampaignRecord] = []
    for idx, row in enumerate(_campaign_rows(payload)):
        if not isinstance(row, Mapping):
            logger.warning("Skipping campaigns[%d]: expected a mapping, got %s", idx, type(row).__name__)
            continue
        records.append(CampaignRecord.from_row(row))
    return records


def load_campaign_records(path: Path) -> list[CampaignRecord]:
    """Read an already-fetched marketing payload into campaign records."""
    payload = json.loads(Path(path).read_text(encoding="utf-8"))
    records = parse_campaign_records(payload)
    logger.info("Loaded %d campaign records from %s", len(records), path)
    return records
