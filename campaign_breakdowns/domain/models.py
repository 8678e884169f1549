"""Domain models for campaign records and their breakdown entries."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Callable, Mapping, TypeVar

from campaign_breakdowns.domain.keys import age_group_key, category_key, gender_key, week_key


logger = logging.getLogger(__name__)

EntryT = TypeVar("EntryT")


def to_number(value: Any, default: float = 0.0) -> float:
    """Coerce a raw counter to a finite float; anything else becomes ``default``."""
    if value is None:
        return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    if math.isnan(number) or math.isinf(number):
        return default
    return number


def _to_optional_float(value: Any) -> float | None:
    if value is None:
        return None
    number = to_number(value, default=math.nan)
    if math.isnan(number):
        return None
    return number


def _field(row: Mapping[str, Any], *names: str) -> Any:
    for name in names:
        value = row.get(name)
        if value is not None:
            return value
    return None


def _entries(
    row: Mapping[str, Any],
    names: tuple[str, ...],
    factory: Callable[[Mapping[str, Any]], EntryT],
) -> tuple[EntryT, ...]:
    raw = _field(row, *names)
    if raw is None:
        return ()
    if not isinstance(raw, (list, tuple)):
        logger.warning("Ignoring %s: expected a list, got %s", names[0], type(raw).__name__)
        return ()
    parsed: list[EntryT] = []
    for idx, item in enumerate(raw):
        if not isinstance(item, Mapping):
            logger.warning("Skipping %s[%d]: expected a mapping, got %s", names[0], idx, type(item).__name__)
            continue
        parsed.append(factory(item))
    return tuple(parsed)


@dataclass(frozen=True)
class DemographicEntry:
    gender: str
    age_group: str
    impressions: float = 0.0
    clicks: float = 0.0
    conversions: float = 0.0

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "DemographicEntry":
        performance = row.get("performance")
        if not isinstance(performance, Mapping):
            performance = {}
        return cls(
            gender=gender_key(row.get("gender")),
            age_group=age_group_key(_field(row, "age_group", "ageGroup")),
            impressions=to_number(performance.get("impressions")),
            clicks=to_number(performance.get("clicks")),
            conversions=to_number(performance.get("conversions")),
        )


@dataclass(frozen=True)
class DeviceEntry:
    device: str
    spend: float = 0.0
    revenue: float = 0.0
    impressions: float | None = None
    clicks: float | None = None
    conversions: float | None = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "DeviceEntry":
        return cls(
            device=category_key(row.get("device")),
            spend=to_number(row.get("spend")),
            revenue=to_number(row.get("revenue")),
            impressions=_to_optional_float(row.get("impressions")),
            clicks=_to_optional_float(row.get("clicks")),
            conversions=_to_optional_float(row.get("conversions")),
        )

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"device": self.device, "spend": self.spend, "revenue": self.revenue}
        for name in ("impressions", "clicks", "conversions"):
            value = getattr(self, name)
            if value is not None:
                payload[name] = value
        return payload


@dataclass(frozen=True)
class RegionEntry:
    region: str
    spend: float = 0.0
    revenue: float = 0.0

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "RegionEntry":
        return cls(
            region=category_key(row.get("region")),
            spend=to_number(row.get("spend")),
            revenue=to_number(row.get("revenue")),
        )


@dataclass(frozen=True)
class WeekEntry:
    week_start: str
    spend: float = 0.0
    revenue: float = 0.0
    clicks: float = 0.0
    conversions: float = 0.0

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "WeekEntry":
        return cls(
            week_start=week_key(_field(row, "week_start", "weekStart")),
            spend=to_number(row.get("spend")),
            revenue=to_number(row.get("revenue")),
            clicks=to_number(row.get("clicks")),
            conversions=to_number(row.get("conversions")),
        )


@dataclass(frozen=True)
class CampaignRecord:
    """One campaign's totals plus its per-dimension breakdowns."""

    id: str = ""
    name: str = ""
    spend: float = 0.0
    revenue: float = 0.0
    clicks: float = 0.0
    conversions: float = 0.0
    demographic_breakdown: tuple[DemographicEntry, ...] = ()
    device_performance: tuple[DeviceEntry, ...] = ()
    regional_performance: tuple[RegionEntry, ...] = ()
    weekly_performance: tuple[WeekEntry, ...] = ()

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "CampaignRecord":
        return cls(
            id=str(row.get("id", "") or ""),
            name=str(row.get("name", "") or ""),
            spend=to_number(row.get("spend")),
            revenue=to_number(row.get("revenue")),
            clicks=to_number(row.get("clicks")),
            conversions=to_number(row.get("conversions")),
            demographic_breakdown=_entries(
                row, ("demographic_breakdown", "demographicBreakdown"), DemographicEntry.from_row
            ),
            device_performance=_entries(row, ("device_performance", "devicePerformance"), DeviceEntry.from_row),
            regional_performance=_entries(
                row, ("regional_performance", "regionalPerformance"), RegionEntry.from_row
            ),
            weekly_performance=_entries(row, ("weekly_performance", "weeklyPerformance"), WeekEntry.from_row),
        )
