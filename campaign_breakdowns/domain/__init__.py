"""Domain layer package."""

from .buckets import AggregationBucket, CounterSet, DerivedRates
from .models import CampaignRecord, DemographicEntry, DeviceEntry, RegionEntry, WeekEntry, to_number
from .rates import derive_rates, finite_or_zero, safe_ratio

__all__ = [
    "AggregationBucket",
    "CounterSet",
    "DerivedRates",
    "CampaignRecord",
    "DemographicEntry",
    "DeviceEntry",
    "RegionEntry",
    "WeekEntry",
    "to_number",
    "derive_rates",
    "finite_or_zero",
    "safe_ratio",
]
