"""Campaign breakdown aggregation package."""

from .application import DIMENSIONS, aggregate, aggregate_all, gender_totals, order_weeks
from .domain import AggregationBucket, CampaignRecord, CounterSet, DerivedRates, derive_rates
from .infrastructure import load_campaign_records

__all__ = [
    "DIMENSIONS",
    "AggregationBucket",
    "CampaignRecord",
    "CounterSet",
    "DerivedRates",
    "aggregate",
    "aggregate_all",
    "derive_rates",
    "gender_totals",
    "load_campaign_records",
    "order_weeks",
]
