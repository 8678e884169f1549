import pytest

from campaign_breakdowns.domain.keys import gender_key, parse_week_start, week_sort_key
from campaign_breakdowns.domain.models import CampaignRecord, DemographicEntry, DeviceEntry, to_number


@pytest.mark.parametrize(
    "raw,expected",
    [(None, 0.0), ("12.5", 12.5), ("abc", 0.0), (float("nan"), 0.0), (float("inf"), 0.0), (-3, -3.0), (7, 7.0)],
)
def test_to_number_coerces_or_defaults(raw, expected):
    assert to_number(raw) == expected


def test_demographic_entry_defaults():
    entry = DemographicEntry.from_row({"gender": " Female "})

    assert entry.gender == "female"
    assert entry.age_group == "Unknown"
    assert (entry.impressions, entry.clicks, entry.conversions) == (0.0, 0.0, 0.0)


def test_device_entry_round_trips_optional_counters():
    with_counters = {"device": "Desktop", "spend": 10.0, "revenue": 5.0, "impressions": 100.0, "clicks": 4.0}
    without_counters = {"device": "Mobile", "spend": 1.0, "revenue": 2.0}

    assert DeviceEntry.from_row(with_counters).to_dict() == with_counters
    assert DeviceEntry.from_row(without_counters).to_dict() == without_counters


def test_campaign_record_reads_camel_case_aliases():
    record = CampaignRecord.from_row(
        {
            "spend": 10,
            "demographicBreakdown": [{"gender": "male", "ageGroup": "35-44", "performance": {"clicks": 3}}],
            "weeklyPerformance": [{"weekStart": "2024-10-01", "spend": 10}],
        }
    )

    assert record.demographic_breakdown[0].age_group == "35-44"
    assert record.weekly_performance[0].week_start == "2024-10-01"


def test_campaign_record_skips_malformed_breakdowns():
    record = CampaignRecord.from_row(
        {
            "device_performance": "Desktop",
            "regional_performance": [{"region": "Doha", "spend": 5}, "junk", None],
            "demographic_breakdown": [{"gender": "male", "performance": "n/a"}],
        }
    )

    assert record.device_performance == ()
    assert [entry.region for entry in record.regional_performance] == ["Doha"]
    assert record.demographic_breakdown[0].clicks == 0.0


def test_key_helpers():
    assert gender_key(None) == "unknown"
    assert gender_key("  MALE") == "male"
    assert str(parse_week_start("2024-10-01T12:30:00Z")) == "2024-10-01"
    assert parse_week_start("Oct 1") is None
    assert week_sort_key("2024-10-01") < week_sort_key("not-a-date")
