import json

import pytest

from campaign_breakdowns.domain.models import CampaignRecord


def sample_payload():
    return {
        "campaigns": [
            {
                "id": "cmp-1",
                "name": "Autumn Launch",
                "spend": 100,
                "revenue": 50,
                "clicks": 10,
                "conversions": 5,
                "demographic_breakdown": [
                    {
                        "gender": "Male",
                        "age_group": "18-24",
                        "performance": {"impressions": 100, "clicks": 6, "conversions": 1},
                    },
                    {
                        "gender": " female ",
                        "age_group": "25-34",
                        "performance": {"impressions": 50, "clicks": 4, "conversions": 4},
                    },
                ],
                "device_performance": [
                    {"device": "Desktop", "spend": 60, "revenue": 30, "clicks": 6},
                    {"device": "Mobile", "spend": 40, "revenue": 20},
                ],
                "regional_performance": [
                    {"region": "Dubai", "spend": 70, "revenue": 35},
                    {"region": "Atlantis", "spend": 30, "revenue": 15},
                ],
                "weekly_performance": [
                    {"week_start": "2024-10-08", "spend": 40, "revenue": 20, "clicks": 4, "conversions": 2},
                    {"week_start": "2024-10-01", "spend": 60, "revenue": 30, "clicks": 6, "conversions": 3},
                ],
            },
            {
                "id": "cmp-2",
                "name": "Retargeting",
                "spend": 200,
                "revenue": 80,
                "clicks": 0,
                "conversions": 0,
                "demographic_breakdown": [
                    {"gender": "male", "performance": {"impressions": 0, "clicks": 0, "conversions": 0}},
                ],
                "device_performance": [{"device": "Desktop", "spend": 200, "revenue": 80}],
                "weekly_performance": [
                    {"week_start": "2024-10-01", "spend": 200, "revenue": 80, "clicks": 0, "conversions": 0},
                ],
            },
        ]
    }


@pytest.fixture
def payload():
    return sample_payload()


@pytest.fixture
def records(payload):
    return [CampaignRecord.from_row(row) for row in payload["campaigns"]]


@pytest.fixture
def payload_file(tmp_path, payload):
    path = tmp_path / "marketing_data.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path
