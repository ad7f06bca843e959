import pytest


@pytest.fixture
def sample_rows():
    return [
        {"id": 1, "campaign_name": "A", "date": "2024-01-01", "clicks": 10, "impressions": 100, "cost": 50, "conversions": 2},
        {"id": 2, "campaign_name": "A", "date": "2024-01-02", "clicks": 5, "impressions": 50, "cost": 25, "conversions": 0},
        {"id": 3, "campaign_name": "B", "date": "2024-01-01", "clicks": 20, "impressions": 200, "cost": 100, "conversions": 0},
    ]
