import pytest

from campaign_dashboard.application.aggregation import aggregate_campaigns
from campaign_dashboard.application.normalizer import normalize_records
from campaign_dashboard.application.totals import compute_totals
from campaign_dashboard.domain.models import PeriodTotals


def test_totals_from_aggregates(sample_rows):
    totals = compute_totals(aggregate_campaigns(normalize_records(sample_rows).records).values())
    assert (totals.clicks, totals.impressions, totals.cost, totals.conversions) == (35.0, 350.0, 175.0, 2.0)
    assert totals.ctr == pytest.approx(10.0)
    assert totals.cost_per_conversion == pytest.approx(87.5)
    assert totals.avg_cpc == pytest.approx(5.0)


def test_empty_totals_are_zero():
    assert compute_totals([]) == PeriodTotals()


def test_totals_without_conversions_or_clicks():
    rows = [{"campaign_name": "A", "date": "2024-01-01", "impressions": 10, "cost": 3}]
    totals = compute_totals(aggregate_campaigns(normalize_records(rows).records).values())
    assert totals.ctr == 0.0
    assert totals.avg_cpc == 0.0
    assert totals.cost_per_conversion == 0.0
