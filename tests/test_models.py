from datetime import date, datetime, timedelta, timezone

import pytest

from campaign_dashboard.domain.models import (
    AggregatedCampaign,
    DailyRecord,
    DashboardView,
    FilterSpec,
    MalformedRecordError,
    NormalizationResult,
    PeriodTotals,
    strip_name_prefixes,
)


def raw_row(**overrides):
    row = {
        "id": 17,
        "campaign_name": "Brand Search",
        "date": "2024-01-01",
        "clicks": "10",
        "impressions": "100",
        "cost": "50.5",
        "conversions": "2",
    }
    row.update(overrides)
    return row


def test_from_row_coerces_numeric_strings():
    record = DailyRecord.from_row(raw_row(), default_category="Demand generation")
    assert record.campaign_id == "17"
    assert record.campaign_key == "Brand Search"
    assert record.category == "Demand generation"
    assert record.date == date(2024, 1, 1)
    assert record.clicks == 10.0
    assert record.cost == 50.5


def test_from_row_unparsable_metrics_become_zero():
    record = DailyRecord.from_row(raw_row(clicks="n/a", impressions=None, cost="", conversions=True))
    assert (record.clicks, record.impressions, record.cost, record.conversions) == (0.0, 0.0, 0.0, 0.0)


def test_from_row_strips_thousands_separator():
    record = DailyRecord.from_row(raw_row(impressions="1,250"))
    assert record.impressions == 1250.0


def test_from_row_accepts_name_aliases_and_category():
    row = raw_row(campaign_name=None, name="Display", type="Awareness")
    record = DailyRecord.from_row(row)
    assert record.campaign_key == "Display"
    assert record.category == "Awareness"


@pytest.mark.parametrize(
    "overrides, reason",
    [
        ({"campaign_name": "  "}, "missing_name"),
        ({"date": "not a date"}, "invalid_date"),
        ({"date": None}, "invalid_date"),
        ({"cost": "-3"}, "invalid_metric"),
        ({"clicks": float("inf")}, "invalid_metric"),
    ],
)
def test_from_row_rejects_malformed_rows(overrides, reason):
    with pytest.raises(MalformedRecordError) as excinfo:
        DailyRecord.from_row(raw_row(**overrides))
    assert excinfo.value.reason == reason


def test_dates_are_normalized_to_utc_calendar_day():
    assert DailyRecord.from_row(raw_row(date="2024-01-01T23:30:00-03:00")).date == date(2024, 1, 2)
    assert DailyRecord.from_row(raw_row(date="2024-01-01T00:00:00Z")).date == date(2024, 1, 1)
    assert DailyRecord.from_row(raw_row(date="05/02/2024")).date == date(2024, 2, 5)

    aware = datetime(2024, 3, 1, 1, 0, tzinfo=timezone(timedelta(hours=5)))
    assert DailyRecord.from_row(raw_row(date=aware)).date == date(2024, 2, 29)


def test_daily_record_derived_metrics_are_guarded():
    record = DailyRecord.from_row(raw_row(clicks=0, impressions=0, cost=12, conversions=0))
    assert record.ctr == 0.0
    assert record.avg_cpc == 0.0
    assert record.cost_per_conversion == 0.0

    record = DailyRecord.from_row(raw_row())
    assert record.ctr == pytest.approx(10.0)
    assert record.avg_cpc == pytest.approx(5.05)
    assert record.cost_per_conversion == pytest.approx(25.25)


def test_daily_record_to_dict_is_json_friendly():
    payload = DailyRecord.from_row(raw_row()).to_dict()
    assert payload["date"] == "2024-01-01"
    assert payload["ctr"] == pytest.approx(10.0)


def test_with_derived_metrics_uses_totals():
    campaign = AggregatedCampaign("A", "A", "x", clicks=15, impressions=150, cost=75, conversions=2)
    derived = campaign.with_derived_metrics()
    assert derived.ctr == pytest.approx(10.0)
    assert derived.avg_cpc == pytest.approx(5.0)
    assert derived.cost_per_conversion == pytest.approx(37.5)
    assert campaign.ctr == 0.0


def test_filter_spec_from_params_treats_blank_as_unbounded():
    spec = FilterSpec.from_params("", None, None)
    assert spec.date_start is None and spec.date_end is None
    assert spec.name_contains == ""
    assert not spec.is_contradictory


def test_filter_spec_contradictions():
    assert FilterSpec(date(2024, 2, 1), date(2024, 1, 1)).is_contradictory
    assert FilterSpec.from_params("garbage", "2024-01-01").is_contradictory
    assert not FilterSpec(date(2024, 1, 1), date(2024, 1, 1)).is_contradictory


def test_strip_name_prefixes():
    assert strip_name_prefixes("[CS] Youtube - Solar", ["[CS] Youtube - "]) == "Solar"
    assert strip_name_prefixes("Solar", ["[CS] Youtube - "]) == "Solar"


def test_int_beyond_float_range_is_rejected():
    huge = int("1" + "0" * 400)
    with pytest.raises(MalformedRecordError) as excinfo:
        DailyRecord.from_row(raw_row(clicks=huge))
    assert excinfo.value.reason == "invalid_metric"


@pytest.mark.parametrize("value", ["20240105", 20240105])
def test_compact_date_is_accepted(value):
    assert DailyRecord.from_row(raw_row(date=value)).date == date(2024, 1, 5)


def test_compact_date_must_be_a_real_day():
    with pytest.raises(MalformedRecordError):
        DailyRecord.from_row(raw_row(date="20241340"))


def test_view_mappings_are_read_only():
    result = NormalizationResult(records=(), rejected=1, rejection_reasons={"invalid_date": 1})
    with pytest.raises(TypeError):
        result.rejection_reasons["invalid_date"] = 5

    view = DashboardView(
        totals=PeriodTotals(),
        campaigns=(),
        top=(),
        bottom=(),
        daily=(),
        metric_maxima={"cost": 1.0},
        sort_by="cost",
        filtered_records=0,
        rejected_records=0,
    )
    with pytest.raises(TypeError):
        view.metric_maxima["cost"] = 2.0
    assert view.to_dict()["metric_maxima"] == {"cost": 1.0}
