"""Polars frame construction for daily records."""

from __future__ import annotations

from typing import Sequence

import polars as pl

from campaign_dashboard.domain.models import METRIC_FIELDS, DailyRecord

ROW_INDEX = "__row"
RECORD_SCHEMA: dict[str, pl.DataType] = {
    ROW_INDEX: pl.Int64,
    "campaign_key": pl.Utf8,
    "name": pl.Utf8,
    "category": pl.Utf8,
    "date": pl.Date,
    "clicks": pl.Float64,
    "impressions": pl.Float64,
    "cost": pl.Float64,
    "conversions": pl.Float64,
}


def records_frame(records: Sequence[DailyRecord]) -> pl.DataFrame:
    data: dict[str, list] = {
        ROW_INDEX: list(range(len(records))),
        "campaign_key": [record.campaign_key for record in records],
        "name": [record.name for record in records],
        "category": [record.category for record in records],
        "date": [record.date for record in records],
    }
    for metric in METRIC_FIELDS:
        data[metric] = [getattr(record, metric) for record in records]
    return pl.DataFrame(data, schema=RECORD_SCHEMA)
