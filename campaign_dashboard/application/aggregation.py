"""Per-campaign rollup of filtered daily records."""

from __future__ import annotations

from typing import Sequence

import polars as pl

from campaign_dashboard import config
from campaign_dashboard.application.frames import records_frame
from campaign_dashboard.domain.models import METRIC_FIELDS, AggregatedCampaign, DailyRecord, strip_name_prefixes


def aggregate_campaigns(
    records: Sequence[DailyRecord],
    name_prefixes: Sequence[str] | None = None,
) -> dict[str, AggregatedCampaign]:
    """Sum additive metrics by campaign key, then derive ratios from the sums.

    Keys keep first-appearance order. Name and category come from the first
    contributing record.
    """
    if not records:
        return {}
    prefixes = config.NAME_PREFIXES if name_prefixes is None else tuple(name_prefixes)

    grouped = (
        records_frame(records)
        .group_by("campaign_key", maintain_order=True)
        .agg(
            pl.col("name").first(),
            pl.col("category").first(),
            *[pl.col(metric).sum() for metric in METRIC_FIELDS],
        )
    )

    aggregated: dict[str, AggregatedCampaign] = {}
    for row in grouped.iter_rows(named=True):
        key = str(row["campaign_key"])
        aggregated[key] = AggregatedCampaign(
            campaign_key=key,
            display_name=strip_name_prefixes(str(row["name"]), prefixes),
            category=str(row["category"]),
            clicks=float(row["clicks"]),
            impressions=float(row["impressions"]),
            cost=float(row["cost"]),
            conversions=float(row["conversions"]),
        ).with_derived_metrics()
    return aggregated
