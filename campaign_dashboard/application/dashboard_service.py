"""Application service composing the dashboard views for one parameter set."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Sequence

from campaign_dashboard import config
from campaign_dashboard.application.aggregation import aggregate_campaigns
from campaign_dashboard.application.filtering import daily_details, filter_records
from campaign_dashboard.application.normalizer import normalize_records
from campaign_dashboard.application.ranking import metric_maxima, rank_by_efficiency, sort_campaigns
from campaign_dashboard.application.totals import compute_totals
from campaign_dashboard.domain.models import DailyRecord, DashboardView, FilterSpec

logger = logging.getLogger(__name__)


def summarize_records(
    records: Sequence[DailyRecord],
    filter_spec: FilterSpec | None = None,
    sort_by: str | None = None,
    limit: int | None = None,
    rejected_records: int = 0,
) -> DashboardView:
    """Build every view from already-normalized records."""
    metric = config.DEFAULT_SORT if sort_by is None else sort_by
    filtered = filter_records(records, filter_spec)
    aggregated = list(aggregate_campaigns(filtered).values())
    campaigns = sort_campaigns(aggregated, metric)
    top, bottom = rank_by_efficiency(campaigns, limit=limit)
    logger.debug(
        "Dashboard recomputed: records=%d filtered=%d campaigns=%d ranked=%d",
        len(records),
        len(filtered),
        len(campaigns),
        len(top),
    )
    return DashboardView(
        totals=compute_totals(campaigns),
        campaigns=tuple(campaigns),
        top=tuple(top),
        bottom=tuple(bottom),
        daily=daily_details(filtered),
        metric_maxima=metric_maxima(campaigns),
        sort_by=metric.strip().lower(),
        filtered_records=len(filtered),
        rejected_records=rejected_records,
    )


def build_dashboard(
    raw_rows: Iterable[Mapping[str, Any]],
    filter_spec: FilterSpec | None = None,
    sort_by: str | None = None,
    limit: int | None = None,
) -> DashboardView:
    """Normalize a raw snapshot and build every view for the given parameters."""
    normalized = normalize_records(raw_rows)
    return summarize_records(
        normalized.records,
        filter_spec=filter_spec,
        sort_by=sort_by,
        limit=limit,
        rejected_records=normalized.rejected,
    )
