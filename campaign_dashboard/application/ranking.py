"""Ordering and efficiency selection over campaign aggregates."""

from __future__ import annotations

from typing import Iterable, Sequence

from campaign_dashboard import config
from campaign_dashboard.config import SORTABLE_METRICS
from campaign_dashboard.domain.models import AggregatedCampaign


def _check_metric(metric: str) -> str:
    key = str(metric or "").strip().lower()
    if key not in SORTABLE_METRICS:
        raise ValueError(f"sort metric must be one of {list(SORTABLE_METRICS)}, got {metric!r}")
    return key


def sort_campaigns(campaigns: Iterable[AggregatedCampaign], metric: str = "cost") -> list[AggregatedCampaign]:
    """Descending by metric; equal values keep their input order."""
    key = _check_metric(metric)
    return sorted(campaigns, key=lambda campaign: -getattr(campaign, key))


def rank_by_efficiency(
    campaigns: Iterable[AggregatedCampaign],
    limit: int | None = None,
) -> tuple[list[AggregatedCampaign], list[AggregatedCampaign]]:
    """Return (lowest cost/conversion, highest cost/conversion) among converting campaigns."""
    size = config.RANK_LIMIT if limit is None else limit
    if size <= 0:
        return [], []

    converting = [campaign for campaign in campaigns if campaign.conversions > 0]
    top = sorted(converting, key=lambda campaign: campaign.cost_per_conversion)
    bottom = sorted(converting, key=lambda campaign: -campaign.cost_per_conversion)
    return top[:size], bottom[:size]


def metric_maxima(campaigns: Sequence[AggregatedCampaign]) -> dict[str, float]:
    return {
        metric: max((float(getattr(campaign, metric)) for campaign in campaigns), default=0.0)
        for metric in SORTABLE_METRICS
    }
