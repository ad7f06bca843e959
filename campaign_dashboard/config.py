"""Environment-driven settings for the dashboard pipeline."""

from __future__ import annotations

import os

SORTABLE_METRICS: tuple[str, ...] = ("cost", "conversions", "clicks", "impressions")


def _parse_rank_limit() -> int:
    raw = os.getenv("CAMPAIGN_DASHBOARD_RANK_LIMIT", "5")
    try:
        limit = int(raw)
    except ValueError as exc:
        raise ValueError(f"Invalid CAMPAIGN_DASHBOARD_RANK_LIMIT: {raw}") from exc
    if limit < 0:
        raise ValueError(f"CAMPAIGN_DASHBOARD_RANK_LIMIT must be >= 0, got {limit}")
    return limit


def _parse_default_sort() -> str:
    raw = os.getenv("CAMPAIGN_DASHBOARD_DEFAULT_SORT", "cost").strip().lower()
    if raw not in SORTABLE_METRICS:
        raise ValueError(f"CAMPAIGN_DASHBOARD_DEFAULT_SORT must be one of {list(SORTABLE_METRICS)}, got {raw!r}")
    return raw


def _parse_name_prefixes() -> tuple[str, ...]:
    raw = os.getenv("CAMPAIGN_DASHBOARD_NAME_PREFIXES", "[CS] Youtube - ")
    return tuple(prefix for prefix in raw.split("|") if prefix)


RANK_LIMIT = _parse_rank_limit()
DEFAULT_SORT = _parse_default_sort()
DEFAULT_CATEGORY = os.getenv("CAMPAIGN_DASHBOARD_DEFAULT_CATEGORY", "Demand generation")
NAME_PREFIXES = _parse_name_prefixes()
