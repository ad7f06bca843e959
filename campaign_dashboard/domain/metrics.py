"""Zero-guarded ratio metrics shared by daily records, aggregates and totals."""

from __future__ import annotations


def safe_ratio(num: float, den: float) -> float:
    if den <= 0:
        return 0.0
    return num / den


def ctr(clicks: float, impressions: float) -> float:
    """Click-through rate in percent."""
    return safe_ratio(clicks, impressions) * 100


def avg_cpc(cost: float, clicks: float) -> float:
    return safe_ratio(cost, clicks)


def cost_per_conversion(cost: float, conversions: float) -> float:
    return safe_ratio(cost, conversions)
