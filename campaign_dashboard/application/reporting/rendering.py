"""Plain-text rendering of a DashboardView."""

from __future__ import annotations

from typing import List, Sequence

from campaign_dashboard.application.reporting.formatting import fmt_money, fmt_number, fmt_pct
from campaign_dashboard.domain.models import AggregatedCampaign, DashboardView


def totals_comment(view: DashboardView) -> str:
    totals = view.totals
    return (
        f"Impressions {fmt_number(totals.impressions)}, clicks {fmt_number(totals.clicks)}, "
        f"cost {fmt_money(totals.cost)}, conversions {fmt_number(totals.conversions)}. "
        f"CTR {fmt_pct(totals.ctr)}, CPC {fmt_money(totals.avg_cpc)}, "
        f"cost/conv {fmt_money(totals.cost_per_conversion)}."
    )


def ranking_comment(label: str, campaigns: Sequence[AggregatedCampaign]) -> str:
    if not campaigns:
        return f"{label}: no campaign with conversions in the period."

    lines: List[str] = []
    for idx, campaign in enumerate(campaigns, start=1):
        lines.append(f"{idx}) {campaign.display_name} {fmt_money(campaign.cost_per_conversion)}")
    return f"{label}: " + " | ".join(lines)


def summary_lines(view: DashboardView) -> list[str]:
    lines = [
        f"Records: filtered={view.filtered_records}, rejected={view.rejected_records}, "
        f"campaigns={len(view.campaigns)}",
        totals_comment(view),
        f"Campaigns by {view.sort_by}:",
    ]
    for campaign in view.campaigns:
        value = getattr(campaign, view.sort_by)
        shown = fmt_money(value) if view.sort_by == "cost" else fmt_number(value)
        lines.append(f"  {campaign.display_name}: {shown}")
    lines.append(ranking_comment("Best cost/conv", view.top))
    lines.append(ranking_comment("Worst cost/conv", view.bottom))
    return lines
