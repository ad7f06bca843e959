"""Period-wide totals over the current aggregate set."""

from __future__ import annotations

import math
from typing import Iterable

from campaign_dashboard.domain.metrics import avg_cpc, cost_per_conversion, ctr
from campaign_dashboard.domain.models import AggregatedCampaign, PeriodTotals


def compute_totals(campaigns: Iterable[AggregatedCampaign]) -> PeriodTotals:
    items = list(campaigns)
    clicks = math.fsum(campaign.clicks for campaign in items)
    impressions = math.fsum(campaign.impressions for campaign in items)
    cost = math.fsum(campaign.cost for campaign in items)
    conversions = math.fsum(campaign.conversions for campaign in items)
    return PeriodTotals(
        clicks=clicks,
        impressions=impressions,
        cost=cost,
        conversions=conversions,
        ctr=ctr(clicks, impressions),
        cost_per_conversion=cost_per_conversion(cost, conversions),
        avg_cpc=avg_cpc(cost, clicks),
    )
