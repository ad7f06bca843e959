"""Campaign performance dashboard core."""

from .application import build_dashboard, summarize_records
from .domain import AggregatedCampaign, DailyRecord, DashboardView, FilterSpec, PeriodTotals
from .infrastructure import load_raw_records

__all__ = [
    "AggregatedCampaign",
    "DailyRecord",
    "DashboardView",
    "FilterSpec",
    "PeriodTotals",
    "build_dashboard",
    "summarize_records",
    "load_raw_records",
]
