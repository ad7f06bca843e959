"""Domain layer package."""

from .models import AggregatedCampaign, DailyRecord, DashboardView, FilterSpec, MalformedRecordError, PeriodTotals

__all__ = ["AggregatedCampaign", "DailyRecord", "DashboardView", "FilterSpec", "MalformedRecordError", "PeriodTotals"]
