"""Application layer package."""

from .dashboard_service import build_dashboard, summarize_records

__all__ = ["build_dashboard", "summarize_records"]
