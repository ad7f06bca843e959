"""Infrastructure layer package."""

from .record_source import load_raw_records
from .report_exporter import build_workbook, save_dashboard_json, save_dashboard_workbook

__all__ = ["load_raw_records", "build_workbook", "save_dashboard_json", "save_dashboard_workbook"]
