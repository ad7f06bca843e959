"""Infrastructure adapter writing a DashboardView to JSON and Excel."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping, Sequence

from openpyxl import Workbook

from campaign_dashboard.domain.models import DashboardView

MONEY_FORMAT = '"R$" #,##0.00'
COUNT_FORMAT = "#,##0"
DECIMAL_FORMAT = "#,##0.00"
# ctr is stored in percent units already, so no 0.00% scaling
PERCENT_FORMAT = '0.00"%"'
DATE_FORMAT = "yyyy-mm-dd"

# (header, attribute, number format)
Column = tuple[str, str, str | None]

CAMPAIGN_COLUMNS: tuple[Column, ...] = (
    ("Campaign", "display_name", None),
    ("Category", "category", None),
    ("Impressions", "impressions", COUNT_FORMAT),
    ("Clicks", "clicks", COUNT_FORMAT),
    ("Conversions", "conversions", DECIMAL_FORMAT),
    ("Cost", "cost", MONEY_FORMAT),
    ("CTR", "ctr", PERCENT_FORMAT),
    ("Avg CPC", "avg_cpc", MONEY_FORMAT),
    ("Cost/Conv", "cost_per_conversion", MONEY_FORMAT),
)
DAILY_COLUMNS: tuple[Column, ...] = (
    ("Date", "date", DATE_FORMAT),
    ("Campaign", "name", None),
    ("Impressions", "impressions", COUNT_FORMAT),
    ("Clicks", "clicks", COUNT_FORMAT),
    ("Conversions", "conversions", DECIMAL_FORMAT),
    ("Cost", "cost", MONEY_FORMAT),
    ("Avg CPC", "avg_cpc", MONEY_FORMAT),
    ("Cost/Conv", "cost_per_conversion", MONEY_FORMAT),
)
TOTAL_ROWS: tuple[Column, ...] = (
    ("Impressions", "impressions", COUNT_FORMAT),
    ("Clicks", "clicks", COUNT_FORMAT),
    ("Conversions", "conversions", DECIMAL_FORMAT),
    ("Cost", "cost", MONEY_FORMAT),
    ("CTR", "ctr", PERCENT_FORMAT),
    ("Avg CPC", "avg_cpc", MONEY_FORMAT),
    ("Cost/Conv", "cost_per_conversion", MONEY_FORMAT),
)


def _append_table(workbook: Workbook, title: str, columns: Sequence[Column], items: Sequence[Any]) -> None:
    worksheet = workbook.create_sheet(title=title)
    worksheet.append([header for header, _, _ in columns])
    for item in items:
        worksheet.append([getattr(item, attribute) for _, attribute, _ in columns])
    for col_idx, (_, _, number_format) in enumerate(columns, start=1):
        if number_format is None:
            continue
        for (cell,) in worksheet.iter_rows(min_row=2, min_col=col_idx, max_col=col_idx):
            cell.number_format = number_format
    worksheet.freeze_panes = "A2"


def build_workbook(view: DashboardView) -> Workbook:
    """One sheet per dashboard block: totals, campaigns, best, worst, daily."""
    workbook = Workbook()
    totals_sheet = workbook.active
    totals_sheet.title = "totals"
    totals_sheet.append(["Metric", "Value"])
    for label, attribute, number_format in TOTAL_ROWS:
        totals_sheet.append([label, getattr(view.totals, attribute)])
        totals_sheet.cell(row=totals_sheet.max_row, column=2).number_format = number_format

    _append_table(workbook, "campaigns", CAMPAIGN_COLUMNS, view.campaigns)
    _append_table(workbook, "top", CAMPAIGN_COLUMNS, view.top)
    _append_table(workbook, "bottom", CAMPAIGN_COLUMNS, view.bottom)
    _append_table(workbook, "daily", DAILY_COLUMNS, view.daily)
    return workbook


def save_dashboard_workbook(path: Path, view: DashboardView) -> tuple[bool, str]:
    """Save the workbook; a locked target file is reported rather than raised."""
    path.parent.mkdir(parents=True, exist_ok=True)
    try:
        build_workbook(view).save(path)
    except PermissionError as exc:
        return False, str(exc)
    return True, ""


def save_dashboard_json(
    path: Path,
    view: DashboardView,
    rejection_reasons: Mapping[str, int] | None = None,
) -> None:
    payload = view.to_dict()
    payload["rejection_reasons"] = dict(rejection_reasons or {})
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
