"""Campaign dashboard entrypoint."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from time import perf_counter
from typing import Sequence

from campaign_dashboard.application.dashboard_service import summarize_records
from campaign_dashboard.application.normalizer import normalize_records
from campaign_dashboard.application.reporting.rendering import summary_lines
from campaign_dashboard.config import SORTABLE_METRICS
from campaign_dashboard.domain.models import FilterSpec
from campaign_dashboard.infrastructure import load_raw_records, save_dashboard_json, save_dashboard_workbook

logger = logging.getLogger("campaign_dashboard")
LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR")


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Summarize daily ad campaign performance.")
    parser.add_argument("input", type=Path, help="JSON export or Excel sheet of daily campaign rows")
    parser.add_argument("--sheet", default=None, help="Excel sheet name (default: first sheet)")
    parser.add_argument("--start", default=None, help="first day included (YYYY-MM-DD)")
    parser.add_argument("--end", default=None, help="last day included (YYYY-MM-DD)")
    parser.add_argument("--search", default="", help="case-insensitive campaign name filter")
    parser.add_argument("--sort-by", choices=SORTABLE_METRICS, default=None)
    parser.add_argument("--limit", type=int, default=None, help="size of best/worst lists")
    parser.add_argument("--output-json", type=Path, default=None)
    parser.add_argument("--output-excel", type=Path, default=None)
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default="INFO")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr)

    pipeline_start = perf_counter()
    raw_rows = load_raw_records(args.input, sheet_name=args.sheet)
    normalized = normalize_records(raw_rows)
    spec = FilterSpec.from_params(args.start, args.end, args.search)
    if spec.is_contradictory:
        logger.warning("Filter matches nothing: start=%s end=%s", args.start, args.end)
    view = summarize_records(
        normalized.records,
        filter_spec=spec,
        sort_by=args.sort_by,
        limit=args.limit,
        rejected_records=normalized.rejected,
    )
    logger.info("Dashboard built in %.3fs", perf_counter() - pipeline_start)

    for line in summary_lines(view):
        print(line)

    if args.output_json is not None:
        save_dashboard_json(args.output_json, view, normalized.rejection_reasons)
        print(f"Saved JSON: {args.output_json}")
    if args.output_excel is not None:
        excel_saved, excel_error_message = save_dashboard_workbook(args.output_excel, view)
        if excel_saved:
            print(f"Saved Excel: {args.output_excel}")
        else:
            print(f"Excel save skipped (file may be open/locked): {excel_error_message}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
