"""Date-range and campaign-name filtering over daily records."""

from __future__ import annotations

from typing import Sequence

import polars as pl

from campaign_dashboard.application.frames import ROW_INDEX, records_frame
from campaign_dashboard.domain.models import DailyRecord, FilterSpec


def filter_expr(spec: FilterSpec) -> pl.Expr:
    expr = pl.lit(True)
    if spec.date_start is not None:
        expr = expr & (pl.col("date") >= pl.lit(spec.date_start))
    if spec.date_end is not None:
        expr = expr & (pl.col("date") <= pl.lit(spec.date_end))
    if spec.name_contains:
        needle = spec.name_contains.lower()
        expr = expr & pl.col("name").str.to_lowercase().str.contains(needle, literal=True)
    return expr


def filter_records(records: Sequence[DailyRecord], spec: FilterSpec | None = None) -> tuple[DailyRecord, ...]:
    """Keep records inside the spec's window whose name contains the search text.

    Input order is preserved. A contradictory or unparsable spec matches nothing.
    """
    if spec is None:
        return tuple(records)
    if not records or spec.is_contradictory:
        return ()

    kept = records_frame(records).filter(filter_expr(spec)).get_column(ROW_INDEX).to_list()
    return tuple(records[idx] for idx in kept)


def daily_details(records: Sequence[DailyRecord]) -> tuple[DailyRecord, ...]:
    """Newest day first; rows of the same day keep their input order."""
    return tuple(sorted(records, key=lambda record: record.date, reverse=True))
