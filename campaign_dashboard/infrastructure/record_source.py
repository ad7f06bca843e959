"""Infrastructure adapter reading raw campaign snapshots from disk."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from openpyxl import load_workbook

EXCEL_SUFFIXES: tuple[str, ...] = (".xlsx", ".xlsm")


def _field_name(header: Any) -> str:
    """'Campaign Name' -> 'campaign_name', so sheet headers match API field names."""
    if header is None:
        return ""
    return "_".join(str(header).strip().lower().split())


def _read_json(path: Path) -> list[Any]:
    payload = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(payload, dict):
        payload = payload.get("data")
    if not isinstance(payload, list):
        raise ValueError(f"Expected a list of records (or an object with 'data') in {path}")
    return payload


def _read_excel(path: Path, sheet_name: str | None) -> list[dict[str, Any]]:
    workbook = load_workbook(path, read_only=True, data_only=True)
    try:
        title = sheet_name if sheet_name in workbook.sheetnames else workbook.sheetnames[0]
        rows = workbook[title].iter_rows(values_only=True)
        fields = [_field_name(header) for header in next(rows, ())]

        records: list[dict[str, Any]] = []
        for values in rows:
            if not any(value is not None for value in values):
                continue
            record: dict[str, Any] = {}
            # blank headers are dropped; a repeated header keeps its first column
            for name, value in zip(fields, values):
                if name and name not in record:
                    record[name] = value
            records.append(record)
        return records
    finally:
        workbook.close()


def load_raw_records(path: str | Path, sheet_name: str | None = None) -> list[Any]:
    """Read a JSON export or Excel sheet of raw daily campaign rows."""
    source = Path(path)
    if not source.exists():
        raise FileNotFoundError(f"Input file not found: {source}")
    if source.suffix.lower() in EXCEL_SUFFIXES:
        return _read_excel(source, sheet_name)
    return _read_json(source)
