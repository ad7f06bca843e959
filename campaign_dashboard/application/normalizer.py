"""Raw row normalization into DailyRecord values."""

from __future__ import annotations

import logging
from collections import Counter
from typing import Any, Iterable, Mapping

from campaign_dashboard import config
from campaign_dashboard.domain.models import DailyRecord, MalformedRecordError, NormalizationResult

logger = logging.getLogger(__name__)


def normalize_record(row: Mapping[str, Any], default_category: str | None = None) -> DailyRecord | None:
    """Return a DailyRecord, or None when the row cannot be used."""
    category = config.DEFAULT_CATEGORY if default_category is None else default_category
    try:
        return DailyRecord.from_row(row, default_category=category)
    except MalformedRecordError:
        return None


def normalize_records(
    rows: Iterable[Mapping[str, Any]],
    default_category: str | None = None,
) -> NormalizationResult:
    category = config.DEFAULT_CATEGORY if default_category is None else default_category
    records: list[DailyRecord] = []
    reasons: Counter[str] = Counter()
    for idx, row in enumerate(rows):
        if not isinstance(row, Mapping):
            reasons["not_a_mapping"] += 1
            logger.debug("Rejected row %d: not a mapping (%s)", idx, type(row).__name__)
            continue
        try:
            records.append(DailyRecord.from_row(row, default_category=category))
        except MalformedRecordError as exc:
            reasons[exc.reason] += 1
            logger.debug("Rejected row %d: %s", idx, exc)

    rejected = sum(reasons.values())
    if rejected:
        logger.warning(
            "Excluded %d of %d raw rows (%s)",
            rejected,
            rejected + len(records),
            ", ".join(f"{reason}={count}" for reason, count in sorted(reasons.items())),
        )
    return NormalizationResult(records=tuple(records), rejected=rejected, rejection_reasons=dict(reasons))
