"""Domain models for campaign performance rollups."""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass, field
from datetime import date, datetime, timezone
from types import MappingProxyType
from typing import Any, Mapping, Sequence

from campaign_dashboard.domain.metrics import avg_cpc, cost_per_conversion, ctr

NAME_FIELDS: tuple[str, ...] = ("campaign_name", "name", "campaign")
ID_FIELDS: tuple[str, ...] = ("id", "campaign_id")
CATEGORY_FIELDS: tuple[str, ...] = ("category", "type", "campaign_type")
METRIC_FIELDS: tuple[str, ...] = ("clicks", "impressions", "cost", "conversions")
DAY_FIRST_FORMATS: tuple[str, ...] = ("%d/%m/%Y", "%d/%m/%Y %H:%M:%S")
COMPACT_DAY_FORMAT = "%Y%m%d"


class MalformedRecordError(ValueError):
    """Raised when a raw row cannot become a DailyRecord."""

    def __init__(self, reason: str, detail: str = "") -> None:
        self.reason = reason
        super().__init__(f"{reason}: {detail}" if detail else reason)


def _first_present(row: Mapping[str, Any], keys: Sequence[str]) -> Any:
    for key in keys:
        value = row.get(key)
        if value is not None and str(value).strip() != "":
            return value
    return None


def _to_metric(value: Any) -> float:
    """Coerce a loosely typed metric to float; unparsable values become 0.0."""
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            # ints beyond float range
            return math.inf
    else:
        text = str(value).strip().replace(",", "")
        if not text:
            return 0.0
        try:
            number = float(text)
        except ValueError:
            return 0.0
    if math.isnan(number):
        return 0.0
    return number


def _to_calendar_day(value: Any) -> date | None:
    """Parse a calendar day, converting aware timestamps to UTC first.

    Accepts date/datetime objects, ISO text (including the compact YYYYMMDD
    form ad platform exports use for date segments) and DD/MM/YYYY.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    if isinstance(value, date):
        return value

    text = str(value).strip()
    if not text:
        return None
    if len(text) == 10:
        try:
            return date.fromisoformat(text)
        except ValueError:
            pass
    if len(text) == 8 and text.isdigit():
        try:
            return datetime.strptime(text, COMPACT_DAY_FORMAT).date()
        except ValueError:
            return None
    iso_text = text[:-1] + "+00:00" if text.endswith(("Z", "z")) else text
    try:
        return _to_calendar_day(datetime.fromisoformat(iso_text))
    except ValueError:
        pass
    for fmt in DAY_FIRST_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return None


def strip_name_prefixes(name: str, prefixes: Sequence[str]) -> str:
    for prefix in prefixes:
        if prefix and name.startswith(prefix):
            return name[len(prefix):]
    return name


@dataclass(frozen=True)
class DailyRecord:
    """One campaign on one calendar day."""

    campaign_id: str
    campaign_key: str
    name: str
    category: str
    date: date
    clicks: float
    impressions: float
    cost: float
    conversions: float

    @classmethod
    def from_row(cls, row: Mapping[str, Any], default_category: str = "") -> "DailyRecord":
        name_value = _first_present(row, NAME_FIELDS)
        if name_value is None:
            raise MalformedRecordError("missing_name")
        name = str(name_value).strip()

        day = _to_calendar_day(row.get("date"))
        if day is None:
            raise MalformedRecordError("invalid_date", repr(row.get("date")))

        metrics: dict[str, float] = {}
        for metric in METRIC_FIELDS:
            number = _to_metric(row.get(metric))
            if number < 0 or math.isinf(number):
                raise MalformedRecordError("invalid_metric", f"{metric}={row.get(metric)!r}")
            metrics[metric] = number

        campaign_id = _first_present(row, ID_FIELDS)
        category = _first_present(row, CATEGORY_FIELDS)
        return cls(
            campaign_id="" if campaign_id is None else str(campaign_id),
            campaign_key=name,
            name=name,
            category=default_category if category is None else str(category).strip(),
            date=day,
            **metrics,
        )

    @property
    def ctr(self) -> float:
        return ctr(self.clicks, self.impressions)

    @property
    def avg_cpc(self) -> float:
        return avg_cpc(self.cost, self.clicks)

    @property
    def cost_per_conversion(self) -> float:
        return cost_per_conversion(self.cost, self.conversions)

    def to_dict(self) -> dict[str, Any]:
        payload = asdict(self)
        payload["date"] = self.date.isoformat()
        payload["ctr"] = self.ctr
        payload["avg_cpc"] = self.avg_cpc
        payload["cost_per_conversion"] = self.cost_per_conversion
        return payload


@dataclass(frozen=True)
class AggregatedCampaign:
    campaign_key: str
    display_name: str
    category: str
    clicks: float
    impressions: float
    cost: float
    conversions: float
    ctr: float = 0.0
    avg_cpc: float = 0.0
    cost_per_conversion: float = 0.0

    def with_derived_metrics(self) -> "AggregatedCampaign":
        """Recompute ratio metrics from this aggregate's own totals."""
        return AggregatedCampaign(
            campaign_key=self.campaign_key,
            display_name=self.display_name,
            category=self.category,
            clicks=self.clicks,
            impressions=self.impressions,
            cost=self.cost,
            conversions=self.conversions,
            ctr=ctr(self.clicks, self.impressions),
            avg_cpc=avg_cpc(self.cost, self.clicks),
            cost_per_conversion=cost_per_conversion(self.cost, self.conversions),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class FilterSpec:
    """Date range and name filter. An invalid spec matches nothing."""

    date_start: date | None = None
    date_end: date | None = None
    name_contains: str = ""
    is_valid: bool = True

    @classmethod
    def from_params(cls, start: Any = None, end: Any = None, search: Any = None) -> "FilterSpec":
        is_valid = True
        bounds: list[date | None] = []
        for raw in (start, end):
            if raw is None or str(raw).strip() == "":
                bounds.append(None)
                continue
            day = _to_calendar_day(raw)
            if day is None:
                is_valid = False
            bounds.append(day)
        return cls(
            date_start=bounds[0],
            date_end=bounds[1],
            name_contains="" if search is None else str(search),
            is_valid=is_valid,
        )

    @property
    def is_contradictory(self) -> bool:
        if not self.is_valid:
            return True
        if self.date_start is None or self.date_end is None:
            return False
        return self.date_start > self.date_end


@dataclass(frozen=True)
class PeriodTotals:
    clicks: float = 0.0
    impressions: float = 0.0
    cost: float = 0.0
    conversions: float = 0.0
    ctr: float = 0.0
    cost_per_conversion: float = 0.0
    avg_cpc: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class NormalizationResult:
    records: tuple[DailyRecord, ...]
    rejected: int = 0
    rejection_reasons: Mapping[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "rejection_reasons", MappingProxyType(dict(self.rejection_reasons)))


@dataclass(frozen=True)
class DashboardView:
    """Everything a view layer needs for one parameter set."""

    totals: PeriodTotals
    campaigns: tuple[AggregatedCampaign, ...]
    top: tuple[AggregatedCampaign, ...]
    bottom: tuple[AggregatedCampaign, ...]
    daily: tuple[DailyRecord, ...]
    metric_maxima: Mapping[str, float]
    sort_by: str
    filtered_records: int
    rejected_records: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "metric_maxima", MappingProxyType(dict(self.metric_maxima)))

    def to_dict(self) -> dict[str, Any]:
        return {
            "sort_by": self.sort_by,
            "filtered_records": self.filtered_records,
            "rejected_records": self.rejected_records,
            "totals": self.totals.to_dict(),
            "campaigns": [campaign.to_dict() for campaign in self.campaigns],
            "top": [campaign.to_dict() for campaign in self.top],
            "bottom": [campaign.to_dict() for campaign in self.bottom],
            "daily": [record.to_dict() for record in self.daily],
            "metric_maxima": dict(self.metric_maxima),
        }
