"""Shared data models for the NFIB indicator scraper."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Optional, Tuple, Union

import pytz

Value = Union[str, int, float, None]


@dataclass(frozen=True, slots=True)
class ObservationRecord:
    """One plotted chart point. Records compare equal when their dates match."""

    date: str
    value: Value = field(compare=False)

    def to_dict(self) -> dict:
        return {"date": self.date, "value": self.value}


IndicatorSeries = Tuple[ObservationRecord, ...]


def utc_now() -> datetime:
    return datetime.now(pytz.utc)


@dataclass(frozen=True, slots=True)
class ScrapeResult:
    """Outcome of one successful scrape."""

    indicator: str
    data: IndicatorSeries
    scraped_at: datetime = field(default_factory=utc_now)

    def to_dict(self) -> dict:
        return {
            "indicator": self.indicator,
            "data": [record.to_dict() for record in self.data],
            "scraped_at": self.scraped_at.isoformat(),
        }


@dataclass(frozen=True, slots=True)
class ScrapeFailure:
    """Error entry recorded for an indicator inside a batch."""

    indicator: str
    error: str
    error_type: Optional[str] = None

    def to_dict(self) -> dict:
        return {"error": self.error, "error_type": self.error_type}


BatchResult = Dict[str, Union[ScrapeResult, ScrapeFailure]]


def batch_to_dict(results: BatchResult) -> dict:
    return {code: entry.to_dict() for code, entry in results.items()}
