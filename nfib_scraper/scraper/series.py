"""Windowing and lookup helpers for extracted indicator series."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from nfib_scraper.scraper.models import IndicatorSeries, ObservationRecord

# Larger than any series the site will ever plot.
ALL_MONTHS = sys.maxsize


def trim(series: Sequence[ObservationRecord], n: int) -> IndicatorSeries:
    """Return the trailing ``n`` records of ``series`` (all of it when ``n`` exceeds its length)."""
    if n < 0:
        raise ValueError(f"window must be non-negative, got {n}")
    if n == 0:
        return ()
    return tuple(series[-n:])


def find_observation(series: Sequence[ObservationRecord], date: str) -> Optional[ObservationRecord]:
    """Exact match on the site's native date string."""
    for record in series:
        if record.date == date:
            return record
    return None
