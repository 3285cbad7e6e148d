"""CSV output helpers for scraped NFIB series."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import pandas as pd
from dateutil import parser as date_parser

from nfib_scraper import config
from nfib_scraper.scraper.models import ScrapeResult


def _observed_on(raw: Optional[str]) -> Optional[str]:
    if not raw:
        return None
    try:
        return date_parser.parse(str(raw)).date().isoformat()
    except (ValueError, OverflowError):
        return None


def series_frame(result: ScrapeResult) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                "indicator": result.indicator,
                "date": record.date,
                "observed_on": _observed_on(record.date),
                "value": record.value,
            }
            for record in result.data
        ],
        columns=["indicator", "date", "observed_on", "value"],
    )


def save_series_csv(result: ScrapeResult, output_dir: Optional[Path] = None) -> Path:
    """Persist one scraped series, oldest first."""
    output_dir = Path(output_dir or config.OUTPUT_DIR)
    output_dir.mkdir(parents=True, exist_ok=True)

    df = series_frame(result)
    file_name = f"nfib_{result.indicator}_{result.scraped_at.strftime('%Y%m%d')}.csv"
    output_path = output_dir / file_name
    df.to_csv(output_path, index=False)
    return output_path
