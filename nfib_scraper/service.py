"""Synchronous scraping facade used by the HTTP layer."""

from __future__ import annotations

import asyncio
import threading
from typing import Optional, Sequence

from nfib_scraper import config
from nfib_scraper.scraper.models import BatchResult, ScrapeResult
from nfib_scraper.scraper.pipeline import IndicatorBatchRunner, IndicatorScraper

# One browser at a time for the whole process, however many requests arrive.
_SCRAPE_LOCK = threading.Lock()


class ScrapeService:
    def __init__(self, scraper: Optional[IndicatorScraper] = None) -> None:
        self.scraper = scraper or IndicatorScraper.default()
        self.runner = IndicatorBatchRunner(self.scraper)

    def scrape(self, code: str, months: int = config.DEFAULT_MONTHS) -> ScrapeResult:
        with _SCRAPE_LOCK:
            return asyncio.run(self.scraper.scrape(code, months))

    def scrape_many(
        self, codes: Sequence[str], months: int = config.DEFAULT_MONTHS
    ) -> BatchResult:
        with _SCRAPE_LOCK:
            return asyncio.run(self.runner.run_all(codes, months))
