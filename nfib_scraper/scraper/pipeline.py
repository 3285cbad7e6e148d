"""Single-indicator scrape pipeline and the sequential batch runner."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from playwright.async_api import Error as PlaywrightError

from nfib_scraper import config
from nfib_scraper.scraper.chart_extract import ChartExtractor
from nfib_scraper.scraper.errors import ScrapeFailed, ScraperError
from nfib_scraper.scraper.indicator_select import IndicatorSelector
from nfib_scraper.scraper.models import BatchResult, ScrapeFailure, ScrapeResult
from nfib_scraper.scraper.playwright_driver import PageSession
from nfib_scraper.scraper.readiness import ReadinessWaiter, TimeoutPolicy
from nfib_scraper.scraper.series import trim

logger = logging.getLogger(__name__)


class IndicatorScraper:
    """Runs open -> select -> wait -> extract -> trim -> close for one indicator."""

    def __init__(
        self,
        sessions: PageSession,
        selector: IndicatorSelector,
        waiter: ReadinessWaiter,
        extractor: ChartExtractor,
        executable_path: Optional[str] = None,
    ) -> None:
        self.sessions = sessions
        self.selector = selector
        self.waiter = waiter
        self.extractor = extractor
        self.executable_path = executable_path

    @classmethod
    def default(cls, executable_path: Optional[str] = None) -> "IndicatorScraper":
        extractor = ChartExtractor()
        return cls(
            sessions=PageSession(),
            selector=IndicatorSelector(),
            waiter=ReadinessWaiter(extractor.has_fresh_data, TimeoutPolicy.default()),
            extractor=extractor,
            executable_path=executable_path or config.CHROME_EXECUTABLE_PATH,
        )

    async def scrape(self, code: str, months: int = config.DEFAULT_MONTHS) -> ScrapeResult:
        logger.info("Scraping %s (last %s points)", code, months)
        try:
            handle = await self.sessions.open(self.executable_path)
            try:
                await self.selector.select(handle.page, code)
                await self.waiter.wait_until_ready(handle.page, code)
                series = await self.extractor.extract(handle.page)
            finally:
                await self.sessions.close(handle)
        except (ScraperError, PlaywrightError) as exc:
            logger.warning("Scrape of %s failed: %s", code, exc)
            raise ScrapeFailed(code, exc) from exc
        except Exception as exc:
            logger.exception("Unexpected error scraping %s", code)
            raise ScrapeFailed(code, exc) from exc

        result = ScrapeResult(indicator=code, data=trim(series, months))
        logger.info("Scraped %s: %d data points", code, len(result.data))
        return result


class IndicatorBatchRunner:
    """Scrapes indicators strictly one after another.

    The upstream site cannot cope with concurrent automated sessions, so codes
    are never scraped in parallel. A failing code is recorded and the batch
    moves on.
    """

    def __init__(self, scraper: IndicatorScraper) -> None:
        self.scraper = scraper

    async def run_all(
        self, codes: Iterable[str], months: int = config.DEFAULT_MONTHS
    ) -> BatchResult:
        results: BatchResult = {}
        for code in dict.fromkeys(codes):
            try:
                results[code] = await self.scraper.scrape(code, months)
            except ScrapeFailed as exc:
                results[code] = ScrapeFailure(
                    indicator=code, error=str(exc), error_type=exc.error_type
                )
            except Exception as exc:
                logger.exception("Batch entry %s failed", code)
                results[code] = ScrapeFailure(
                    indicator=code, error=str(exc), error_type=type(exc).__name__
                )
        failed = sum(isinstance(entry, ScrapeFailure) for entry in results.values())
        logger.info("Batch finished: %d ok, %d failed", len(results) - failed, failed)
        return results
