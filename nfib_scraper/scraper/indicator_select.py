"""Driving the NFIB indicators page to a chosen indicator.

The dropdown is set with a real option choice and the results are requested
with a real click. Older page variants only reload the chart in response to
genuine interaction events, so assigning ``select.value`` and dispatching a
synthetic ``change`` event silently leaves the previous data in place.
"""

from __future__ import annotations

import logging
from typing import Sequence

from playwright.async_api import Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from nfib_scraper import config
from nfib_scraper.scraper.errors import (
    ActionControlNotFound,
    ControlNotFound,
    NavigationTimeout,
)

logger = logging.getLogger(__name__)


class IndicatorSelector:
    def __init__(
        self,
        url: str = config.INDICATORS_URL,
        select_selector: str = config.INDICATOR_SELECT_SEL,
        show_selectors: Sequence[str] = config.SHOW_RESULTS_SELECTORS,
        navigation_timeout_ms: int = config.NAVIGATION_TIMEOUT_MS,
        control_timeout_ms: int = config.CONTROL_TIMEOUT_MS,
    ) -> None:
        self.url = url
        self.select_selector = select_selector
        self.show_selectors = tuple(show_selectors)
        self.navigation_timeout_ms = navigation_timeout_ms
        self.control_timeout_ms = control_timeout_ms

    async def select(self, page: Page, code: str) -> None:
        """Load the page, choose ``code`` in the dropdown and press "show results"."""
        await self._goto(page)

        try:
            await page.wait_for_selector(self.select_selector, timeout=self.control_timeout_ms)
        except PlaywrightTimeoutError as exc:
            raise ControlNotFound(
                f"Indicator dropdown {self.select_selector} not found "
                f"after {self.control_timeout_ms}ms"
            ) from exc

        try:
            await page.select_option(
                self.select_selector, value=code, timeout=self.control_timeout_ms
            )
        except PlaywrightTimeoutError as exc:
            raise ControlNotFound(f"Indicator option not found: {code}") from exc

        await self._click_show_results(page)
        logger.debug("Selected indicator %s", code)

    async def _goto(self, page: Page) -> None:
        try:
            await page.goto(
                self.url, wait_until="networkidle", timeout=self.navigation_timeout_ms
            )
        except PlaywrightTimeoutError as exc:
            raise NavigationTimeout(
                f"Timed out loading {self.url} after {self.navigation_timeout_ms}ms"
            ) from exc

    async def _click_show_results(self, page: Page) -> None:
        for selector in self.show_selectors:
            locator = page.locator(selector)
            if await locator.count() == 0:
                continue
            await locator.first.click()
            return
        raise ActionControlNotFound(
            "Show results control not found (tried: " + ", ".join(self.show_selectors) + ")"
        )
