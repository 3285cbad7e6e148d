"""Unit tests for driving the indicator dropdown and the show-results control."""

from __future__ import annotations

from typing import List, Optional, Set

import pytest
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from nfib_scraper import config
from nfib_scraper.scraper.errors import (
    ActionControlNotFound,
    ControlNotFound,
    NavigationTimeout,
)
from nfib_scraper.scraper.indicator_select import IndicatorSelector


class FakeLocator:
    def __init__(self, page: "FakeSelectPage", selector: str) -> None:
        self.page = page
        self.selector = selector

    async def count(self) -> int:
        return 1 if self.selector in self.page.present else 0

    @property
    def first(self) -> "FakeLocator":
        return self

    async def click(self) -> None:
        self.page.actions.append(("click", self.selector))


class FakeSelectPage:
    def __init__(
        self,
        present: Optional[Set[str]] = None,
        options: Optional[Set[str]] = None,
        slow_goto: bool = False,
    ) -> None:
        self.present = present if present is not None else {
            config.INDICATOR_SELECT_SEL,
            config.SHOW_RESULTS_SELECTORS[0],
        }
        self.options = options if options is not None else {"OPT_INDEX", "expand_good"}
        self.slow_goto = slow_goto
        self.actions: List[tuple] = []

    async def goto(self, url, wait_until=None, timeout=None):
        self.actions.append(("goto", url, wait_until, timeout))
        if self.slow_goto:
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded.")

    async def wait_for_selector(self, selector, timeout=None):
        self.actions.append(("wait_for_selector", selector, timeout))
        if selector not in self.present:
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded.")

    async def select_option(self, selector, value=None, timeout=None):
        if value not in self.options:
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded.")
        self.actions.append(("select_option", selector, value))

    def locator(self, selector):
        return FakeLocator(self, selector)

    async def evaluate(self, *args, **kwargs):
        raise AssertionError("selection must not go through page scripts")


@pytest.mark.unit
class TestIndicatorSelector:
    @pytest.mark.asyncio
    async def test_real_interaction_sequence(self) -> None:
        page = FakeSelectPage()

        await IndicatorSelector().select(page, "expand_good")

        assert page.actions == [
            ("goto", config.INDICATORS_URL, "networkidle", 60_000),
            ("wait_for_selector", "#indicators1", 30_000),
            ("select_option", "#indicators1", "expand_good"),
            ("click", config.SHOW_RESULTS_SELECTORS[0]),
        ]

    @pytest.mark.asyncio
    async def test_later_show_selector_used_when_first_missing(self) -> None:
        fallback = config.SHOW_RESULTS_SELECTORS[-1]
        page = FakeSelectPage(present={config.INDICATOR_SELECT_SEL, fallback})

        await IndicatorSelector().select(page, "OPT_INDEX")

        assert page.actions[-1] == ("click", fallback)

    @pytest.mark.asyncio
    async def test_navigation_timeout(self) -> None:
        with pytest.raises(NavigationTimeout):
            await IndicatorSelector().select(FakeSelectPage(slow_goto=True), "OPT_INDEX")

    @pytest.mark.asyncio
    async def test_missing_dropdown(self) -> None:
        page = FakeSelectPage(present=set())
        with pytest.raises(ControlNotFound):
            await IndicatorSelector().select(page, "OPT_INDEX")

    @pytest.mark.asyncio
    async def test_unknown_indicator_fails_at_selection(self) -> None:
        page = FakeSelectPage()
        with pytest.raises(ControlNotFound, match="not_a_code"):
            await IndicatorSelector().select(page, "not_a_code")
        assert not any(action[0] == "click" for action in page.actions)

    @pytest.mark.asyncio
    async def test_missing_show_results_control(self) -> None:
        page = FakeSelectPage(present={config.INDICATOR_SELECT_SEL})
        with pytest.raises(ActionControlNotFound):
            await IndicatorSelector().select(page, "OPT_INDEX")
