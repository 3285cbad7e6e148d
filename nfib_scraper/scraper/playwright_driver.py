"""Launching and tearing down the Playwright browser used for one scrape."""

from __future__ import annotations

import asyncio
import logging
import os
from contextlib import asynccontextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import AsyncIterator, Iterable, Optional

from playwright.async_api import Browser, BrowserContext, Page, Playwright, async_playwright
from playwright.async_api import Error as PlaywrightError

from nfib_scraper import config
from nfib_scraper.scraper.errors import BrowserUnavailable

logger = logging.getLogger(__name__)


@dataclass
class SessionHandle:
    playwright: Playwright
    browser: Browser
    context: BrowserContext
    page: Page
    closed: bool = False


def find_cached_executable(
    cache_dir: Path,
    names: Iterable[str] = config.BROWSER_EXECUTABLE_NAMES,
) -> Optional[Path]:
    """Search a browser cache directory for the first executable named like Chrome."""
    if not cache_dir.is_dir():
        return None
    wanted = set(names)
    for candidate in sorted(cache_dir.rglob("*")):
        if candidate.name in wanted and candidate.is_file() and os.access(candidate, os.X_OK):
            return candidate
    return None


def resolve_executable(
    override: Optional[str] = None,
    *,
    hosted: Optional[bool] = None,
    cache_dir: Optional[Path] = None,
) -> Optional[str]:
    """Return the browser binary to launch, or ``None`` for Playwright's bundled one."""
    if override:
        if not Path(override).is_file():
            raise BrowserUnavailable(f"Browser executable not found: {override}")
        return override

    hosted = config.IS_HOSTED if hosted is None else hosted
    if not hosted:
        return None

    cache_dir = cache_dir or config.BROWSER_CACHE_DIR
    found = find_cached_executable(cache_dir)
    if found is None:
        raise BrowserUnavailable(f"No Chrome executable found under {cache_dir}")
    return str(found)


class PageSession:
    """Owns one Chromium process per scrape. Sessions are never pooled."""

    def __init__(
        self,
        *,
        headless: Optional[bool] = None,
        args: Iterable[str] = config.BROWSER_ARGS,
        hosted: Optional[bool] = None,
        cache_dir: Optional[Path] = None,
    ) -> None:
        self.headless = config.PLAYWRIGHT_HEADLESS if headless is None else headless
        self.args = list(args)
        self.hosted = hosted
        self.cache_dir = cache_dir

    async def open(self, executable_path: Optional[str] = None) -> SessionHandle:
        # the cache search walks the filesystem
        executable = await asyncio.to_thread(
            resolve_executable, executable_path, hosted=self.hosted, cache_dir=self.cache_dir
        )
        if executable:
            logger.info("Using browser executable %s", executable)

        p = await async_playwright().start()
        try:
            browser = await p.chromium.launch(
                headless=self.headless,
                args=self.args,
                executable_path=executable,
            )
        except PlaywrightError as exc:
            await p.stop()
            raise BrowserUnavailable(f"Failed to launch browser: {exc}") from exc

        try:
            context = await browser.new_context(
                user_agent=config.PLAYWRIGHT_USER_AGENT,
                locale=config.PLAYWRIGHT_LOCALE,
                viewport=config.PLAYWRIGHT_VIEWPORT,
            )
            page = await context.new_page()
        except BaseException:
            await browser.close()
            await p.stop()
            raise
        page.set_default_timeout(config.CONTROL_TIMEOUT_MS)
        page.set_default_navigation_timeout(config.NAVIGATION_TIMEOUT_MS)
        return SessionHandle(playwright=p, browser=browser, context=context, page=page)

    async def close(self, handle: SessionHandle) -> None:
        if handle.closed:
            return
        handle.closed = True
        try:
            try:
                await handle.context.close()
            finally:
                await handle.browser.close()
        finally:
            await handle.playwright.stop()

    @asynccontextmanager
    async def session(self, executable_path: Optional[str] = None) -> AsyncIterator[SessionHandle]:
        """Async context manager yielding an open session, closed on every exit path."""
        handle = await self.open(executable_path)
        try:
            yield handle
        finally:
            await self.close(handle)
