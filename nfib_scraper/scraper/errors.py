"""Exception types raised by the scraping stages.

Every stage raises a ``ScraperError`` subclass; the pipeline wraps whatever
escapes into a single ``ScrapeFailed`` carrying the original message.
"""

from __future__ import annotations

from typing import Optional


class ScraperError(Exception):
    code = "scraper_error"

    def __init__(self, message: str = "Scraper error"):
        super().__init__(message)


class BrowserUnavailable(ScraperError):
    """No usable browser executable could be launched."""

    code = "browser_unavailable"


class NavigationTimeout(ScraperError):
    code = "navigation_timeout"


class ControlNotFound(ScraperError):
    code = "control_not_found"


class ActionControlNotFound(ScraperError):
    code = "action_control_not_found"


class ReadinessTimeout(ScraperError):
    """The chart never showed data for the selected indicator in time."""

    code = "readiness_timeout"

    def __init__(self, indicator: str, timeout_ms: int):
        super().__init__(
            f"Chart data for {indicator} not ready after {timeout_ms}ms"
        )
        self.indicator = indicator
        self.timeout_ms = timeout_ms


class ChartNotFound(ScraperError):
    """Neither chart widget handle resolved; the page layout has changed."""

    code = "chart_not_found"


class ScrapeFailed(ScraperError):
    code = "scrape_failed"

    def __init__(self, indicator: str, cause: BaseException, error_type: Optional[str] = None):
        super().__init__(f"Failed to scrape NFIB data: {cause}")
        self.indicator = indicator
        self.error_type = error_type or type(cause).__name__
