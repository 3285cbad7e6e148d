from nfib_scraper.scraper.errors import (
    ActionControlNotFound,
    BrowserUnavailable,
    ChartNotFound,
    ControlNotFound,
    NavigationTimeout,
    ReadinessTimeout,
    ScrapeFailed,
    ScraperError,
)
from nfib_scraper.scraper.models import ObservationRecord, ScrapeFailure, ScrapeResult
from nfib_scraper.scraper.series import ALL_MONTHS, find_observation, trim

__all__ = [
    "ALL_MONTHS",
    "ActionControlNotFound",
    "BrowserUnavailable",
    "ChartNotFound",
    "ControlNotFound",
    "NavigationTimeout",
    "ObservationRecord",
    "ReadinessTimeout",
    "ScrapeFailed",
    "ScrapeFailure",
    "ScrapeResult",
    "ScraperError",
    "find_observation",
    "trim",
]
