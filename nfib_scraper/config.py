"""Configuration constants and selectors for the NFIB indicator scraper."""

from __future__ import annotations

import os
from pathlib import Path

# ---------------------------------------------------------------------------
# Project metadata
# ---------------------------------------------------------------------------

PROJECT_ROOT = Path(__file__).resolve().parent

# ---------------------------------------------------------------------------
# Target page and selectors
# ---------------------------------------------------------------------------

INDICATORS_URL = os.getenv("NFIB_INDICATORS_URL", "https://www.nfib-sbet.org/Indicators.html")

INDICATOR_SELECT_SEL = "#indicators1"
# Tried in order; the first one present on the page is clicked.
SHOW_RESULTS_SELECTORS = (
    "#showResults",
    "input[type='button'][value*='Show']",
    "button:has-text('Show Results')",
    "a:has-text('Show Results')",
)

# Kendo chart internals (undocumented; adjust here when the page changes)
CHART_CONTAINER_SEL = "#indicatorChart"
CHART_HANDLES = ("kendoStockChart", "kendoChart")
CHART_DATE_FIELD = "monthyear"
CHART_VALUE_FIELD = "indexvalue"

# ---------------------------------------------------------------------------
# Timeouts (milliseconds)
# ---------------------------------------------------------------------------

NAVIGATION_TIMEOUT_MS = 60_000
CONTROL_TIMEOUT_MS = 30_000
SLOW_READY_TIMEOUT_MS = 90_000
DEFAULT_READY_TIMEOUT_MS = 40_000
READY_POLL_INTERVAL_MS = 500

# ---------------------------------------------------------------------------
# Playwright settings
# ---------------------------------------------------------------------------

PLAYWRIGHT_HEADLESS = os.getenv("PLAYWRIGHT_HEADLESS", "1").lower() not in ("0", "false", "no")
BROWSER_ARGS = (
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-dev-shm-usage",
)
PLAYWRIGHT_VIEWPORT = {"width": 1440, "height": 900}
PLAYWRIGHT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/123.0.0.0 Safari/537.36"
)
PLAYWRIGHT_LOCALE = "en-US"

# Constrained hosting (Render) keeps the browser under a cache directory
IS_HOSTED = bool(os.getenv("RENDER")) or os.getenv("NFIB_HOSTED", "0") == "1"
BROWSER_CACHE_DIR = Path(
    os.getenv("PLAYWRIGHT_BROWSERS_PATH", "/opt/render/.cache/ms-playwright")
)
BROWSER_EXECUTABLE_NAMES = ("chrome", "chromium", "headless_shell")
CHROME_EXECUTABLE_PATH = os.getenv("CHROME_EXECUTABLE_PATH") or None

# ---------------------------------------------------------------------------
# Request defaults
# ---------------------------------------------------------------------------

DEFAULT_MONTHS = 12
DEFAULT_BATCH_INDICATORS = ("OPT_INDEX",)

# ---------------------------------------------------------------------------
# Server / output
# ---------------------------------------------------------------------------

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_DIR = os.getenv("NFIB_LOG_DIR") or None
OUTPUT_DIR = Path(os.getenv("NFIB_OUTPUT_DIR", str(PROJECT_ROOT / "output")))


class Config:
    """Flask application settings."""

    HOST = HOST
    PORT = PORT

    @classmethod
    def init_app(cls, app):
        app.config.from_object(cls)
        # keep response keys in insertion order (batch results follow request order)
        app.json.sort_keys = False


class DevelopmentConfig(Config):
    DEBUG = True


class ProductionConfig(Config):
    DEBUG = False


class TestingConfig(Config):
    TESTING = True


FLASK_CONFIGS = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
    "default": ProductionConfig,
}
