"""
NFIB seasonally adjusted indicator scraper.

Drives the NFIB SBET indicators page in a headless browser, reads the
seasonally adjusted series out of its chart and serves them over HTTP.

Usage:
    import asyncio
    from nfib_scraper.scraper.pipeline import IndicatorScraper

    result = asyncio.run(IndicatorScraper.default().scrape("expand_good", 12))

CLI Usage:
    python -m nfib_scraper.main --mode scrape --indicator OPT_INDEX --months 6
"""

__version__ = "0.1.0"
