"""CLI for the NFIB seasonally adjusted indicator scraper."""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import Iterable, List

from nfib_scraper import config, indicators
from nfib_scraper.io import save_csv
from nfib_scraper.scraper.errors import ScraperError
from nfib_scraper.scraper.models import ScrapeResult, batch_to_dict
from nfib_scraper.scraper.pipeline import IndicatorBatchRunner, IndicatorScraper
from nfib_scraper.scraper.playwright_driver import find_cached_executable
from nfib_scraper.scraper.series import ALL_MONTHS
from nfib_scraper.utils.logger import setup_logger

MODES = ("scrape", "batch", "list", "serve", "debug")


def _months(args: argparse.Namespace) -> int:
    return ALL_MONTHS if args.all else args.months


async def run_scrape_mode(args: argparse.Namespace) -> dict:
    scraper = IndicatorScraper.default(args.executable_path)
    result = await scraper.scrape(args.indicator, _months(args))
    if args.csv:
        output_path = save_csv.save_series_csv(result)
        print(f"Saved {len(result.data)} rows to {output_path}", file=sys.stderr)
    return result.to_dict()


async def run_batch_mode(args: argparse.Namespace) -> dict:
    codes: List[str] = args.indicators or list(config.DEFAULT_BATCH_INDICATORS)
    runner = IndicatorBatchRunner(IndicatorScraper.default(args.executable_path))
    results = await runner.run_all(codes, _months(args))
    if args.csv:
        for entry in results.values():
            if isinstance(entry, ScrapeResult):
                output_path = save_csv.save_series_csv(entry)
                print(f"Saved {len(entry.data)} rows to {output_path}", file=sys.stderr)
    return batch_to_dict(results)


def run_debug_mode() -> dict:
    chrome_path = find_cached_executable(config.BROWSER_CACHE_DIR)
    return {
        "environment": "Render" if config.IS_HOSTED else "Local",
        "cacheDirectory": str(config.BROWSER_CACHE_DIR),
        "chromePath": str(chrome_path) if chrome_path else "Not found",
        "configuredExecutable": config.CHROME_EXECUTABLE_PATH,
    }


def run_serve_mode(args: argparse.Namespace) -> None:
    from nfib_scraper.api import create_app

    app = create_app()
    print(f"NFIB Scraper API running on port {args.port}")
    print(f"Health check: http://localhost:{args.port}/health")
    print(f"Scrape endpoint: http://localhost:{args.port}/scrape?indicator=expand_good")
    app.run(host=args.host, port=args.port, threaded=True)


def parse_args(argv: Iterable[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--mode", choices=MODES, default="scrape", help="What to run.")
    parser.add_argument("--indicator", default="expand_good", help="Indicator code for scrape mode.")
    parser.add_argument("--indicators", nargs="+", help="Indicator codes for batch mode.")
    parser.add_argument("--months", type=int, default=1, help="Number of most recent points to keep.")
    parser.add_argument("--all", action="store_true", help="Keep the entire series.")
    parser.add_argument("--csv", action="store_true", help="Also write results to CSV.")
    parser.add_argument("--executable-path", default=None, help="Chrome binary to launch.")
    parser.add_argument("--host", default=config.HOST)
    parser.add_argument("--port", type=int, default=config.PORT)
    parser.add_argument("--log-level", default=config.LOG_LEVEL)
    args = parser.parse_args(argv)
    if args.months < 0:
        parser.error("--months must be non-negative")
    return args


def main(argv: Iterable[str] | None = None) -> None:
    args = parse_args(argv)
    setup_logger(args.log_level, config.LOG_DIR)

    if args.mode == "list":
        print(json.dumps(indicators.as_dicts(), indent=2))
        return
    if args.mode == "debug":
        print(json.dumps(run_debug_mode(), indent=2))
        return
    if args.mode == "serve":
        run_serve_mode(args)
        return

    runner = run_scrape_mode if args.mode == "scrape" else run_batch_mode
    try:
        payload = asyncio.run(runner(args))
    except ScraperError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1)
    print(json.dumps(payload, indent=2))


if __name__ == "__main__":
    main()
