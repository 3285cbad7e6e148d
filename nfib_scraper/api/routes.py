"""
HTTP routes: single and batch scrapes, indicator list, health and diagnostics.
"""

import logging
from typing import List, Optional

from flask import Blueprint, current_app, jsonify, request
from pydantic import BaseModel, Field

from nfib_scraper import config, indicators
from nfib_scraper.api.decorators import handle_errors
from nfib_scraper.scraper.errors import ScrapeFailed
from nfib_scraper.scraper.models import batch_to_dict, utc_now
from nfib_scraper.scraper.playwright_driver import find_cached_executable
from nfib_scraper.scraper.series import ALL_MONTHS, find_observation

logger = logging.getLogger(__name__)

api_bp = Blueprint('api', __name__)


class BatchRequest(BaseModel):
    """Body of POST /scrape-multiple. Empty values fall back to the defaults."""
    indicators: Optional[List[str]] = None
    months: Optional[int] = Field(default=None, ge=0)


@api_bp.route('/scrape')
@handle_errors
def scrape():
    """Scrape one indicator.
    Query:
      - indicator: indicator code (required)
      - date: native M/D/YYYY date; when given only that observation is returned
    """
    indicator = request.args.get('indicator')
    requested_date = request.args.get('date') or None

    if not indicator:
        return jsonify({
            'success': False,
            'error': 'Missing required parameter: indicator',
            'indicator': None,
            'date': None,
            'value': None,
        }), 400

    logger.info("Scraping indicator: %s%s", indicator,
                f" for date: {requested_date}" if requested_date else " (all dates)")

    try:
        result = current_app.scrape_service.scrape(indicator, ALL_MONTHS)
    except Exception as e:
        logger.error("Error scraping %s: %s", indicator, e)
        error_type = e.error_type if isinstance(e, ScrapeFailed) else type(e).__name__
        return jsonify({
            'success': False,
            'indicator': indicator,
            'date': requested_date,
            'value': None,
            'error': str(e),
            'error_type': error_type,
            'scraped_at': utc_now().isoformat(),
        }), 500

    scraped_at = result.scraped_at.isoformat()

    if requested_date:
        match = find_observation(result.data, requested_date)
        if match is None:
            return jsonify({
                'success': False,
                'indicator': indicator,
                'date': requested_date,
                'value': None,
                'error': f'No data found for date: {requested_date}',
                'scraped_at': scraped_at,
            }), 404

        logger.info("Scraped %s for %s: %s", indicator, requested_date, match.value)
        return jsonify({
            'success': True,
            'indicator': indicator,
            'date': match.date,
            'value': match.value,
            'scraped_at': scraped_at,
        })

    return jsonify({
        'success': True,
        'indicator': indicator,
        'data': [record.to_dict() for record in result.data],
        'count': len(result.data),
        'scraped_at': scraped_at,
    })


@api_bp.route('/scrape-multiple', methods=['POST'])
@handle_errors
def scrape_multiple():
    """Body: {"indicators": ["expand_good", "OPT_INDEX"], "months": 12}"""
    body = BatchRequest.model_validate(request.get_json(silent=True) or {})
    codes = body.indicators or list(config.DEFAULT_BATCH_INDICATORS)
    months = body.months or config.DEFAULT_MONTHS

    results = current_app.scrape_service.scrape_many(codes, months)
    return jsonify(batch_to_dict(results))


@api_bp.route('/indicators')
def list_indicators():
    return jsonify({'indicators': indicators.as_dicts()})


@api_bp.route('/health')
def health():
    return jsonify({'status': 'ok', 'timestamp': utc_now().isoformat()})


@api_bp.route('/debug')
@handle_errors
def debug():
    """Browser-resolution diagnostics for hosted deployments."""
    cache_dir = config.BROWSER_CACHE_DIR
    chrome_path = find_cached_executable(cache_dir)
    if cache_dir.is_dir():
        listing = sorted(entry.name for entry in cache_dir.iterdir())[:20]
    else:
        listing = [f'{cache_dir} does not exist']
    return jsonify({
        'environment': 'Render' if config.IS_HOSTED else 'Local',
        'chromePath': str(chrome_path) if chrome_path else 'Not found',
        'cacheDirectory': listing,
    })
