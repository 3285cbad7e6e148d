"""
Error-mapping decorators for the API routes.
"""

import logging
from functools import wraps

from flask import jsonify
from pydantic import ValidationError

from nfib_scraper.scraper.errors import ScraperError

logger = logging.getLogger(__name__)


def handle_errors(f):
    """Turn anything a route raises into a structured JSON error response."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except ValidationError as e:
            return jsonify({'success': False, 'code': 'validation_error', 'error': str(e)}), 400
        except ScraperError as e:
            return jsonify({'success': False, 'code': e.code, 'error': str(e)}), 500
        except Exception as e:
            logger.exception("Unhandled error in %s", f.__name__)
            return jsonify({'success': False, 'code': 'internal_error', 'error': str(e)}), 500

    return decorated_function
