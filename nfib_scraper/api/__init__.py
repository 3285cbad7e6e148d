"""
Flask application factory for the NFIB scraper API.
"""

import os

from flask import Flask, jsonify

from nfib_scraper.config import FLASK_CONFIGS
from nfib_scraper.api.routes import api_bp


def create_app(config_name=None, scrape_service=None):
    """Build the app; ``scrape_service`` defaults to the Playwright-backed service."""
    if config_name is None:
        config_name = os.environ.get('FLASK_ENV', 'default')

    app = Flask(__name__)
    FLASK_CONFIGS[config_name].init_app(app)

    app.register_blueprint(api_bp)

    if scrape_service is None:
        from nfib_scraper.service import ScrapeService
        scrape_service = ScrapeService()
    app.scrape_service = scrape_service

    @app.errorhandler(404)
    def page_not_found(error):
        return jsonify({'success': False, 'error': 'Not found'}), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        return jsonify({'success': False, 'error': 'Method not allowed'}), 405

    return app
