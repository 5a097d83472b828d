"""
Error Handlers

API routes always answer with a JSON body, browser routes with the static
404 page. Unexpected failures are logged in full and reported generically.
"""

import logging

from flask import jsonify, request
from pydantic import ValidationError
from werkzeug.exceptions import HTTPException

from app.extensions import db
from app.pages.helpers import send_page
from app.schemas import format_validation_error

logger = logging.getLogger(__name__)


def _is_api_request():
    return request.path.startswith('/api/') or request.path == '/api'


def register_error_handlers(app):
    """Attach JSON/page error handlers to the application."""

    @app.errorhandler(HTTPException)
    def handle_http_exception(e):
        if _is_api_request():
            message = 'Not found' if e.code == 404 else e.description
            return jsonify({'error': message}), e.code
        if e.code == 404:
            return send_page('404.html', 404)
        return e

    @app.errorhandler(ValidationError)
    def handle_validation_error(e):
        return jsonify({'error': format_validation_error(e)}), 400

    @app.errorhandler(Exception)
    def handle_unexpected_error(e):
        db.session.rollback()
        logger.exception('Unhandled error on %s %s', request.method, request.path)
        return jsonify({'error': 'Internal Server Error'}), 500
