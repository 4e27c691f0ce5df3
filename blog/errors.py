"""
API Errors

Every failure leaves the API as ``{"error": {"message": ...}}``.
"""

import logging

from flask import jsonify
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)


class APIError(Exception):
    """Base class for errors reported to API clients."""
    status_code = 500
    message = 'Internal server error'

    def __init__(self, message=None, status_code=None):
        super().__init__(message or self.message)
        if message is not None:
            self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self):
        return {'error': {'message': self.message}}


class InvalidCredentials(APIError):
    status_code = 401
    message = 'Invalid credentials'


class MissingToken(APIError):
    status_code = 401
    message = 'No token provided'


class InvalidToken(APIError):
    status_code = 403
    message = 'Invalid or expired token'


class NotFound(APIError):
    status_code = 404
    message = 'Article not found'


class ValidationError(APIError):
    status_code = 400
    message = 'Invalid request body'


class StorageFailure(APIError):
    status_code = 500
    message = 'Storage failure'


def register_error_handlers(app):
    """Render API errors and werkzeug HTTP errors as JSON."""

    @app.errorhandler(APIError)
    def handle_api_error(error):
        if error.status_code >= 500:
            logger.error('API error %s: %s', error.status_code, error.message)
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        return jsonify({'error': {'message': error.description}}), error.code
