"""
Error handling for the vocabulary API.

Every failure under ``/api/`` is answered with the same JSON envelope:
``{'success': False, 'code': ..., 'message': ...}`` plus ``details`` when
there is something to add.
"""

from typing import Any, Dict, Optional

from flask import current_app, jsonify, request


class VocabStackError(Exception):
    """Base exception class for Vocabstack."""

    code = 'UNKNOWN_ERROR'
    status_code = 500

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict:
        return _envelope(self.code, self.message, self.details)


class NotFoundError(VocabStackError):
    code = 'NOT_FOUND'
    status_code = 404

    def __init__(self, message: str = 'Resource not found', resource: str = None):
        super().__init__(message, {'resource': resource} if resource else None)


class ValidationError(VocabStackError):
    """Request body or parameters rejected."""

    code = 'VALIDATION_ERROR'
    status_code = 400

    def __init__(self, message: str = 'Validation failed', errors: Dict = None):
        super().__init__(message, {'errors': errors} if errors else None)


class ContentLoadError(VocabStackError):
    """Vocabulary content could not be fetched or parsed."""

    code = 'LOAD_FAILED'
    status_code = 502

    def __init__(self, message: str = 'Failed to load vocab', source: str = None):
        super().__init__(message, {'source': source} if source else None)


def _envelope(code: str, message: str, details: Optional[Dict[str, Any]] = None) -> dict:
    body = {'success': False, 'code': code, 'message': message}
    if details:
        body['details'] = details
    return body


def success_response(data: Any = None, message: str = None) -> dict:
    response = {'success': True}
    if data is not None:
        response['data'] = data
    if message:
        response['message'] = message
    return response


# HTTP errors raised by Flask itself, answered as JSON on API paths only.
_HTTP_ERRORS = {
    404: ('NOT_FOUND', 'Endpoint not found'),
    405: ('METHOD_NOT_ALLOWED', 'Method not allowed'),
    500: ('SERVER_ERROR', 'Internal server error'),
}


def _http_error_handler(status_code: int):
    code, message = _HTTP_ERRORS[status_code]

    def handler(error):
        if status_code == 500:
            current_app.logger.exception('Internal server error')
        if not request.path.startswith('/api/'):
            return error
        return jsonify(_envelope(code, message)), status_code

    return handler


def register_error_handlers(app):
    """Register error handlers with Flask app."""

    @app.errorhandler(VocabStackError)
    def handle_vocabstack_error(error):
        current_app.logger.warning("%s: %s", error.code, error.message)
        return jsonify(error.to_dict()), error.status_code

    for status_code in _HTTP_ERRORS:
        app.register_error_handler(status_code, _http_error_handler(status_code))
