"""JSON error responses for the HTTP API

Every error leaves the API as `{"error": "<message>"}` (plus `errorCode` for
server-side failures) with the matching HTTP status code.
"""

import logging

from flask import Flask, Response, jsonify
from werkzeug.exceptions import HTTPException

from linkshortener.constants import UNKNOWN_INTERNAL_SERVER_ERROR
from linkshortener.exceptions import LinkShortenerError
from linkshortener.utils.runtime import running_locally


logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str, error_code: str | None = None) -> tuple[Response, int]:
    body = {'error': message}
    if error_code:
        body['errorCode'] = error_code
    return jsonify(body), status_code


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(LinkShortenerError)
    def handle_app_error(e: LinkShortenerError):
        # Client errors carry only the message
        error_code = e.error_code if e.status_code >= 500 else None
        return error_response(e.status_code, str(e), error_code)

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        return error_response(e.code or 500, e.description or e.name)

    @app.errorhandler(Exception)
    def handle_unexpected_error(e: Exception):
        # Locally, surface the real traceback instead of a generic 500
        if running_locally():
            raise e
        logger.exception('Unhandled exception while serving request. Responding with 500.')
        return error_response(500, 'Internal Server Error', UNKNOWN_INTERNAL_SERVER_ERROR)
