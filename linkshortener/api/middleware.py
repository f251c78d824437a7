"""Request diagnostic log

Every inbound request and every outbound response is logged to the
`linkshortener.access` logger. `initialize_logging()` appends that logger's
records to the request log file.
"""

import logging
from datetime import datetime, UTC

from flask import Flask, Response, request

from linkshortener.utils.helpers import isoformat_z
from linkshortener.utils.logging import ACCESS_LOGGER


access_logger = logging.getLogger(ACCESS_LOGGER)


def register_request_log(app: Flask) -> None:
    @app.before_request
    def log_request() -> None:
        access_logger.info(
            'Request received.',
            extra={
                'requestTimestamp': isoformat_z(datetime.now(UTC)),
                'method': request.method,
                'url': request.full_path.rstrip('?'),
                'body': request.get_json(force=True, silent=True),
                'headers': dict(request.headers),
            },
        )

    @app.after_request
    def log_response(response: Response) -> Response:
        access_logger.info(
            'Response sent.',
            extra={
                'status': response.status_code,
                'body': response.get_json(silent=True) if response.is_json else None,
            },
        )
        return response
