"""Application-wide logging initialization

IMPORTANT: Call `initialize_logging()` in the process entry point before any
other logging is done. The Flask app factory deliberately doesn't call it.

Logging format:
{
    "timestamp": "2026-10-19T12:00:00.000Z",
    "level": "INFO",
    "logger": "linkshortener.api.handlers.shorten_url",
    "message": "Short URL created. Responding with 201."
}

Request diagnostic log:
    Records of the `linkshortener.access` logger (one per inbound request and
    one per outbound response) are additionally appended, as JSON lines, to
    `REQUEST_LOG_FILE` (default: logs.txt). The file is never rotated.
"""

import os
import json
import logging
import logging.config
from datetime import datetime, UTC

from linkshortener.constants import ENV, Defaults


ACCESS_LOGGER = 'linkshortener.access'


class JsonFormatter(logging.Formatter):
    """JSON formatter that includes LogRecord extras"""

    STANDARD_ATTRS = frozenset(
        {
            'args',
            'asctime',
            'created',
            'exc_info',
            'exc_text',
            'filename',
            'funcName',
            'levelname',
            'levelno',
            'lineno',
            'module',
            'msecs',
            'msg',
            'name',
            'pathname',
            'process',
            'processName',
            'relativeCreated',
            'stack_info',
            'thread',
            'threadName',
            'taskName',
        }
    )

    def format(self, record: logging.LogRecord) -> str:
        # fmt: off
        timestamp = datetime.fromtimestamp(record.created, tz=UTC) \
                            .isoformat(timespec="milliseconds") \
                            .replace("+00:00", "Z")
        # fmt: on

        log = {
            'timestamp': timestamp,
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }

        # Attach `extra` fields
        for key, value in record.__dict__.items():
            if key not in self.STANDARD_ATTRS:
                log[key] = value

        if record.exc_info:
            log['exception'] = self.formatException(record.exc_info)

        return json.dumps(log, default=str)


def initialize_logging() -> None:
    log_level = os.getenv(ENV.App.LOG_LEVEL, 'INFO').upper()
    request_log_file = os.getenv(ENV.App.REQUEST_LOG_FILE) or Defaults.REQUEST_LOG_FILE
    logging.config.dictConfig(
        {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {
                'json': {
                    '()': JsonFormatter,
                }
            },
            'handlers': {
                'stdout': {
                    'class': 'logging.StreamHandler',
                    'formatter': 'json',
                    'stream': 'ext://sys.stdout',
                },
                'request_log': {
                    'class': 'logging.FileHandler',
                    'formatter': 'json',
                    'filename': request_log_file,
                    'mode': 'a',
                    'encoding': 'utf-8',
                    'delay': True,
                },
            },
            'loggers': {
                ACCESS_LOGGER: {
                    'level': 'INFO',
                    'handlers': ['request_log'],
                    'propagate': True,
                },
            },
            'root': {
                'level': log_level,
                'handlers': ['stdout'],
            },
        }
    )
