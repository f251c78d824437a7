"""Flask application factory

The application owns its stores: every call to `create_app()` builds a new
set of DAOs unless they're injected, so separate apps (and separate tests)
never share short URLs or click logs.

Example:
    >>> from linkshortener.api import create_app
    >>> app = create_app({'BASE_URL': 'https://sho.rt'})
    >>> client = app.test_client()
    >>> client.post('/shorturls', json={'url': 'https://example.com'}).status_code
    201
"""

import logging

from flask import Flask

from linkshortener.collector import LogForwarder, build_forwarder
from linkshortener.dao.base import ShortURLBaseDAO, ClickBaseDAO
from linkshortener.dao.memory import ShortURLMemoryDAO, ClickMemoryDAO
from linkshortener.api.errors import register_error_handlers
from linkshortener.api.handlers import create_blueprint
from linkshortener.api.middleware import register_request_log
from linkshortener.api.services import EXTENSION_KEY, AppServices
from linkshortener.types import AppConfiguration
from linkshortener.utils.config import load_config


logger = logging.getLogger(__name__)


def create_app(
    config: AppConfiguration | None = None,
    *,
    short_url_dao: ShortURLBaseDAO | None = None,
    click_dao: ClickBaseDAO | None = None,
    forwarder: LogForwarder | None = None,
) -> Flask:
    """Create the URL shortener Flask application

    Args:
        config (dict | None):
            Configuration overrides, applied on top of `load_config()`.
        short_url_dao (ShortURLBaseDAO | None):
            Record store. A fresh ShortURLMemoryDAO by default.
        click_dao (ClickBaseDAO | None):
            Click log store. A fresh ClickMemoryDAO by default.
        forwarder (LogForwarder | None):
            Remote log forwarder. Built from `LOG_COLLECTOR_URL` when omitted
            and a collector is configured; otherwise forwarding is disabled.

    Returns:
        Flask: the configured application.
    """
    app = Flask(__name__)
    app.config.from_mapping(load_config())
    if config:
        app.config.from_mapping(config)

    if forwarder is None and app.config.get('LOG_COLLECTOR_URL'):
        forwarder = build_forwarder(app.config['LOG_COLLECTOR_URL'])

    # NOTE: memory DAOs define __len__, so an empty one is falsy
    app.extensions[EXTENSION_KEY] = AppServices(
        short_urls=short_url_dao if short_url_dao is not None else ShortURLMemoryDAO(),
        clicks=click_dao if click_dao is not None else ClickMemoryDAO(),
        forwarder=forwarder,
    )

    register_request_log(app)
    register_error_handlers(app)
    app.register_blueprint(create_blueprint())

    logger.debug(
        'Created application.',
        extra={'appEnv': app.config['APP_ENV'], 'forwarding': forwarder is not None},
    )
    return app
