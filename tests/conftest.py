from unittest.mock import MagicMock

import pytest
from flask import Flask
from flask.testing import FlaskClient
from pytest import MonkeyPatch

from linkshortener.api import create_app
from linkshortener.collector import LogForwarder
from linkshortener.constants import ENV
from linkshortener.dao.memory import ShortURLMemoryDAO, ClickMemoryDAO


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: MonkeyPatch) -> None:
    """Keep the developer's environment from leaking into tests."""
    for group in (ENV.App, ENV.Collector, ENV.LocalStack):
        for name in group:
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def base_url() -> str:
    return 'https://sho.rt'


@pytest.fixture
def short_url_dao() -> ShortURLMemoryDAO:
    return ShortURLMemoryDAO()


@pytest.fixture
def click_dao() -> ClickMemoryDAO:
    return ClickMemoryDAO()


@pytest.fixture
def forwarder() -> LogForwarder:
    return MagicMock(spec=LogForwarder)


@pytest.fixture
def app(base_url, short_url_dao, click_dao, forwarder) -> Flask:
    _app = create_app(
        {'TESTING': True, 'BASE_URL': base_url},
        short_url_dao=short_url_dao,
        click_dao=click_dao,
        forwarder=forwarder,
    )
    return _app


@pytest.fixture
def client(app) -> FlaskClient:
    return app.test_client()
