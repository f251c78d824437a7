"""Unit tests for the remote log forwarder.

Test coverage includes:

1. Payload validation
   - Valid entries build the collector payload.
   - Invalid stack / level / package / message raise InvalidLogEntryError.

2. Forwarding
   - Valid entries are POSTed with the bearer token.
   - Invalid entries are never sent and are written locally.
   - Transport errors, non-2xx responses and non-JSON bodies fall back to the local log.
   - Nothing is sent when no collector URL is configured.

3. Fire-and-forget
   - submit() forwards on a background worker and returns a Future.

4. Default forwarder
   - build_forwarder() resolves the token and survives resolution failures.
   - Module-level log() builds the default forwarder from the environment.
"""

import logging
from unittest.mock import MagicMock

import pytest
import requests

from linkshortener.collector import forwarder as forwarder_module
from linkshortener.collector import LogForwarder, InvalidLogEntryError, build_forwarder, build_payload, Stack, Level, Package
from linkshortener.constants import ENV
from linkshortener.exceptions import MalformedResponseError


COLLECTOR_URL = 'http://collector.test/evaluation-service/logs'


# -------------------------------
# Fixtures
# -------------------------------


@pytest.fixture
def response():
    _response = MagicMock(spec=requests.Response)
    _response.status_code = 201
    _response.json.return_value = {'logID': 'a1b2c3', 'message': 'log created successfully'}
    return _response


@pytest.fixture
def session(response):
    _session = MagicMock(spec=requests.Session)
    _session.post.return_value = response
    return _session


@pytest.fixture
def log_forwarder(session):
    return LogForwarder(COLLECTOR_URL, token='test-token', timeout=2.0, session=session)


@pytest.fixture
def fallback_records(caplog):
    caplog.set_level(logging.DEBUG, logger='linkshortener.collector')

    def _records():
        return [r.getMessage() for r in caplog.records if r.name == 'linkshortener.collector.fallback']

    return _records


# -------------------------------
# 1. Payload validation
# -------------------------------


def test_build_payload():
    """Ensure valid entries build the collector's JSON payload."""
    payload = build_payload('backend', 'error', 'handler', 'received string, expected bool')

    assert payload == {'stack': 'backend', 'level': 'error', 'package': 'handler', 'message': 'received string, expected bool'}


def test_build_payload_accepts_enum_members():
    """Ensure enum members are accepted and serialized as plain strings."""
    payload = build_payload(Stack.FRONTEND, Level.FATAL, Package.COMPONENT, 'crash')

    assert payload == {'stack': 'frontend', 'level': 'fatal', 'package': 'component', 'message': 'crash'}
    assert all(type(value) is str for value in payload.values())


@pytest.mark.parametrize(
    'stack, level, package, message, error',
    [
        ('database', 'info', 'handler', 'msg', 'Invalid stack: database'),
        ('backend', 'warning', 'handler', 'msg', 'Invalid level: warning'),
        ('backend', 'INFO', 'handler', 'msg', 'Invalid level: INFO'),
        ('backend', 'info', 'kernel', 'msg', 'Invalid package: kernel'),
        ('backend', 'info', 'handler', '', 'Message must be a non-empty string'),
        ('backend', 'info', 'handler', None, 'Message must be a non-empty string'),
        ('backend', 'info', 'handler', 42, 'Message must be a non-empty string'),
        (['backend'], 'info', 'handler', 'msg', 'Invalid stack'),
    ],
)
def test_build_payload_with_invalid_entry(stack, level, package, message, error):
    """Ensure entries outside the allowed values are rejected."""
    with pytest.raises(InvalidLogEntryError, match=error):
        build_payload(stack, level, package, message)


# -------------------------------
# 2. Forwarding
# -------------------------------


def test_log(log_forwarder, session, fallback_records):
    """Ensure valid entries are POSTed with the bearer token."""
    log_forwarder.log('backend', 'info', 'service', 'Short URL created')

    session.post.assert_called_once_with(
        COLLECTOR_URL,
        json={'stack': 'backend', 'level': 'info', 'package': 'service', 'message': 'Short URL created'},
        headers={'Content-Type': 'application/json', 'Authorization': 'Bearer test-token'},
        timeout=2.0,
    )
    assert fallback_records() == []


def test_log_without_token(session):
    """Ensure no Authorization header is sent when no token is configured."""
    LogForwarder(COLLECTOR_URL, session=session).log('backend', 'info', 'service', 'msg')

    assert session.post.call_args.kwargs['headers'] == {'Content-Type': 'application/json'}


def test_log_with_invalid_entry(log_forwarder, session, fallback_records):
    """Ensure invalid entries are not sent and are written locally instead."""
    log_forwarder.log('backend', 'loud', 'service', 'msg')

    session.post.assert_not_called()
    assert fallback_records() == ['Local log: backend | loud | service | msg']


@pytest.mark.parametrize(
    'side_effect',
    [requests.ConnectionError('connection refused'), requests.Timeout('read timed out')],
)
def test_log_with_transport_error(log_forwarder, session, fallback_records, side_effect):
    """Ensure network errors never propagate and fall back to the local log."""
    session.post.side_effect = side_effect

    log_forwarder.log('backend', 'error', 'db', 'lost connection')

    assert fallback_records() == ['Local log: backend | error | db | lost connection']


def test_log_with_error_status(log_forwarder, response, fallback_records):
    """Ensure non-2xx collector responses fall back to the local log."""
    response.status_code = 401
    response.raise_for_status.side_effect = requests.HTTPError('401 Client Error: Unauthorized')

    log_forwarder.log('backend', 'warn', 'auth', 'token expired')

    assert fallback_records() == ['Local log: backend | warn | auth | token expired']


def test_log_with_non_json_response(log_forwarder, response, fallback_records):
    """Ensure unreadable collector responses fall back to the local log."""
    response.json.side_effect = ValueError('Expecting value: line 1 column 1 (char 0)')

    log_forwarder.log('backend', 'debug', 'utils', 'tick')

    assert fallback_records() == ['Local log: backend | debug | utils | tick']


def test_log_reports_log_id(log_forwarder, caplog):
    """Ensure the collector's log id is logged on success."""
    caplog.set_level(logging.DEBUG, logger='linkshortener.collector.forwarder')

    log_forwarder.log('backend', 'info', 'route', 'ok')

    assert 'Log created successfully: a1b2c3' in caplog.messages


def test_log_without_collector_url(session, fallback_records):
    """Ensure entries stay local when no collector is configured."""
    LogForwarder(None, session=session).log('frontend', 'info', 'page', 'rendered')

    session.post.assert_not_called()
    assert fallback_records() == ['Local log: frontend | info | page | rendered']


# -------------------------------
# 3. Fire-and-forget
# -------------------------------


def test_submit(log_forwarder, session):
    """Ensure submit() forwards the entry on a background worker."""
    future = log_forwarder.submit('backend', 'info', 'handler', 'async entry')
    future.result(timeout=5)

    session.post.assert_called_once()
    assert session.post.call_args.kwargs['json']['message'] == 'async entry'

    log_forwarder.close()
    session.close.assert_called_once()


def test_submit_swallows_failures(log_forwarder, session):
    """Ensure a failing collector never surfaces through the returned Future."""
    session.post.side_effect = requests.ConnectionError('down')

    future = log_forwarder.submit('backend', 'info', 'handler', 'async entry')

    assert future.result(timeout=5) is None
    log_forwarder.close()


# -------------------------------
# 4. Default forwarder
# -------------------------------


def test_build_forwarder(monkeypatch):
    """Ensure build_forwarder() picks up the configured token."""
    monkeypatch.setenv(ENV.Collector.TOKEN, 'env-token')

    _forwarder = build_forwarder(COLLECTOR_URL)

    assert _forwarder.url == COLLECTOR_URL
    assert _forwarder.token == 'env-token'


def test_build_forwarder_with_unresolvable_token(monkeypatch):
    """Ensure token resolution failures leave the forwarder without credentials."""
    def _raise():
        raise MalformedResponseError('empty secret')

    monkeypatch.setattr(forwarder_module, 'collector_token', _raise)

    _forwarder = build_forwarder(COLLECTOR_URL)

    assert _forwarder.token is None


def test_module_log(monkeypatch, session):
    """Ensure module-level log() uses a default forwarder built from the environment."""
    monkeypatch.setenv(ENV.Collector.URL, COLLECTOR_URL)
    monkeypatch.setenv(ENV.Collector.TOKEN, 'env-token')
    monkeypatch.setattr(forwarder_module, '_default_forwarder', None)
    monkeypatch.setattr(forwarder_module.requests, 'Session', lambda: session)

    forwarder_module.log('backend', 'info', 'config', 'configured')

    session.post.assert_called_once()
    assert session.post.call_args.args == (COLLECTOR_URL,)
    assert session.post.call_args.kwargs['headers']['Authorization'] == 'Bearer env-token'
