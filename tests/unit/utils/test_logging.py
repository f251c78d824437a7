"""Unit tests for JSON logging in logging.py.

Test coverage includes:

1. JsonFormatter output (standard fields, extras, exceptions)
2. initialize_logging() wiring (root level, request log file)
"""

import sys
import json
import logging

import pytest

from linkshortener.constants import ENV
from linkshortener.utils.logging import ACCESS_LOGGER, JsonFormatter, initialize_logging


# -------------------------------
# 1. JsonFormatter
# -------------------------------


def _record(msg: str, *args, level: int = logging.INFO, exc_info=None, **extra) -> logging.LogRecord:
    record = logging.LogRecord('linkshortener.test', level, __file__, 1, msg, args, exc_info)
    record.created = 1792368000.5  # 2026-10-19T00:00:00.500Z
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter():
    """Ensure records are rendered as JSON with the standard fields."""
    log = json.loads(JsonFormatter().format(_record('Created %s.', 'abc123')))

    assert log == {
        'timestamp': '2026-10-19T00:00:00.500Z',
        'level': 'INFO',
        'logger': 'linkshortener.test',
        'message': 'Created abc123.',
    }


def test_json_formatter_with_extras():
    """Ensure `extra` fields are attached and non-JSON values are stringified."""
    record = _record('Redirecting.', shortcode='abc123', totalClicks=2, headers={'Host': 'sho.rt'}, when=object)

    log = json.loads(JsonFormatter().format(record))

    assert log['shortcode'] == 'abc123'
    assert log['totalClicks'] == 2
    assert log['headers'] == {'Host': 'sho.rt'}
    assert log['when'] == str(object)


def test_json_formatter_with_exception():
    """Ensure exception tracebacks are included."""
    try:
        raise RuntimeError('boom')
    except RuntimeError:
        record = _record('Failed.', level=logging.ERROR, exc_info=sys.exc_info())

    log = json.loads(JsonFormatter().format(record))

    assert 'RuntimeError: boom' in log['exception']


# -------------------------------
# 2. initialize_logging()
# -------------------------------


@pytest.fixture
def _restore_logging():
    root = logging.getLogger()
    access = logging.getLogger(ACCESS_LOGGER)
    saved = (root.level, list(root.handlers), access.level, list(access.handlers), access.propagate)
    yield
    for handler in access.handlers:
        if handler not in saved[3]:
            handler.close()
    for handler in root.handlers:
        if handler not in saved[1]:
            handler.close()
    root.setLevel(saved[0])
    root.handlers[:] = saved[1]
    access.setLevel(saved[2])
    access.handlers[:] = saved[3]
    access.propagate = saved[4]


@pytest.mark.usefixtures('_restore_logging')
def test_initialize_logging(monkeypatch, tmp_path):
    """Ensure the root level and request log file are configured from the environment."""
    log_file = tmp_path / 'requests.log'
    monkeypatch.setenv(ENV.App.LOG_LEVEL, 'debug')
    monkeypatch.setenv(ENV.App.REQUEST_LOG_FILE, str(log_file))

    initialize_logging()
    logging.getLogger(ACCESS_LOGGER).info('Request received.', extra={'method': 'GET', 'url': '/abc123'})
    for handler in logging.getLogger(ACCESS_LOGGER).handlers:
        handler.flush()

    assert logging.getLogger().level == logging.DEBUG
    lines = log_file.read_text(encoding='utf-8').splitlines()
    assert len(lines) == 1
    entry = json.loads(lines[0])
    assert entry['logger'] == ACCESS_LOGGER
    assert entry['message'] == 'Request received.'
    assert entry['method'] == 'GET'
    assert entry['url'] == '/abc123'


@pytest.mark.usefixtures('_restore_logging')
def test_initialize_logging_appends(monkeypatch, tmp_path):
    """Ensure the request log is appended to, never truncated."""
    log_file = tmp_path / 'requests.log'
    log_file.write_text('{"previous": "entry"}\n', encoding='utf-8')
    monkeypatch.setenv(ENV.App.REQUEST_LOG_FILE, str(log_file))

    initialize_logging()
    logging.getLogger(ACCESS_LOGGER).info('Response sent.', extra={'status': 302})
    for handler in logging.getLogger(ACCESS_LOGGER).handlers:
        handler.flush()

    lines = log_file.read_text(encoding='utf-8').splitlines()
    assert lines[0] == '{"previous": "entry"}'
    assert json.loads(lines[1])['status'] == 302
