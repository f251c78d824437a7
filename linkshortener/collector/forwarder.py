"""Best-effort forwarding of structured log entries to a remote collector

A log entry is the tuple (stack, level, package, message). Valid entries are
POSTed as JSON to the collector with a bearer token; the collector answers
with the id of the stored entry (`logID`).

Forwarding never raises to the caller. Invalid entries, transport errors and
non-2xx responses are all written to the local `linkshortener.collector.fallback`
logger instead.

Classes:
    LogForwarder:
        Sends log entries to one collector endpoint, synchronously (`log`) or
        fire-and-forget on a background worker (`submit`).

Functions:
    build_payload(stack, level, package, message) -> dict
        Validate a log entry and build the collector's JSON payload.
    build_forwarder(url) -> LogForwarder
        Create a forwarder with the token resolved from configuration.
    log(stack, level, package, message) -> None
        Forward an entry through the process-wide default forwarder.

Example:
    >>> from linkshortener.collector import LogForwarder
    >>> forwarder = LogForwarder('http://collector.local/logs', token='s3cr3t')
    >>> forwarder.log('backend', 'info', 'handler', 'Short URL created')
    >>> forwarder.log('backend', 'loud', 'handler', 'ignored')  # written locally, not sent
"""

import os
import logging
from concurrent.futures import Future, ThreadPoolExecutor

import requests
from botocore.exceptions import BotoCoreError, ClientError

from linkshortener.constants import ENV, Defaults
from linkshortener.exceptions import ConfigurationError, InvalidInputError, MalformedResponseError
from linkshortener.collector.constants import Stack, Level, Package
from linkshortener.types import CollectorPayload, HttpHeaders
from linkshortener.utils.config import collector_token


logger = logging.getLogger(__name__)
fallback_logger = logging.getLogger('linkshortener.collector.fallback')


class InvalidLogEntryError(InvalidInputError):
    """Raised when a log entry doesn't satisfy the collector's constraints."""

    error_code = 'collector:invalid_log_entry_error'


def build_payload(stack: str, level: str, package: str, message: str) -> CollectorPayload:
    """Validate a log entry and build the collector payload

    Raises:
        InvalidLogEntryError:
            If stack, level or package is not one of the allowed values, or
            the message is not a non-empty string.
    """
    if stack not in list(Stack):
        raise InvalidLogEntryError(f'Invalid stack: {stack}. Must be one of {", ".join(Stack)}')
    if level not in list(Level):
        raise InvalidLogEntryError(f'Invalid level: {level}. Must be one of {", ".join(Level)}')
    if package not in list(Package):
        raise InvalidLogEntryError(f'Invalid package: {package}. Must be one of {", ".join(Package)}')
    if not isinstance(message, str) or not message:
        raise InvalidLogEntryError('Message must be a non-empty string')

    return {'stack': str(stack), 'level': str(level), 'package': str(package), 'message': message}


class LogForwarder:
    """Forward log entries to a remote collector over HTTP

    Attributes:
        url (str | None):
            Collector endpoint. When None, entries are only written locally.
        token (str | None):
            Bearer token attached to every request.
        timeout (float):
            Request timeout in seconds.
        session (requests.Session):
            HTTP session used to reach the collector.
    """

    def __init__(
        self,
        url: str | None,
        token: str | None = None,
        timeout: float = Defaults.COLLECTOR_TIMEOUT,
        session: requests.Session | None = None,
    ):
        self.url = url
        self.token = token
        self.timeout = timeout
        self.session = session or requests.Session()
        self._executor: ThreadPoolExecutor | None = None

    def _headers(self) -> HttpHeaders:
        headers = {'Content-Type': 'application/json'}
        if self.token:
            headers['Authorization'] = f'Bearer {self.token}'
        return headers

    @staticmethod
    def _fallback(stack: object, level: object, package: object, message: object) -> None:
        fallback_logger.warning('Local log: %s | %s | %s | %s', stack, level, package, message)

    def log(self, stack: str, level: str, package: str, message: str) -> None:
        """Send one log entry to the collector. Never raises.

        Args:
            stack (str): one of `Stack`
            level (str): one of `Level`
            package (str): one of `Package`
            message (str): non-empty log message
        """
        try:
            payload = build_payload(stack, level, package, message)
        except InvalidLogEntryError as e:
            logger.error('Logging error: %s', e)
            self._fallback(stack, level, package, message)
            return

        if not self.url:
            self._fallback(stack, level, package, message)
            return

        try:
            response = self.session.post(self.url, json=payload, headers=self._headers(), timeout=self.timeout)
            response.raise_for_status()
            body = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.error('Failed to send log: %s', e, extra={'collectorUrl': self.url})
            self._fallback(stack, level, package, message)
            return

        log_id = body.get('logID') if isinstance(body, dict) else None
        logger.debug('Log created successfully: %s', log_id)

    def submit(self, stack: str, level: str, package: str, message: str) -> Future:
        """Forward a log entry on a background worker (fire-and-forget)

        Returns:
            Future: completes once the entry is sent or written locally.
        """
        if self._executor is None:
            self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix='log-forwarder')
        return self._executor.submit(self.log, stack, level, package, message)

    def close(self) -> None:
        """Wait for pending entries and release the worker and HTTP session."""
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None
        self.session.close()


def build_forwarder(url: str | None) -> LogForwarder:
    """Create a forwarder for `url` with the token resolved from configuration

    A token that can't be resolved is reported and left out; the collector
    will then reject entries and they end up in the local fallback log.
    """
    token = None
    try:
        token = collector_token()
    except (ConfigurationError, MalformedResponseError, BotoCoreError, ClientError):
        logger.exception('Failed to resolve log collector token. Forwarding without credentials.')
    return LogForwarder(url, token=token)


_default_forwarder: LogForwarder | None = None


def log(stack: str, level: str, package: str, message: str) -> None:
    """Forward a log entry through the process-wide default forwarder

    The default forwarder is built on first use from `LOG_COLLECTOR_URL`.
    """
    global _default_forwarder
    if _default_forwarder is None:
        _default_forwarder = build_forwarder(os.environ.get(ENV.Collector.URL) or None)
    _default_forwarder.log(stack, level, package, message)
