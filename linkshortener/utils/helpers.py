"""Helper utilities for the HTTP handlers.

Functions:
    base_url(request) -> str
        Resolve the public base URL that short links are built on
    get_short_url(shortcode, request) -> str
        Get string representation of short URL for a given shortcode
    is_valid_url(candidate) -> bool
        Check that a value parses as an absolute URL (scheme + host)
    isoformat_z(dt) -> str
        Render a datetime as ISO-8601 UTC with milliseconds and a trailing 'Z'
    require_environment(*names: str) -> Callable
        Decorator: Ensure required environment variables are present

Example:
    Typical usage inside a request handler:

        >>> from linkshortener.utils.helpers import get_short_url
        >>> app.config['BASE_URL'] = 'https://sho.rt'
        >>> get_short_url('abc123', request)
        'https://sho.rt/abc123'

        >>> app.config['BASE_URL'] = None
        >>> get_short_url('abc123', request)  # request to http://localhost:5000/shorturls
        'http://localhost:5000/abc123'
"""

import os
import functools
from datetime import datetime, UTC
from urllib.parse import urlparse
from collections.abc import Callable

from flask import Request, current_app

from linkshortener.exceptions import MissingEnvironmentVariableError


def base_url(request: Request) -> str:
    """Resolve public base URL for short links

    A configured `BASE_URL` wins (e.g. when running behind a proxy or custom
    domain). Otherwise the host the request was addressed to is used.

    Args:
        request (flask.Request): incoming request

    Returns:
        str: Base URL without trailing slash, e.g.:
             - "https://sho.rt"
             - "http://localhost:5000"
    """
    configured = current_app.config.get('BASE_URL')
    return (configured or request.host_url).rstrip('/')


def get_short_url(shortcode: str, request: Request) -> str:
    """Get string representation of shortened URL

    Args:
        shortcode (str): shortcode
        request (flask.Request): incoming request

    Returns:
        str: short url string representation
    """
    return f'{base_url(request)}/{shortcode}'


def is_valid_url(candidate: object) -> bool:
    """Check whether a value is a structurally valid absolute URL

    Only structure is checked: a scheme and a host must be present. The
    scheme itself is not restricted.

    Example:
        >>> is_valid_url('https://example.com/a?b=c')
        True
        >>> is_valid_url('not-a-url')
        False
        >>> is_valid_url('ftp://files.example.com')
        True
    """
    if not isinstance(candidate, str):
        return False
    try:
        components = urlparse(candidate.strip())
    except ValueError:
        return False
    return bool(components.scheme and components.netloc)


def isoformat_z(dt: datetime) -> str:
    """Render datetime as ISO-8601 UTC with millisecond precision

    Example:
        >>> isoformat_z(datetime(2026, 1, 1, 12, 30, tzinfo=UTC))
        '2026-01-01T12:30:00.000Z'
    """
    # fmt: off
    return dt.astimezone(UTC) \
             .isoformat(timespec='milliseconds') \
             .replace('+00:00', 'Z')
    # fmt: on


def require_environment(*names: str) -> Callable:
    """Decorator ensuring required environment variables are present.

    Args:
        *names (str):
            Names of required environment variables.

    Raises:
        MissingEnvironmentVariableError:
            If any required environment variable is missing or empty.

    Example:
        >>> @require_environment('LOG_COLLECTOR_SECRET')
        ... def my_function():
        ...     pass
        >>> my_function()
        MissingEnvironmentVariableError: Missing required environment variables: 'LOG_COLLECTOR_SECRET'
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            missing = [name for name in names if not os.environ.get(name)]
            if missing:
                missing_list = ', '.join(f"'{name}'" for name in missing)
                raise MissingEnvironmentVariableError(f'Missing required environment variables: {missing_list}')
            return func(*args, **kwargs)

        return wrapper

    return decorator
