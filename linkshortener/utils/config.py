"""Utility functions for application configuration management.

Configuration is read from environment variables (names are listed in
`linkshortener.constants.ENV`) and turned into a flat dictionary that the
Flask application loads via `app.config.from_mapping()`.

The remote log collector's bearer token is never part of the source tree. It
is resolved at runtime, in this order:

    1. `LOG_COLLECTOR_TOKEN` environment variable
    2. AWS Secrets Manager secret named by `LOG_COLLECTOR_SECRET`
       (LocalStack when running locally)

Functions:
    app_env() -> str
        Return the current application environment (`APP_ENV`) value,
        defaulting to `''`.

    app_name() -> str
        Return the application name (`APP_NAME`), defaulting to `'linkshortener'`.

    load_config() -> dict
        Build the application configuration from the environment.

    collector_token(secrets_client=None) -> str | None
        Resolve the collector's bearer token, or None if none is configured.

Example:
    >>> from linkshortener.utils.config import load_config
    >>> os.environ['PORT'] = '8080'
    >>> load_config()['PORT']
    8080
"""

import os
import json
import logging

import boto3
from botocore.client import BaseClient

from linkshortener.constants import ENV, Defaults
from linkshortener.exceptions import BadConfigurationError, MalformedResponseError
from linkshortener.types import AppConfiguration
from linkshortener.utils.helpers import require_environment
from linkshortener.utils.runtime import running_locally


logger = logging.getLogger(__name__)


def app_env() -> str:
    """Return the current application environment by reading 'APP_ENV'

    Returns:
        str:
            Value of `APP_ENV` environment variable, `''` (unset) by default.

    Example:
        >>> os.environ['APP_ENV'] = 'dev'
        >>> app_env()
        'dev'
    """
    return os.environ.get(ENV.App.APP_ENV, '').lower()


def app_name() -> str:
    """Return the current application name by reading 'APP_NAME'

    Example:
        >>> os.environ.pop('APP_NAME', None)
        >>> app_name()
        'linkshortener'
    """
    return os.environ.get(ENV.App.APP_NAME) or Defaults.APP_NAME


def _int_from_env(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise BadConfigurationError(f'Environment variable {name} must be an integer (given value: {raw!r}).') from e


def load_config() -> AppConfiguration:
    """Build the application configuration from environment variables

    Returns:
        dict: Flask-compatible configuration mapping with upper-case keys.

    Raises:
        BadConfigurationError:
            If a numeric setting (PORT, DEFAULT_VALIDITY_MINUTES) is not an
            integer, or the default validity is not positive.

    Example:
        >>> config = load_config()
        >>> config['DEFAULT_VALIDITY_MINUTES']
        30
    """
    default_validity = _int_from_env(ENV.App.DEFAULT_VALIDITY_MINUTES, Defaults.VALIDITY_MINUTES)
    if default_validity <= 0:
        raise BadConfigurationError(f'Default validity must be positive (given value: {default_validity}).')

    config = {
        'APP_ENV': app_env(),
        'APP_NAME': app_name(),
        'BASE_URL': os.environ.get(ENV.App.BASE_URL) or None,
        'HOST': os.environ.get(ENV.App.HOST) or Defaults.HOST,
        'PORT': _int_from_env(ENV.App.PORT, Defaults.PORT),
        'DEFAULT_VALIDITY_MINUTES': default_validity,
        'LOG_COLLECTOR_URL': os.environ.get(ENV.Collector.URL) or None,
    }
    logger.debug('Loaded configuration from environment.', extra={'appEnv': config['APP_ENV']})
    return config


def collector_token(secrets_client: BaseClient | None = None) -> str | None:
    """Resolve the bearer token for the remote log collector

    Args:
        secrets_client (BaseClient | None):
            Optional pre-built Secrets Manager client (used in tests).

    Returns:
        str | None: The token, or None when neither source is configured.

    Raises:
        MalformedResponseError:
            If the secret exists but holds no usable token.
    """
    token = os.environ.get(ENV.Collector.TOKEN)
    if token:
        return token
    if not os.environ.get(ENV.Collector.SECRET):
        logger.debug('No log collector token configured.')
        return None
    return _resolve_secret_token(secrets_client)


@require_environment(ENV.Collector.SECRET)
def _resolve_secret_token(secrets_client: BaseClient | None) -> str:
    """Read the collector token from Secrets Manager.

    The secret may be the raw token, or JSON of the form {"token": "..."}.
    """
    secret_name = os.environ[ENV.Collector.SECRET]
    # fmt: off
    secrets_client_kwargs = {
        'endpoint_url': os.environ.get(ENV.LocalStack.ENDPOINT, 'http://localhost:4566'),
    } if running_locally() else {}
    # fmt: on
    sm = secrets_client or boto3.client('secretsmanager', **secrets_client_kwargs)

    logger.debug('Resolving log collector token from Secrets Manager.', extra={'secretName': secret_name})
    raw = (sm.get_secret_value(SecretId=secret_name).get('SecretString') or '').strip()
    if raw.startswith('{'):
        try:
            raw = json.loads(raw).get('token') or ''
        except json.JSONDecodeError as e:
            raise MalformedResponseError('Invalid JSON in log collector secret payload') from e

    if not raw:
        raise MalformedResponseError(f'Secret {secret_name!r} holds no log collector token')
    return raw
