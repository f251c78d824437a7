from enum import StrEnum


class Defaults:
    """Default values for short URL creation and serving."""

    VALIDITY_MINUTES = 30  # Lifetime of a short URL when the client doesn't specify one
    SHORTCODE_LENGTH = 6
    SHORTCODE_MAX_ATTEMPTS = 10  # Collisions tolerated before giving up on alias generation
    HOST = '0.0.0.0'  # noqa: S104
    PORT = 5000
    APP_NAME = 'linkshortener'
    REQUEST_LOG_FILE = 'logs.txt'
    COLLECTOR_TIMEOUT = 5.0  # seconds


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        APP_ENV = 'APP_ENV'
        APP_NAME = 'APP_NAME'
        BASE_URL = 'BASE_URL'
        HOST = 'HOST'
        PORT = 'PORT'
        DEFAULT_VALIDITY_MINUTES = 'DEFAULT_VALIDITY_MINUTES'
        LOG_LEVEL = 'LOG_LEVEL'
        REQUEST_LOG_FILE = 'REQUEST_LOG_FILE'

    class Collector(StrEnum):
        URL = 'LOG_COLLECTOR_URL'
        TOKEN = 'LOG_COLLECTOR_TOKEN'  # noqa: S105
        # Secrets Manager name holding the bearer token, either raw or as JSON: {"token": "..."}
        SECRET = 'LOG_COLLECTOR_SECRET'  # noqa: S105

    class LocalStack(StrEnum):
        ENDPOINT = 'LOCALSTACK_ENDPOINT'  # usually http://localstack:4566


# Placeholder for click fields we don't resolve (referrer fallback, geolocation)
UNKNOWN = 'Unknown'

# Error codes
UNKNOWN_INTERNAL_SERVER_ERROR = 'UNKNOWN_INTERNAL_SERVER_ERROR'
