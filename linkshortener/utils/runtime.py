import os

from linkshortener.constants import ENV


def running_locally() -> bool:
    """Return True if running on a developer machine (APP_ENV=local), False otherwise."""
    env = os.getenv(ENV.App.APP_ENV, '').lower()
    return env == 'local'
