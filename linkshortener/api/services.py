from dataclasses import dataclass

from flask import current_app

from linkshortener.collector import LogForwarder, Stack
from linkshortener.dao.base import ShortURLBaseDAO, ClickBaseDAO


EXTENSION_KEY = 'linkshortener'


@dataclass
class AppServices:
    """Stores and collaborators owned by one application instance."""

    short_urls: ShortURLBaseDAO
    clicks: ClickBaseDAO
    forwarder: LogForwarder | None = None

    def forward(self, level: str, package: str, message: str) -> None:
        """Send a backend log entry to the collector without waiting for it."""
        if self.forwarder is not None:
            self.forwarder.submit(Stack.BACKEND, level, package, message)


def services() -> AppServices:
    """Return the services of the application handling the current request."""
    return current_app.extensions[EXTENSION_KEY]
