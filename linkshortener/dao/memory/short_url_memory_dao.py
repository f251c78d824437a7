"""Data Access Object (DAO) implementation for managing shortened URLs in memory

This module provides a dictionary-based implementation of ShortURLBaseDAO. Records
live for the lifetime of the process; nothing is persisted or evicted.

Classes:
    ShortURLMemoryDAO:
        DAO for storing and retrieving ShortURLModel in a process-local dictionary.

Example:
    >>> from datetime import datetime, timedelta, UTC
    >>> from linkshortener.models import ShortURLModel
    >>> from linkshortener.dao.memory import ShortURLMemoryDAO

    >>> dao = ShortURLMemoryDAO()
    >>> now = datetime.now(UTC)
    >>> dao.insert(ShortURLModel('abc123', 'https://example.com/page', now, now + timedelta(minutes=30)))
    <ShortURLMemoryDAO>

    >>> dao.get('abc123').target
    'https://example.com/page'
    >>> dao.exists('zzz999')
    False
"""

import logging

from beartype import beartype

from linkshortener.models import ShortURLModel
from linkshortener.dao.base import ShortURLBaseDAO
from linkshortener.dao.memory.mixins import MemoryStoreMixin
from linkshortener.dao.exceptions import ShortURLAlreadyExistsError, ShortURLNotFoundError


logger = logging.getLogger(__name__)


class ShortURLMemoryDAO(MemoryStoreMixin, ShortURLBaseDAO):
    """Memory-based Data Access Object (DAO) for managing short URL mappings

    Attributes (see MemoryStoreMixin):
        store (dict[str, ShortURLModel]):
            Shortcode to ShortURLModel mapping.
    """

    @beartype
    def insert(self, short_url: ShortURLModel, **kwargs) -> 'ShortURLMemoryDAO':
        """Insert a short URL mapping

        Args:
            short_url (ShortURLModel):
                ShortURLModel instance representing the shortened URL mapping.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            ShortURLMemoryDAO: self (for method chaining)

        Raises:
            ShortURLAlreadyExistsError:
                If a short URL with the same shortcode already exists.
        """
        if short_url.shortcode in self.store:
            raise ShortURLAlreadyExistsError(f"Short URL with code '{short_url.shortcode}' already exists.")

        self.store[short_url.shortcode] = short_url
        logger.debug('Inserted short URL record.', extra={'shortcode': short_url.shortcode})
        return self

    @beartype
    def get(self, shortcode: str, **kwargs) -> ShortURLModel:
        """Retrieve a short URL mapping by shortcode

        Expired records are returned as well; expiry is the caller's concern.

        Raises:
            ShortURLNotFoundError:
                If the shortcode doesn't exist.
        """
        try:
            return self.store[shortcode]
        except KeyError as e:
            raise ShortURLNotFoundError(f"Short URL with code '{shortcode}' doesn't exist.") from e

    @beartype
    def exists(self, shortcode: str, **kwargs) -> bool:
        return shortcode in self.store

    def shortcodes(self, **kwargs) -> list[str]:
        return list(self.store)

    def __repr__(self) -> str:
        return f'<{type(self).__name__}>'
