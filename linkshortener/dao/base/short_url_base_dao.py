"""Abstract base class for ShortURL data access objects (DAOs).

This class establishes a consistent contract for all ShortURL DAO implementations,
regardless of the underlying storage mechanism.

Responsibilities:
    - Provide an interface for inserting and retrieving ShortURLModel objects.
    - Standardize error handling across data store implementations.
    - Enforce a consistent API for use by the HTTP handlers.

Example:
    Typical usage with a datastore-specific implementation:

        >>> from datetime import datetime, timedelta, UTC
        >>> from linkshortener.models import ShortURLModel
        >>> from linkshortener.dao.memory import ShortURLMemoryDAO

        >>> dao = ShortURLMemoryDAO()
        >>> now = datetime.now(UTC)
        >>> short_url = ShortURLModel(
        ...     shortcode="a1b2c3",
        ...     target="https://example.com/blog/article-123",
        ...     created_at=now,
        ...     expires_at=now + timedelta(minutes=30),
        ... )
        >>> dao.insert(short_url)

        >>> retrieved = dao.get("a1b2c3")
        >>> print(retrieved.target)
        https://example.com/blog/article-123

        >>> dao.shortcodes()
        ['a1b2c3']
"""

from abc import ABC, abstractmethod

from linkshortener.models import ShortURLModel


class ShortURLBaseDAO(ABC):
    """Interface for ShortURL data access objects (DAOs).

    Methods:
        insert(short_url: ShortURLModel, **kwargs) -> ShortURLBaseDAO:
            Insert a new ShortURLModel into the data store.
            Raises ShortURLAlreadyExistsError if the shortcode already exists.

        get(shortcode: str, **kwargs) -> ShortURLModel:
            Retrieve a ShortURLModel from the data store by shortcode.
            Raises ShortURLNotFoundError if the entry does not exist.

        exists(shortcode: str, **kwargs) -> bool:
            Check whether a shortcode is taken.

        shortcodes(**kwargs) -> list[str]:
            List every shortcode in the data store, in no guaranteed order.

    NOTE:
        - Records are never deleted. Expired records stay in the store and
          keep their shortcode reserved; callers decide what expiry means.
    """

    @abstractmethod
    def insert(self, short_url: ShortURLModel, **kwargs) -> 'ShortURLBaseDAO':
        """Insert a new ShortURLModel into the data store.

        Args:
            short_url (ShortURLModel):
                The ShortURLModel instance to be inserted.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            ShortURLBaseDAO: self (for method chaining)

        Raises:
            ShortURLAlreadyExistsError:
                If a ShortURLModel with the same shortcode already exists
        """
        pass

    @abstractmethod
    def get(self, shortcode: str, **kwargs) -> ShortURLModel:
        """Retrieve a ShortURLModel from the data store by its shortcode.

        Args:
            shortcode (str):
                The shortcode of the ShortURLModel to be retrieved.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            ShortURLModel: The stored ShortURLModel instance.

        Raises:
            ShortURLNotFoundError:
                If no ShortURLModel with the given shortcode exists.
        """
        pass

    @abstractmethod
    def exists(self, shortcode: str, **kwargs) -> bool:
        """Check whether a shortcode is already taken.

        Args:
            shortcode (str):
                Shortcode to look up.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            bool: True if a record with this shortcode exists (expired or not).
        """
        pass

    @abstractmethod
    def shortcodes(self, **kwargs) -> list[str]:
        """List all shortcodes in the data store.

        Returns:
            list[str]: Every stored shortcode, in no guaranteed order.
        """
        pass
