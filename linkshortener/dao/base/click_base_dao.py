"""Abstract base class for click log data access objects (DAOs).

A click log is the ordered sequence of ClickModel entries recorded for one
shortcode, one entry per successful redirect.

Example:
    >>> from datetime import datetime, UTC
    >>> from linkshortener.models import ClickModel
    >>> from linkshortener.dao.memory import ClickMemoryDAO

    >>> dao = ClickMemoryDAO()
    >>> dao.initialize('abc123')
    >>> dao.append('abc123', ClickModel(timestamp=datetime.now(UTC)))
    1
    >>> dao.count('abc123')
    1
"""

from abc import ABC, abstractmethod

from linkshortener.models import ClickModel


class ClickBaseDAO(ABC):
    """Interface for click log data access objects (DAOs).

    Methods:
        initialize(shortcode: str, **kwargs) -> ClickBaseDAO:
            Create an empty click log for a newly inserted short URL.

        append(shortcode: str, click: ClickModel, **kwargs) -> int:
            Append a click to the shortcode's log, return the new click count.
            Raises ShortURLNotFoundError if the log was never initialized.

        all(shortcode: str, **kwargs) -> list[ClickModel]:
            Return the shortcode's clicks in arrival order.

        count(shortcode: str, **kwargs) -> int:
            Return the number of clicks recorded for the shortcode.
    """

    @abstractmethod
    def initialize(self, shortcode: str, **kwargs) -> 'ClickBaseDAO':
        """Create an empty click log for a shortcode.

        Args:
            shortcode (str):
                Shortcode of a freshly inserted short URL.

        Returns:
            ClickBaseDAO: self (for method chaining)
        """
        pass

    @abstractmethod
    def append(self, shortcode: str, click: ClickModel, **kwargs) -> int:
        """Append a click event to the shortcode's log.

        Args:
            shortcode (str):
                Shortcode that was visited.

            click (ClickModel):
                Click event to record.

        Returns:
            int: Total number of clicks after appending.

        Raises:
            ShortURLNotFoundError:
                If no click log was initialized for the shortcode.
        """
        pass

    @abstractmethod
    def all(self, shortcode: str, **kwargs) -> list[ClickModel]:
        """Return every click recorded for a shortcode, oldest first.

        Unknown shortcodes yield an empty list.
        """
        pass

    @abstractmethod
    def count(self, shortcode: str, **kwargs) -> int:
        """Return the number of clicks recorded for a shortcode."""
        pass
