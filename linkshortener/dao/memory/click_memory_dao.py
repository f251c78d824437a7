"""Data Access Object (DAO) implementation for click logs held in memory

Classes:
    ClickMemoryDAO:
        DAO for recording ClickModel events per shortcode in a process-local dictionary.
"""

import logging

from beartype import beartype

from linkshortener.models import ClickModel
from linkshortener.dao.base import ClickBaseDAO
from linkshortener.dao.memory.mixins import MemoryStoreMixin
from linkshortener.dao.exceptions import ShortURLNotFoundError


logger = logging.getLogger(__name__)


class ClickMemoryDAO(MemoryStoreMixin, ClickBaseDAO):
    """Memory-based Data Access Object (DAO) for click logs

    Attributes (see MemoryStoreMixin):
        store (dict[str, list[ClickModel]]):
            Shortcode to click list mapping. Lists only ever grow, in request order.
    """

    @beartype
    def initialize(self, shortcode: str, **kwargs) -> 'ClickMemoryDAO':
        # Existing logs are kept; a shortcode is only ever initialized once
        self.store.setdefault(shortcode, [])
        return self

    @beartype
    def append(self, shortcode: str, click: ClickModel, **kwargs) -> int:
        """Append a click to the shortcode's log

        Returns:
            int: Number of clicks after appending.

        Raises:
            ShortURLNotFoundError:
                If the shortcode's click log was never initialized.
        """
        try:
            clicks = self.store[shortcode]
        except KeyError as e:
            raise ShortURLNotFoundError(f"No click log for short URL with code '{shortcode}'.") from e

        clicks.append(click)
        logger.debug('Recorded click.', extra={'shortcode': shortcode, 'totalClicks': len(clicks)})
        return len(clicks)

    @beartype
    def all(self, shortcode: str, **kwargs) -> list[ClickModel]:
        return list(self.store.get(shortcode, []))

    @beartype
    def count(self, shortcode: str, **kwargs) -> int:
        return len(self.store.get(shortcode, []))

    def __repr__(self) -> str:
        return f'<{type(self).__name__}>'
