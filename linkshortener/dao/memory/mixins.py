"""In-memory store mixin shared by process-local DAOs.

Responsibilities:
    - Own (or adopt) the dictionary backing a DAO
    - Expose size and reset helpers for tests and diagnostics

Classes:
    - MemoryStoreMixin: Base mixin to inject a dictionary store into memory-backed DAOs.

Example:
    Typical usage with a DAO implementation:

        >>> class ShortURLMemoryDAO(MemoryStoreMixin, ShortURLBaseDAO):
        ...     pass
        ...
        >>> dao = ShortURLMemoryDAO()
        >>> len(dao)
        0
"""

from typing import Any


class MemoryStoreMixin:
    """Mixin providing a process-local dictionary store for memory-backed DAOs.

    Every DAO instance owns its own store unless one is passed in explicitly,
    so separate application instances (and separate tests) never share state.

    Attributes:
        store (dict[str, Any]):
            Mapping of shortcode to the DAO's stored value.
    """

    def __init__(self, store: dict[str, Any] | None = None):
        """Initialize a memory-backed DAO

        Args:
            store (dict[str, Any] | None):
                Existing dictionary to use as backing store. A new empty
                dictionary is created when omitted.
        """
        self.store = store if store is not None else {}

    def __len__(self) -> int:
        return len(self.store)

    def __contains__(self, shortcode: object) -> bool:
        return shortcode in self.store

    def clear(self) -> None:
        """Drop every entry from the backing store."""
        self.store.clear()
