"""Abstract base class for the item-pool cache contract.

The pool hands out :class:`~src.models.cache_item.CacheItem` objects and
accepts them back for writing, either immediately (``save``) or batched
through a deferred buffer (``save_deferred`` + ``commit``).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from src.models.cache_item import CacheItem


class ICacheItemPool(ABC):
    """Contract for item-oriented cache access."""

    @abstractmethod
    def get_item(self, key: str) -> CacheItem:
        """Return the item for *key*.

        Never raises for a missing key or a failed fetch: the item simply
        reports ``is_hit() == False``.  Key validation errors propagate.
        """

    @abstractmethod
    def get_items(self, keys: Iterable[str] = ()) -> dict[str, CacheItem]:
        """Return ``{key: get_item(key)}`` for every key."""

    @abstractmethod
    def has_item(self, key: str) -> bool:
        """Return ``True`` if *key* is present in the store."""

    @abstractmethod
    def clear(self) -> bool:
        """Flush the whole store; refused (``False``) for a namespaced pool."""

    @abstractmethod
    def delete_item(self, key: str) -> bool:
        """Remove *key*; ``False`` if it was not there."""

    @abstractmethod
    def delete_items(self, keys: Iterable[str]) -> bool:
        """Attempt every delete; ``True`` only if none returned ``False``."""

    @abstractmethod
    def save(self, item: CacheItem) -> bool:
        """Write *item* now; ``False`` if the store write failed."""

    @abstractmethod
    def save_deferred(self, item: CacheItem) -> bool:
        """Queue *item* for the next :meth:`commit`."""

    @abstractmethod
    def commit(self) -> bool:
        """Save every queued item; ``True`` only if all of them were saved."""
