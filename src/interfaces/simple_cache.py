"""Abstract base class for the simple key-value cache contract.

A small get/set/delete surface with bulk variants, meant for callers that
just want values in and out.  Keys are bare strings; implementations
apply their namespace and validate the result before any store call.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from datetime import datetime, timedelta
from typing import Any

TTL = int | timedelta | datetime | None


class ISimpleCache(ABC):
    """Contract for the simple cache.

    Argument errors (``InvalidKeyError``, ``InvalidArgumentError``) always
    propagate.  How store failures surface is documented per operation.
    """

    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        """Return the value under *key*, or *default* if the store has none.

        A store fault other than "not found" propagates as ``StoreError``.
        """

    @abstractmethod
    def set(self, key: str, value: Any, ttl: TTL = None) -> bool:
        """Store *value* under *key*.

        Returns ``False`` instead of raising when the store write fails.
        """

    @abstractmethod
    def delete(self, key: str) -> bool:
        """Remove *key*; ``False`` if it was not there."""

    @abstractmethod
    def has(self, key: str) -> bool:
        """Return ``True`` if *key* is present."""

    @abstractmethod
    def clear(self) -> bool:
        """Flush the whole store; refused (``False``) for a namespaced cache."""

    @abstractmethod
    def get_multiple(self, keys: Iterable[str], default: Any = None) -> dict[str, Any]:
        """Return ``{key: get(key, default)}`` for every key."""

    @abstractmethod
    def set_multiple(self, values: Mapping[str, Any], ttl: TTL = None) -> bool:
        """Set every pair, stopping at the first failed write."""

    @abstractmethod
    def delete_multiple(self, keys: Iterable[str]) -> bool:
        """Delete every key, stopping at the first ``False``."""
