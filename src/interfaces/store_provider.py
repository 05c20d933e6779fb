"""Abstract base class for store providers.

A store provider is the physical key-value/document backend the caches
sit on top of.  The caches never know how a store is reached (cluster
connection, bucket, collection, retries, authentication); they only rely
on the five operations below.  Keys passed in are already namespaced and
validated.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

import structlog

from src.models.store import FetchResult
from src.utils.errors import DocumentNotFoundError, StoreError

logger = structlog.get_logger(logger_name=__name__)


class IStoreProvider(ABC):
    """Contract for the backing store of the simple cache and the item pool.

    Implementations are synchronous: every call is one request/response.
    """

    @abstractmethod
    def fetch(self, key: str) -> Any:
        """Return the value stored under *key*.

        Raises
        ------
        DocumentNotFoundError
            If *key* is absent (or expired).
        StoreError
            For transport or server failures.
        """

    @abstractmethod
    def store(self, key: str, value: Any, ttl_seconds: int) -> Any:
        """Upsert *value* under *key*.

        Parameters
        ----------
        key:
            The document key.
        value:
            Opaque payload; serialization is the provider's concern.
        ttl_seconds:
            ``0`` for no expiry.  Values above
            :data:`src.utils.ttl.MAX_RELATIVE_TTL` are absolute Unix
            timestamps; negative values mean "already expired".

        Raises
        ------
        StoreError
            If the write fails.
        """

    @abstractmethod
    def remove(self, key: str) -> bool:
        """Delete *key*.

        Raises
        ------
        DocumentNotFoundError
            If *key* is absent.
        """

    @abstractmethod
    def exists(self, key: str) -> bool:
        """Return ``True`` if *key* is present and not expired."""

    @abstractmethod
    def flush_all(self) -> bool:
        """Wipe every key visible to this provider, regardless of namespace."""


def lookup(store: IStoreProvider, key: str) -> FetchResult:
    """Fetch *key* from *store* and tag the outcome instead of raising.

    ``DocumentNotFoundError`` becomes a MISS and any other ``StoreError``
    becomes a FAULT carrying the error.  Exceptions outside the
    ``StoreError`` hierarchy are bugs and propagate.
    """
    try:
        value = store.fetch(key)
    except DocumentNotFoundError:
        return FetchResult.miss()
    except StoreError as exc:
        logger.warning("store_fetch_fault", key=key, error=str(exc))
        return FetchResult.fault(exc)
    return FetchResult.hit(value)
