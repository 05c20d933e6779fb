"""In-memory store provider using cachetools.TLRUCache.

Per-entry expiry follows the document-store TTL convention:

* ``0``                              -> never expires
* ``1 .. MAX_RELATIVE_TTL``          -> expires that many seconds from now
* ``> MAX_RELATIVE_TTL``             -> absolute Unix timestamp
* negative                           -> already expired; nothing is stored

Suitable for tests, development and single-process deployments.  A
networked document store can be swapped in through ``IStoreProvider``
without touching either cache.
"""

from __future__ import annotations

import math
import time
from collections.abc import Callable
from typing import Any, NamedTuple

import structlog
from cachetools import TLRUCache

from src.interfaces.store_provider import IStoreProvider
from src.utils.errors import DocumentNotFoundError
from src.utils.ttl import MAX_RELATIVE_TTL

logger = structlog.get_logger(logger_name=__name__)

_PROVIDER_NAME = "memory"


class _Entry(NamedTuple):
    value: Any
    expires_at: float


def resolve_expiry(ttl_seconds: int, now: float) -> float:
    """Translate a store TTL into an absolute expiry time (``math.inf`` = never)."""
    if ttl_seconds == 0:
        return math.inf
    if ttl_seconds > MAX_RELATIVE_TTL:
        return float(ttl_seconds)
    return now + ttl_seconds


def _time_to_use(_key: str, entry: _Entry, _now: float) -> float:
    return entry.expires_at


class MemoryStoreProvider(IStoreProvider):
    """In-process store backed by ``cachetools.TLRUCache``.

    Parameters
    ----------
    max_size:
        Maximum number of entries before the least-recently-used entry
        is evicted.
    timer:
        Clock returning Unix time in seconds; injectable for tests.
    """

    def __init__(
        self,
        max_size: int = 10000,
        timer: Callable[[], float] = time.time,
    ) -> None:
        self._timer = timer
        self._cache: TLRUCache[str, _Entry] = TLRUCache(
            maxsize=max_size, ttu=_time_to_use, timer=timer
        )

    # ------------------------------------------------------------------
    # IStoreProvider implementation
    # ------------------------------------------------------------------

    def fetch(self, key: str) -> Any:
        try:
            entry = self._cache[key]
        except KeyError:
            raise DocumentNotFoundError(key, provider_name=_PROVIDER_NAME) from None
        return entry.value

    def store(self, key: str, value: Any, ttl_seconds: int) -> Any:
        now = self._timer()
        expires_at = resolve_expiry(ttl_seconds, now)
        if ttl_seconds < 0 or expires_at <= now:
            self._cache.pop(key, None)
            logger.debug("store_write_already_expired", key=key, ttl=ttl_seconds)
            return value

        self._cache[key] = _Entry(value, expires_at)
        logger.debug("store_write", key=key, ttl=ttl_seconds)
        return value

    def remove(self, key: str) -> bool:
        try:
            del self._cache[key]
        except KeyError:
            raise DocumentNotFoundError(key, provider_name=_PROVIDER_NAME) from None
        logger.debug("store_remove", key=key)
        return True

    def exists(self, key: str) -> bool:
        return key in self._cache

    def flush_all(self) -> bool:
        self._cache.clear()
        logger.info("store_flushed", provider=_PROVIDER_NAME)
        return True

    def __len__(self) -> int:
        return len(self._cache)
