"""CacheItem -- one cache slot handed out and consumed by the item pool.

An item starts bare (key only), gets populated by
:meth:`CacheItemPool.get_item <src.services.item_pool.CacheItemPool.get_item>`
or by the caller through :meth:`CacheItem.set`, may be queued with
``save_deferred`` and is finally written by ``save`` / ``commit``.

``is_hit()`` is ``True`` only once the value has made a confirmed store
round trip (a successful fetch or a successful save).  Only the pool
flips the flag, through the underscore-prefixed ``_mark_*`` methods; no
operation ever turns it back to ``False``.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any

from src.utils.errors import InvalidArgumentError
from src.utils.ttl import normalize_ttl


class CacheItem:
    """Mutable holder for a key, its value, the hit flag and a TTL."""

    def __init__(self, key: str) -> None:
        self._key = key
        self._value: Any = None
        self._is_hit = False
        self._ttl = 0

    def __repr__(self) -> str:
        return f"CacheItem(key={self._key!r}, is_hit={self._is_hit}, ttl={self._ttl})"

    @property
    def key(self) -> str:
        return self._key

    @property
    def ttl(self) -> int:
        """Seconds until expiry; ``0`` means no expiration."""
        return self._ttl

    def get(self) -> Any:
        return self._value

    def is_hit(self) -> bool:
        return self._is_hit

    def set(self, value: Any) -> CacheItem:
        self._value = value
        return self

    def expires_at(self, expiration: datetime | None) -> CacheItem:
        """Expire the item at an absolute instant, or never when ``None``.

        A past instant yields a TTL of zero or less, which stores treat as
        already expired.
        """
        if expiration is not None and not isinstance(expiration, datetime):
            raise InvalidArgumentError(
                f"Invalid expiration of type {type(expiration).__name__}: expected datetime"
            )
        self._ttl = normalize_ttl(expiration)
        return self

    def expires_after(self, time: int | timedelta | None) -> CacheItem:
        """Expire the item after *time* seconds or interval, or never when ``None``."""
        if isinstance(time, datetime):
            raise InvalidArgumentError("expires_after() takes seconds or a timedelta; use expires_at()")
        self._ttl = normalize_ttl(time)
        return self

    # ------------------------------------------------------------------
    # Pool-side transitions
    # ------------------------------------------------------------------

    def _mark_hit(self, value: Any) -> None:
        """Record a successful fetch of *value* from the store."""
        self._value = value
        self._is_hit = True

    def _mark_saved(self) -> None:
        """Record that the current value was written to the store."""
        self._is_hit = True
