"""cache-bridge models — re-exports all public model classes.

Other parts of the codebase can import directly from ``src.models``
(e.g. ``from src.models import CacheItem``) instead of the submodules:
    - cache_item.py — the mutable cache slot handed out by the item pool
    - store.py      — tagged result of a store lookup (HIT / MISS / FAULT)
"""

from __future__ import annotations

from src.models.cache_item import CacheItem
from src.models.store import FetchResult, FetchStatus

__all__ = [
    "CacheItem",
    "FetchResult",
    "FetchStatus",
]
