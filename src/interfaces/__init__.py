"""Public interface definitions for the caches and their backing store.

The caches talk to storage exclusively through :class:`IStoreProvider`.
Concrete stores implement it and are injected at construction time, so a
networked document store can replace the in-memory one without touching
either cache, and unit tests can inject a mock store.

CONCRETE IMPLEMENTATION MAP:
    Interface          →  Concrete implementation
    ─────────────────────────────────────────────────────────────
    IStoreProvider     →  MemoryStoreProvider (src/providers/store/)
    ISimpleCache       →  SimpleCache         (src/services/simple_cache.py)
    ICacheItemPool     →  CacheItemPool       (src/services/item_pool.py)

Re-exports
----------
IStoreProvider, lookup
    Backing-store contract and the tagged-result fetch helper.
ISimpleCache, TTL
    Simple get/set/delete cache contract and the accepted TTL types.
ICacheItemPool
    Item-oriented cache contract with deferred writes.
"""

from src.interfaces.item_pool import ICacheItemPool
from src.interfaces.simple_cache import TTL, ISimpleCache
from src.interfaces.store_provider import IStoreProvider, lookup

__all__ = [
    "ICacheItemPool",
    "ISimpleCache",
    "IStoreProvider",
    "TTL",
    "lookup",
]
