"""Store providers.

MemoryStoreProvider keeps documents in a cachetools TLRUCache with
per-entry expiry.  It is not shared across processes; for multi-worker
deployments, plug in a networked document store implementing
IStoreProvider without changing either cache.
"""

from src.providers.store.memory_store import MemoryStoreProvider

__all__ = ["MemoryStoreProvider"]
