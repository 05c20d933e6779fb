"""Item-oriented cache with a deferred-write buffer.

Unlike :class:`~src.services.simple_cache.SimpleCache`, retrieval never
raises for store problems: ``get_item`` always returns a
:class:`CacheItem`, and a missing key or a failed fetch just leaves it as a
miss.  Only key validation errors reach the caller.

Writes can be batched: ``save_deferred`` queues an item, ``commit``
saves every queued item once, attempting all of them even after a
failure, and reports ``True`` only if every save succeeded.

A pool instance owns its deferred buffer and is not thread-safe; callers
sharing one across threads must serialize ``save_deferred`` / ``commit``.
"""

from __future__ import annotations

from collections.abc import Iterable

import structlog

from src.interfaces.item_pool import ICacheItemPool
from src.interfaces.store_provider import IStoreProvider, lookup
from src.models.cache_item import CacheItem
from src.models.store import FetchStatus
from src.utils.arguments import ensure_key_collection
from src.utils.errors import DocumentNotFoundError, InvalidKeyError, StoreError
from src.utils.keys import compose_key, has_reserved_characters

logger = structlog.get_logger(logger_name=__name__)


class CacheItemPool(ICacheItemPool):
    """Namespaced item pool backed by an :class:`IStoreProvider`.

    Parameters
    ----------
    store:
        The backing store provider.
    namespace:
        Prefix prepended verbatim to every item key before it reaches the
        store.  Items themselves keep their bare key.
    """

    def __init__(self, store: IStoreProvider, namespace: str = "") -> None:
        self._store = store
        self._namespace = namespace
        self._deferred: dict[str, CacheItem] = {}
        if has_reserved_characters(namespace):
            logger.warning("namespace_contains_reserved_characters", namespace=namespace)

    @property
    def namespace(self) -> str:
        return self._namespace

    @property
    def deferred_count(self) -> int:
        """Number of items waiting for the next :meth:`commit`."""
        return len(self._deferred)

    # ------------------------------------------------------------------
    # Retrieval
    # ------------------------------------------------------------------

    def get_item(self, key: str) -> CacheItem:
        composed = compose_key(self._namespace, key)
        item = CacheItem(key)

        result = lookup(self._store, composed)
        if result.status is FetchStatus.HIT:
            item._mark_hit(result.value)
            logger.debug("cache_hit", key=composed)
        elif result.status is FetchStatus.MISS:
            logger.debug("cache_miss", key=composed)
        else:
            # Item retrieval hides store faults; the item stays a miss.
            logger.warning("store_fault_on_get_item", key=composed, error=str(result.error))
        return item

    def get_items(self, keys: Iterable[str] = ()) -> dict[str, CacheItem]:
        keys = ensure_key_collection(keys)
        return {key: self.get_item(key) for key in keys}

    def has_item(self, key: str) -> bool:
        return self._store.exists(compose_key(self._namespace, key))

    # ------------------------------------------------------------------
    # Removal
    # ------------------------------------------------------------------

    def clear(self) -> bool:
        if self._namespace:
            logger.info("cache_clear_refused", namespace=self._namespace)
            return False

        flushed = self._store.flush_all()
        if flushed:
            self._deferred.clear()
        return flushed

    def delete_item(self, key: str) -> bool:
        composed = compose_key(self._namespace, key)
        try:
            return self._store.remove(composed)
        except DocumentNotFoundError:
            logger.debug("cache_delete_missing", key=composed)
            return False

    def delete_items(self, keys: Iterable[str]) -> bool:
        keys = ensure_key_collection(keys)
        # Materialize first so every delete runs before the results are combined.
        results = [self.delete_item(key) for key in keys]
        return all(results)

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def save(self, item: CacheItem) -> bool:
        composed = compose_key(self._namespace, item.key)
        try:
            self._store.store(composed, item.get(), item.ttl)
        except StoreError as exc:
            logger.warning("cache_write_failed", key=composed, error=str(exc))
            return False

        item._mark_saved()
        logger.debug("cache_set", key=composed, ttl=item.ttl)
        return True

    def save_deferred(self, item: CacheItem) -> bool:
        self._deferred[item.key] = item
        return True

    def commit(self) -> bool:
        results: list[bool] = []
        # Items leave the buffer one at a time, so an unexpected exception
        # keeps every item that has not been attempted yet queued.
        while self._deferred:
            item = self._deferred.pop(next(iter(self._deferred)))
            try:
                results.append(self.save(item))
            except InvalidKeyError as exc:
                # repr keeps keys with unencodable characters printable.
                logger.warning("deferred_item_rejected", key=repr(exc.key))
                results.append(False)

        succeeded = all(results)
        logger.info(
            "deferred_commit_completed",
            attempted=len(results),
            failed=results.count(False),
            succeeded=succeeded,
        )
        return succeeded
