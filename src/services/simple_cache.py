"""Simple key-value cache on top of a store provider.

Every operation composes ``namespace + key``, validates it and only then
talks to the store.  Failure handling is deliberately asymmetric:

* argument problems (bad key, non-collection bulk argument) always raise;
* "not found" becomes the caller's default on ``get`` and ``False`` on
  ``delete``;
* store faults become ``False`` on ``set`` but propagate from ``get``, so
  a broken store is never mistaken for a cache miss.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

import structlog

from src.interfaces.simple_cache import TTL, ISimpleCache
from src.interfaces.store_provider import IStoreProvider, lookup
from src.models.store import FetchStatus
from src.utils.arguments import ensure_key_collection, ensure_mapping
from src.utils.errors import DocumentNotFoundError, StoreError
from src.utils.keys import compose_key, has_reserved_characters
from src.utils.ttl import normalize_ttl

logger = structlog.get_logger(logger_name=__name__)


class SimpleCache(ISimpleCache):
    """Namespaced get/set/delete cache backed by an :class:`IStoreProvider`.

    Parameters
    ----------
    store:
        The backing store provider.
    namespace:
        Prefix prepended verbatim to every key.  A namespaced cache refuses
        to :meth:`clear`, since it cannot flush only its own keys.
    """

    def __init__(self, store: IStoreProvider, namespace: str = "") -> None:
        self._store = store
        self._namespace = namespace
        if has_reserved_characters(namespace):
            logger.warning("namespace_contains_reserved_characters", namespace=namespace)

    @property
    def namespace(self) -> str:
        return self._namespace

    # ------------------------------------------------------------------
    # Single-key operations
    # ------------------------------------------------------------------

    def get(self, key: str, default: Any = None) -> Any:
        composed = compose_key(self._namespace, key)
        result = lookup(self._store, composed)

        if result.status is FetchStatus.HIT:
            logger.debug("cache_hit", key=composed)
            return result.value
        if result.status is FetchStatus.MISS:
            logger.debug("cache_miss", key=composed)
            return default
        raise result.error

    def set(self, key: str, value: Any, ttl: TTL = None) -> bool:
        composed = compose_key(self._namespace, key)
        seconds = normalize_ttl(ttl)

        try:
            self._store.store(composed, value, seconds)
        except StoreError as exc:
            logger.warning("cache_write_failed", key=composed, error=str(exc))
            return False

        logger.debug("cache_set", key=composed, ttl=seconds)
        return True

    def delete(self, key: str) -> bool:
        composed = compose_key(self._namespace, key)
        try:
            return self._store.remove(composed)
        except DocumentNotFoundError:
            logger.debug("cache_delete_missing", key=composed)
            return False

    def has(self, key: str) -> bool:
        return self._store.exists(compose_key(self._namespace, key))

    def clear(self) -> bool:
        if self._namespace:
            logger.info("cache_clear_refused", namespace=self._namespace)
            return False
        return self._store.flush_all()

    # ------------------------------------------------------------------
    # Bulk operations
    # ------------------------------------------------------------------

    def get_multiple(self, keys: Iterable[str], default: Any = None) -> dict[str, Any]:
        keys = ensure_key_collection(keys)
        return {key: self.get(key, default) for key in keys}

    def set_multiple(self, values: Mapping[str, Any], ttl: TTL = None) -> bool:
        values = ensure_mapping(values)
        for key, value in values.items():
            if not self.set(key, value, ttl):
                return False
        return True

    def delete_multiple(self, keys: Iterable[str]) -> bool:
        keys = ensure_key_collection(keys)
        for key in keys:
            if not self.delete(key):
                return False
        return True
