"""cache-bridge assembly helpers.

Wires a store provider and the two caches together from ``Settings`` and
``config/config.yaml``.  Applications that bring their own store can skip
``build_store`` and pass it straight to ``build_simple_cache`` /
``build_item_pool``.
"""

from __future__ import annotations

from typing import Any

import structlog

from src.config.loader import load_config
from src.config.settings import Settings
from src.interfaces.store_provider import IStoreProvider
from src.providers.store.memory_store import MemoryStoreProvider
from src.services.item_pool import CacheItemPool
from src.services.simple_cache import SimpleCache
from src.utils.errors import ConfigurationError
from src.utils.logging import configure_logging, get_logger

_SUPPORTED_BACKENDS = ("memory",)


def build_store(app_settings: Settings, config: dict[str, Any] | None = None) -> IStoreProvider:
    """Build the store provider selected by ``store.backend`` (default ``memory``)."""
    store_config = (config or {}).get("store", {})
    backend = store_config.get("backend", "memory")
    if backend not in _SUPPORTED_BACKENDS:
        raise ConfigurationError(
            f"Unknown store backend {backend!r}; expected one of {', '.join(_SUPPORTED_BACKENDS)}",
            provider_name=str(backend),
        )
    return MemoryStoreProvider(max_size=app_settings.store_max_size)


def build_simple_cache(
    app_settings: Settings,
    store: IStoreProvider | None = None,
) -> SimpleCache:
    """Build a :class:`SimpleCache` in the configured namespace."""
    if store is None:
        store = build_store(app_settings)
    return SimpleCache(store, namespace=app_settings.cache_namespace)


def build_item_pool(
    app_settings: Settings,
    store: IStoreProvider | None = None,
) -> CacheItemPool:
    """Build a :class:`CacheItemPool` in the configured namespace."""
    if store is None:
        store = build_store(app_settings)
    return CacheItemPool(store, namespace=app_settings.cache_namespace)


def bootstrap(
    app_settings: Settings | None = None,
    config_path: str = "config/config.yaml",
) -> tuple[SimpleCache, CacheItemPool]:
    """Load configuration, configure logging and build both caches on one store.

    The simple cache and the item pool share the same store and namespace,
    so values written through one are visible through the other.
    """
    if app_settings is None:
        app_settings = Settings()
    config = load_config(config_path, settings=app_settings)

    configure_logging(
        log_level=app_settings.log_level,
        json_output=(app_settings.app_env == "production"),
        namespace=app_settings.cache_namespace if app_settings.is_namespaced else None,
    )
    backend = config.get("store", {}).get("backend", "memory")
    logger: structlog.BoundLogger = get_logger(__name__, backend=backend)

    store = build_store(app_settings, config)
    simple_cache = build_simple_cache(app_settings, store=store)
    item_pool = build_item_pool(app_settings, store=store)

    logger.info("cache_bridge_ready", env=app_settings.app_env)
    return simple_cache, item_pool
