"""Utility modules for cache-bridge.

Available utility modules (all re-exported here for convenience):

- **errors** -- Exception hierarchy rooted at CacheBridgeError; argument
  errors always propagate, store errors are absorbed or surfaced by the
  caches according to their contracts.
- **keys** -- Namespaced key composition and validation (length and
  reserved-character rules).
- **ttl** -- Normalization of seconds, timedeltas and datetimes to integer
  TTL seconds.
- **arguments** -- Shape checks for the bulk operations.
- **logging** -- structlog setup with a dual-renderer pattern: coloured
  console output in development, structured JSON in production.
"""

# -- Bulk argument checks ---------------------------------------------------
from src.utils.arguments import ensure_key_collection, ensure_mapping

# -- Exception hierarchy ------------------------------------------------------
from src.utils.errors import (
    CacheArgumentError,
    CacheBridgeError,
    ConfigurationError,
    DocumentNotFoundError,
    InvalidArgumentError,
    InvalidKeyError,
    StoreError,
)

# -- Key rules ----------------------------------------------------------------
from src.utils.keys import MAX_KEY_LENGTH, RESERVED_KEY_CHARACTERS, compose_key, validate_key

# -- Structured logging setup ---------------------------------------------------
from src.utils.logging import configure_logging, get_logger

# -- TTL normalization --------------------------------------------------------
from src.utils.ttl import MAX_RELATIVE_TTL, normalize_ttl

__all__ = [
    "MAX_KEY_LENGTH",
    "MAX_RELATIVE_TTL",
    "RESERVED_KEY_CHARACTERS",
    "CacheArgumentError",
    "CacheBridgeError",
    "ConfigurationError",
    "DocumentNotFoundError",
    "InvalidArgumentError",
    "InvalidKeyError",
    "StoreError",
    "compose_key",
    "configure_logging",
    "ensure_key_collection",
    "ensure_mapping",
    "get_logger",
    "normalize_ttl",
    "validate_key",
]
