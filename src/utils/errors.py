"""Custom exception hierarchy for cache-bridge.

All library exceptions inherit from :class:`CacheBridgeError`, which
carries an optional ``provider_name`` so error handlers can identify which
store backend (e.g. "memory", "couchbase") caused the failure.

The hierarchy separates programmer errors from data-availability and
infrastructure conditions:

    CacheBridgeError  (base -- catch-all for any cache-bridge error)
    +-- CacheArgumentError         (bad input shape; always propagates)
    |   +-- InvalidArgumentError   (bulk call got a non-collection argument)
    |       +-- InvalidKeyError    (composed key breaks the key rules)
    +-- StoreError                 (generic store fault: transport, server)
    |   +-- DocumentNotFoundError  (key absent from the store)
    +-- ConfigurationError         (startup / invalid settings)

The facades absorb ``DocumentNotFoundError`` into defaults, misses or
``False``; ``StoreError`` is absorbed on write paths and surfaced from the
simple cache's ``get``.  ``CacheArgumentError`` subclasses are never
downgraded to a boolean.
"""


class CacheBridgeError(Exception):
    """Base exception for all cache-bridge errors.

    Every subclass carries a human-readable ``message`` and an optional
    ``provider_name`` identifying which store backend triggered the
    error.  The ``__str__`` method prefixes the provider name in brackets
    for structured log output, e.g. ``[memory] Store unavailable``.
    """

    def __init__(
        self,
        message: str = "An unexpected cache error occurred",
        provider_name: str | None = None,
    ) -> None:
        self._message = message
        self._provider_name = provider_name
        super().__init__(self._message)

    @property
    def message(self) -> str:
        return self._message

    @property
    def provider_name(self) -> str | None:
        return self._provider_name

    def __str__(self) -> str:
        if self._provider_name:
            return f"[{self._provider_name}] {self._message}"
        return self._message


# ---------------------------------------------------------------------------
# Caller-side argument errors
# ---------------------------------------------------------------------------

class CacheArgumentError(CacheBridgeError):
    """Raised when a cache operation receives an argument it cannot accept."""

    def __init__(
        self,
        message: str = "Invalid cache argument",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


class InvalidArgumentError(CacheArgumentError):
    """Raised when a bulk operation gets something other than a collection.

    Also raised for TTL values of an unsupported type.
    """

    def __init__(
        self,
        message: str = "Invalid argument provided",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


class InvalidKeyError(InvalidArgumentError):
    """Raised when a namespaced key fails validation.

    The offending key is the *composed* one, so a bad namespace shows up
    here just like a bad caller key.
    """

    def __init__(self, key: object, provider_name: str | None = None) -> None:
        self._key = key
        super().__init__(
            message=f'Invalid key "{key}" provided',
            provider_name=provider_name,
        )

    @property
    def key(self) -> object:
        return self._key


# ---------------------------------------------------------------------------
# Store errors
# ---------------------------------------------------------------------------

class StoreError(CacheBridgeError):
    """Raised by a store provider for transport or server failures."""

    def __init__(
        self,
        message: str = "Store operation failed",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


class DocumentNotFoundError(StoreError):
    """Raised by a store provider when the requested key does not exist."""

    def __init__(self, key: str, provider_name: str | None = None) -> None:
        self._key = key
        super().__init__(
            message=f'Document "{key}" not found',
            provider_name=provider_name,
        )

    @property
    def key(self) -> str:
        return self._key


# ---------------------------------------------------------------------------
# Configuration errors
# ---------------------------------------------------------------------------

class ConfigurationError(CacheBridgeError):
    """Raised when configuration is invalid or missing at startup."""

    def __init__(
        self,
        message: str = "Invalid or missing configuration",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)
