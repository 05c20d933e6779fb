"""Tagged result of a store lookup.

Store providers signal "not found" and genuine faults with exceptions.
:func:`~src.interfaces.store_provider.lookup` folds both into a
:class:`FetchResult` so the caches can branch on a status instead of
catching exception hierarchies:

    HIT    the key was fetched; ``value`` holds the payload
    MISS   the store reported the key as absent
    FAULT  the store failed; ``error`` holds the StoreError
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict

from src.utils.errors import StoreError


class FetchStatus(StrEnum):
    """Outcome of a single store fetch."""

    HIT = "HIT"
    MISS = "MISS"
    FAULT = "FAULT"


class FetchResult(BaseModel):
    """Immutable outcome of :func:`~src.interfaces.store_provider.lookup`."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    status: FetchStatus
    # Payload as returned by the store; only meaningful for HIT.
    value: Any = None
    # The swallowed store error; only set for FAULT.
    error: StoreError | None = None

    @classmethod
    def hit(cls, value: Any) -> FetchResult:
        return cls(status=FetchStatus.HIT, value=value)

    @classmethod
    def miss(cls) -> FetchResult:
        return cls(status=FetchStatus.MISS)

    @classmethod
    def fault(cls, error: StoreError) -> FetchResult:
        return cls(status=FetchStatus.FAULT, error=error)