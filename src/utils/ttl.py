"""TTL normalization.

Every TTL accepted by the caches ends up as a plain integer number of
seconds before it reaches a store provider:

* ``None``               -> ``0`` (no expiration)
* ``int``                -> passed through untouched
* ``datetime.timedelta`` -> added to the Unix epoch, elapsed seconds read back
* ``datetime.datetime``  -> seconds from *now* until that instant

Stores follow the document-store convention of reading anything above
``MAX_RELATIVE_TTL`` as an absolute Unix timestamp (see
:class:`src.providers.store.memory_store.MemoryStoreProvider`).  Integers
are the caller's raw store value and pass through as given, but intervals
and instants that reach beyond that limit are converted to the absolute
expiry timestamp so they keep their meaning.
"""

from __future__ import annotations

import math
from datetime import UTC, datetime, timedelta

from src.utils.errors import InvalidArgumentError

# 30 days.  Larger expiry values are absolute Unix timestamps store-side.
MAX_RELATIVE_TTL = 2_592_000

_EPOCH = datetime.fromtimestamp(0, tz=UTC)


def interval_to_seconds(interval: timedelta) -> int:
    """Convert *interval* to whole seconds by adding it to the Unix epoch.

    Raises:
        InvalidArgumentError: If the interval lies outside the representable
            date range.
    """
    try:
        return math.floor((_EPOCH + interval).timestamp())
    except OverflowError:
        raise InvalidArgumentError(f"Invalid TTL interval {interval!r}: out of range") from None


def seconds_until(expiration: datetime, now: datetime | None = None) -> int:
    """Whole seconds between *now* and *expiration*; negative once it has passed."""
    if now is None:
        now = datetime.now(tz=UTC)
    return math.floor(expiration.timestamp()) - math.floor(now.timestamp())


def _beyond_relative_limit(seconds: int, now: datetime | None) -> int:
    if seconds <= MAX_RELATIVE_TTL:
        return seconds
    if now is None:
        now = datetime.now(tz=UTC)
    return math.floor(now.timestamp()) + seconds


def normalize_ttl(
    ttl: int | timedelta | datetime | None,
    now: datetime | None = None,
) -> int:
    """Normalize any supported TTL representation to integer seconds.

    Args:
        ttl: ``None``, seconds, a relative ``timedelta`` or an absolute
            ``datetime``.
        now: Reference instant for ``datetime`` TTLs and for intervals or
            instants past ``MAX_RELATIVE_TTL``; defaults to the current time.

    Returns:
        The TTL in seconds, or an absolute Unix timestamp once a
        ``timedelta``/``datetime`` reaches past ``MAX_RELATIVE_TTL``.
        ``0`` means "never expires".

    Raises:
        InvalidArgumentError: If *ttl* is of an unsupported type or out of range.
    """
    if ttl is None:
        return 0
    # bool is an int subclass; True/False are almost certainly a caller bug.
    if isinstance(ttl, bool):
        raise InvalidArgumentError(f"Invalid TTL {ttl!r}: expected seconds, timedelta or datetime")
    if isinstance(ttl, int):
        return ttl
    if isinstance(ttl, timedelta):
        return _beyond_relative_limit(interval_to_seconds(ttl), now)
    if isinstance(ttl, datetime):
        if now is None:
            now = datetime.now(tz=UTC)
        return _beyond_relative_limit(seconds_until(ttl, now=now), now)
    raise InvalidArgumentError(
        f"Invalid TTL of type {type(ttl).__name__}: expected seconds, timedelta or datetime"
    )
