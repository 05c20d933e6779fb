"""Shape checks for the bulk cache operations."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from src.utils.errors import InvalidArgumentError


def ensure_key_collection(keys: Any) -> list[Any]:
    """Materialize *keys* as a list, rejecting anything that is not a key collection.

    Strings and bytes are iterable but are single keys, not collections,
    so they are rejected too.  Individual keys are checked later by the
    key validator.
    """
    if isinstance(keys, (str, bytes)) or not isinstance(keys, Iterable):
        raise InvalidArgumentError("The keys must be an iterable of keys")
    return list(keys)


def ensure_mapping(values: Any) -> Mapping[Any, Any]:
    """Return *values* if it is a ``{key: value}`` mapping."""
    if not isinstance(values, Mapping):
        raise InvalidArgumentError("The values must be a mapping {key: value, ...}")
    return values
