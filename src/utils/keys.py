"""Cache key validation and namespacing.

Keys are validated *after* the namespace has been prepended, so a
namespace containing a reserved character makes every key invalid.
The rules mirror what document stores accept as a document id:

1. the key must be a non-empty string;
2. the literal ``"0"`` is always accepted;
3. at most ``MAX_KEY_LENGTH`` bytes once UTF-8 encoded;
4. none of the characters in ``RESERVED_KEY_CHARACTERS``.
"""

from __future__ import annotations

import re

from src.utils.errors import InvalidKeyError

MAX_KEY_LENGTH = 65

RESERVED_KEY_CHARACTERS = ":@{}()/\\"

_RESERVED_PATTERN = re.compile(f"[{re.escape(RESERVED_KEY_CHARACTERS)}]")


def validate_key(key: object) -> str:
    """Return *key* unchanged if it is a legal cache key.

    Raises:
        InvalidKeyError: If any of the key rules is violated.
    """
    if not isinstance(key, str) or key == "":
        raise InvalidKeyError(key)

    # "0" looks falsy in some callers but is a perfectly valid document id.
    if key == "0":
        return key

    try:
        encoded = key.encode("utf-8")
    except UnicodeEncodeError:
        # Lone surrogates cannot be sent to the store as a document id.
        raise InvalidKeyError(key) from None
    if len(encoded) > MAX_KEY_LENGTH:
        raise InvalidKeyError(key)

    if _RESERVED_PATTERN.search(key):
        raise InvalidKeyError(key)

    return key


def compose_key(namespace: str, key: object) -> str:
    """Prefix *key* with *namespace* and validate the result."""
    if not isinstance(key, str):
        raise InvalidKeyError(key)
    return validate_key(namespace + key)


def has_reserved_characters(value: str) -> bool:
    """Return ``True`` if *value* contains any reserved key character."""
    return _RESERVED_PATTERN.search(value) is not None
