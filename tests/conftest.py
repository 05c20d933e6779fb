"""Shared pytest fixtures for the cache-bridge test suite."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from src.interfaces.store_provider import IStoreProvider
from src.providers.store.memory_store import MemoryStoreProvider

# Keys rejected by the validator when used without a namespace.
INVALID_KEYS = [
    ":",
    "test{",
    "test}",
    "test(",
    "test)",
    "test:",
    "test/",
    "test@",
    "test\\",
    "",
    "testlargesize-testlargesize-testlargesize-testlargesize-testlarge-testlarge",
]

# Keys accepted by the validator when used without a namespace.  The last
# one is exactly 65 bytes long.
VALID_KEYS = [
    "_.#?",
    "0",
    "valid_key#valid_key*valid_key",
    "testlargesize-testlargesize-testlargesize-testlargesize-testlarge",
]


class FakeClock:
    """Manually advanced Unix clock for expiry tests."""

    def __init__(self, start: float = 1_700_000_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def mock_store() -> MagicMock:
    """A store double whose calls can be scripted and inspected."""
    store = MagicMock(spec=IStoreProvider)
    store.remove.return_value = True
    store.exists.return_value = False
    store.flush_all.return_value = True
    return store


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def memory_store(clock: FakeClock) -> MemoryStoreProvider:
    return MemoryStoreProvider(max_size=100, timer=clock)
