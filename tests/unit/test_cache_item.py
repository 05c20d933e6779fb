"""Unit tests for CacheItem."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from src.models.cache_item import CacheItem
from src.utils.errors import InvalidArgumentError


class TestCacheItem:
    @pytest.fixture()
    def item(self) -> CacheItem:
        return CacheItem("key")

    def test_fresh_item_is_empty_miss(self, item: CacheItem) -> None:
        assert item.get() is None
        assert item.is_hit() is False
        assert item.ttl == 0

    def test_key(self, item: CacheItem) -> None:
        assert item.key == "key"

    def test_key_is_read_only(self, item: CacheItem) -> None:
        with pytest.raises(AttributeError):
            item.key = "other"  # type: ignore[misc]

    def test_set_returns_item_for_chaining(self, item: CacheItem) -> None:
        assert item.set("value") is item
        assert item.get() == "value"

    def test_set_does_not_make_a_hit(self, item: CacheItem) -> None:
        item.set("value")
        assert item.is_hit() is False

    def test_expires_at_none(self, item: CacheItem) -> None:
        assert item.expires_at(None).ttl == 0

    def test_expires_at_future_instant(self, item: CacheItem) -> None:
        expiration = datetime.now(tz=UTC) + timedelta(seconds=10)
        assert item.expires_at(expiration).ttl in (9, 10)

    def test_expires_at_rejects_non_datetime(self, item: CacheItem) -> None:
        with pytest.raises(InvalidArgumentError):
            item.expires_at(10)  # type: ignore[arg-type]

    def test_expires_after_none(self, item: CacheItem) -> None:
        item.expires_after(10)
        assert item.expires_after(None).ttl == 0

    def test_expires_after_int(self, item: CacheItem) -> None:
        assert item.expires_after(10).ttl == 10

    def test_expires_after_interval(self, item: CacheItem) -> None:
        interval = datetime(2010, 1, 1, 10, 10, 20) - datetime(2010, 1, 1, 10, 10, 0)
        assert item.expires_after(interval).ttl == 20

    def test_expires_after_rejects_datetime(self, item: CacheItem) -> None:
        with pytest.raises(InvalidArgumentError):
            item.expires_after(datetime.now(tz=UTC))  # type: ignore[arg-type]

    def test_mark_hit_populates_value(self, item: CacheItem) -> None:
        item._mark_hit("value")
        assert item.get() == "value"
        assert item.is_hit() is True

    def test_mark_saved_keeps_value(self, item: CacheItem) -> None:
        item.set({"name": "My Name", "age": 32})._mark_saved()
        assert item.get() == {"name": "My Name", "age": 32}
        assert item.is_hit() is True

    def test_repr(self, item: CacheItem) -> None:
        assert repr(item) == "CacheItem(key='key', is_hit=False, ttl=0)"
