"""Unit tests for key validation and TTL normalization."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from src.utils.errors import InvalidArgumentError, InvalidKeyError
from src.utils.keys import compose_key, has_reserved_characters, validate_key
from src.utils.ttl import MAX_RELATIVE_TTL, interval_to_seconds, normalize_ttl, seconds_until
from tests.conftest import INVALID_KEYS, VALID_KEYS


# ======================================================================
# validate_key / compose_key
# ======================================================================


class TestValidateKey:
    @pytest.mark.parametrize("key", INVALID_KEYS)
    def test_invalid_keys_rejected(self, key: str) -> None:
        with pytest.raises(InvalidKeyError) as exc_info:
            validate_key(key)
        assert exc_info.value.key == key

    @pytest.mark.parametrize("key", VALID_KEYS)
    def test_valid_keys_accepted(self, key: str) -> None:
        assert validate_key(key) == key

    def test_error_message_names_the_key(self) -> None:
        with pytest.raises(InvalidKeyError, match='Invalid key "a:b" provided'):
            validate_key("a:b")

    def test_length_counts_utf8_bytes(self) -> None:
        assert validate_key("é" * 32) == "é" * 32  # 64 bytes
        with pytest.raises(InvalidKeyError):
            validate_key("é" * 33)  # 66 bytes

    def test_unencodable_key_rejected(self) -> None:
        with pytest.raises(InvalidKeyError) as exc_info:
            validate_key("bad\ud800")
        assert exc_info.value.key == "bad\ud800"

    def test_non_string_rejected(self) -> None:
        with pytest.raises(InvalidKeyError):
            validate_key(42)
        with pytest.raises(InvalidKeyError):
            validate_key(None)

    def test_invalid_key_is_an_invalid_argument(self) -> None:
        with pytest.raises(InvalidArgumentError):
            validate_key("")


class TestComposeKey:
    def test_prefixes_verbatim(self) -> None:
        assert compose_key("namespace.", "key") == "namespace.key"

    def test_namespace_can_invalidate_good_key(self) -> None:
        with pytest.raises(InvalidKeyError, match='Invalid key ":key1" provided'):
            compose_key(":", "key1")

    def test_namespace_pushes_key_over_length_limit(self) -> None:
        key = "k" * 60
        assert compose_key("", key) == key
        with pytest.raises(InvalidKeyError):
            compose_key("namespace.", key)

    def test_zero_exemption_only_for_exact_composed_key(self) -> None:
        assert compose_key("", "0") == "0"
        assert compose_key("0", "") == "0"
        with pytest.raises(InvalidKeyError):
            compose_key(":", "0")

    def test_non_string_key_rejected(self) -> None:
        with pytest.raises(InvalidKeyError):
            compose_key("ns.", 7)

    def test_has_reserved_characters(self) -> None:
        assert has_reserved_characters("bad:ns") is True
        assert has_reserved_characters("good.ns") is False


# ======================================================================
# normalize_ttl
# ======================================================================


class TestNormalizeTtl:
    _NOW = datetime(2024, 1, 1, 12, 0, 0, tzinfo=UTC)

    def test_none_is_zero(self) -> None:
        assert normalize_ttl(None) == 0

    def test_twenty_second_interval(self) -> None:
        assert normalize_ttl(timedelta(seconds=20)) == 20

    def test_interval_from_datetime_difference(self) -> None:
        interval = datetime(2010, 1, 1, 10, 10, 20) - datetime(2010, 1, 1, 10, 10, 0)
        assert normalize_ttl(interval) == 20

    def test_mixed_unit_interval(self) -> None:
        assert normalize_ttl(timedelta(days=1, hours=2, minutes=3, seconds=4)) == 93784

    def test_sub_second_interval_truncated(self) -> None:
        assert interval_to_seconds(timedelta(milliseconds=1500)) == 1

    def test_integer_passes_through_without_clamping(self) -> None:
        assert normalize_ttl(2_592_300) == 2_592_300
        assert normalize_ttl(10) == 10
        assert normalize_ttl(-5) == -5

    def test_future_instant(self) -> None:
        assert normalize_ttl(self._NOW + timedelta(seconds=10), now=self._NOW) == 10

    def test_past_instant_is_not_positive(self) -> None:
        assert normalize_ttl(self._NOW - timedelta(seconds=5), now=self._NOW) == -5

    def test_seconds_until_defaults_to_current_time(self) -> None:
        expiration = datetime.now(tz=UTC) + timedelta(hours=1)
        assert 3598 <= seconds_until(expiration) <= 3600

    @pytest.mark.parametrize("ttl", [True, False, 1.5, "10", [10]])
    def test_unsupported_types_rejected(self, ttl: object) -> None:
        with pytest.raises(InvalidArgumentError):
            normalize_ttl(ttl)  # type: ignore[arg-type]

    def test_interval_at_relative_limit_stays_relative(self) -> None:
        assert normalize_ttl(timedelta(days=30), now=self._NOW) == MAX_RELATIVE_TTL

    def test_long_interval_becomes_absolute_timestamp(self) -> None:
        expected = int(self._NOW.timestamp()) + 31 * 86400
        assert normalize_ttl(timedelta(days=31), now=self._NOW) == expected

    def test_distant_instant_becomes_absolute_timestamp(self) -> None:
        expiration = self._NOW + timedelta(days=31, seconds=5)
        assert normalize_ttl(expiration, now=self._NOW) == int(expiration.timestamp())

    def test_out_of_range_interval_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError, match="out of range"):
            normalize_ttl(timedelta(days=3_000_000))
