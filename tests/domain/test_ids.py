"""Tests for ObjectIdentifier construction, equality, and inspection."""

from datetime import UTC, datetime

import pytest

from retailid.domain.errors import ConfigurationError, FormatError
from retailid.domain.ids import (
    KNOWN_PREFIXES,
    MAX_OBJECT_ID_TIMESTAMP,
    MIN_OBJECT_ID_TIMESTAMP,
    ObjectIdentifier,
)
from samples import MONGO_HEX, SAMPLE_HEX


class TestFromHex:
    def test_round_trips_lowercase(self) -> None:
        assert ObjectIdentifier.from_hex(SAMPLE_HEX).to_hex() == SAMPLE_HEX

    def test_uppercase_input_is_lowercased(self) -> None:
        oid = ObjectIdentifier.from_hex(SAMPLE_HEX.upper())
        assert oid.to_hex() == SAMPLE_HEX

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "1a406030002008100000660",  # 23 chars
            "1a40603000200810000066090",  # 25 chars
            "1a406030002008100000660g",  # non-hex
            " 1a4060300020081000006609",  # whitespace
        ],
    )
    def test_rejects_malformed(self, value: str) -> None:
        with pytest.raises(FormatError):
            ObjectIdentifier.from_hex(value)

    def test_format_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            ObjectIdentifier.from_hex("nope")


class TestFromBytes:
    def test_copies_input(self) -> None:
        source = bytearray(range(12))
        oid = ObjectIdentifier.from_bytes(source)
        source[0] = 0xFF
        assert oid.binary == bytes(range(12))

    @pytest.mark.parametrize("length", [0, 11, 13])
    def test_rejects_wrong_length(self, length: int) -> None:
        with pytest.raises(FormatError):
            ObjectIdentifier.from_bytes(b"\x01" * length)

    def test_binary_is_immutable_bytes(self) -> None:
        oid = ObjectIdentifier.from_hex(SAMPLE_HEX)
        assert isinstance(oid.binary, bytes)
        assert oid.binary == bytes.fromhex(SAMPLE_HEX)


class TestFromRandom:
    def test_uses_random_source(self) -> None:
        oid = ObjectIdentifier.from_random(lambda n: b"\xab" * n)
        assert oid.to_hex() == "ab" * 12

    def test_default_source_produces_distinct_ids(self) -> None:
        assert ObjectIdentifier.from_random() != ObjectIdentifier.from_random()

    def test_missing_source_is_configuration_error(self) -> None:
        def unavailable(_n: int) -> bytes:
            raise NotImplementedError("no entropy")

        with pytest.raises(ConfigurationError):
            ObjectIdentifier.from_random(unavailable)


class TestEquality:
    def test_equal_ids(self) -> None:
        assert ObjectIdentifier.from_hex(SAMPLE_HEX) == ObjectIdentifier.from_hex(SAMPLE_HEX)

    def test_different_ids(self) -> None:
        assert ObjectIdentifier.from_hex(SAMPLE_HEX) != ObjectIdentifier.from_hex(MONGO_HEX)

    def test_equals_raw_bytes(self) -> None:
        assert ObjectIdentifier.from_hex(SAMPLE_HEX) == bytes.fromhex(SAMPLE_HEX)

    def test_not_equal_to_other_types(self) -> None:
        assert ObjectIdentifier.from_hex(SAMPLE_HEX) != SAMPLE_HEX

    def test_hashable(self) -> None:
        ids = {ObjectIdentifier.from_hex(SAMPLE_HEX), ObjectIdentifier.from_hex(SAMPLE_HEX)}
        assert len(ids) == 1

    def test_str_and_repr(self) -> None:
        oid = ObjectIdentifier.from_hex(SAMPLE_HEX)
        assert str(oid) == SAMPLE_HEX
        assert SAMPLE_HEX in repr(oid)


class TestInspection:
    def test_timestamp(self) -> None:
        oid = ObjectIdentifier.from_hex(MONGO_HEX)
        assert oid.timestamp == 0x5F5E1000
        assert oid.generated_at == datetime.fromtimestamp(0x5F5E1000, tz=UTC)

    def test_known_prefix(self) -> None:
        assert ObjectIdentifier.from_hex(SAMPLE_HEX).has_known_prefix()
        assert ObjectIdentifier.from_hex("abc" + "0" * 21).has_known_prefix()
        assert not ObjectIdentifier.from_hex(MONGO_HEX).has_known_prefix()

    def test_custom_prefixes(self) -> None:
        assert ObjectIdentifier.from_hex(MONGO_HEX).has_known_prefix(("5F5E",))

    def test_timestamp_range_is_half_open(self) -> None:
        lower = ObjectIdentifier.from_bytes(MIN_OBJECT_ID_TIMESTAMP.to_bytes(4, "big") + bytes(8))
        upper = ObjectIdentifier.from_bytes(MAX_OBJECT_ID_TIMESTAMP.to_bytes(4, "big") + bytes(8))
        assert lower.has_plausible_timestamp()
        assert not upper.has_plausible_timestamp()

    def test_range_constants(self) -> None:
        assert MIN_OBJECT_ID_TIMESTAMP == 1325376000
        assert MAX_OBJECT_ID_TIMESTAMP == 2587680000
        assert KNOWN_PREFIXES == ("1a4", "abc")
