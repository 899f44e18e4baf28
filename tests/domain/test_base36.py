"""Tests for the reversible base-36 codec."""

import pytest

from retailid.domain.base36 import decode_base36, encode_base36, is_base36
from retailid.domain.errors import EmptyInputError, FormatError
from samples import SAMPLE_BASE36_CODE, SAMPLE_HEX


class TestEncode:
    @pytest.mark.parametrize(
        "data,expected",
        [
            (b"\x00", "0"),
            (b"\x00\x00\x00", "000"),
            (b"\x01", "1"),
            (b"\x23", "Z"),
            (b"\x24", "10"),
            (b"\xff", "73"),
            (b"\x00\x01", "01"),
            (b"\x00\x00\x24", "0010"),
            (b"\x05\x0f", "ZZ"),
        ],
    )
    def test_known_vectors(self, data: bytes, expected: str) -> None:
        assert encode_base36(data) == expected

    def test_sample_buffer(self) -> None:
        buffer = bytes.fromhex(SAMPLE_HEX) + b"\x01"
        assert encode_base36(buffer) == SAMPLE_BASE36_CODE

    def test_output_is_uppercase(self) -> None:
        assert encode_base36(b"\xde\xad\xbe\xef").isupper()

    def test_empty_input(self) -> None:
        with pytest.raises(EmptyInputError):
            encode_base36(b"")


class TestDecode:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("0", b"\x00"),
            ("00", b"\x00\x00"),
            ("10", b"\x24"),
            ("ZZ", b"\x05\x0f"),
            ("0010", b"\x00\x00\x24"),
        ],
    )
    def test_known_vectors(self, value: str, expected: bytes) -> None:
        assert decode_base36(value) == expected

    def test_case_insensitive(self) -> None:
        assert decode_base36(SAMPLE_BASE36_CODE) == decode_base36(SAMPLE_BASE36_CODE.lower())

    @pytest.mark.parametrize("value", ["", "AB-C", "AB_C", "1_2", " 12", "12\n", "+12", "Ä"])
    def test_rejects_invalid(self, value: str) -> None:
        with pytest.raises(FormatError):
            decode_base36(value)


class TestBijection:
    @pytest.mark.parametrize(
        "data",
        [
            b"\x00",
            b"\x00\x00\xff",
            b"\x01\x00",
            b"\xff" * 13,
            b"\x00" * 5 + b"\x80" + b"\x00" * 5,
            bytes(range(256)),
        ],
    )
    def test_bytes_survive(self, data: bytes) -> None:
        assert decode_base36(encode_base36(data)) == data

    @pytest.mark.parametrize("value", ["0", "00a", "zz", "0Zq9", SAMPLE_BASE36_CODE.lower()])
    def test_strings_canonicalize_to_uppercase(self, value: str) -> None:
        assert encode_base36(decode_base36(value)) == value.upper()

    def test_long_input_round_trips(self) -> None:
        data = bytes(range(1, 256)) * 12
        encoded = encode_base36(data)
        assert len(encoded) > 4300
        assert decode_base36(encoded) == data

    def test_long_string_decodes(self) -> None:
        value = "Z" * 5000
        assert encode_base36(decode_base36(value)) == value


class TestIsBase36:
    def test_accepts_alphanumerics(self) -> None:
        assert is_base36("abcXYZ019")

    @pytest.mark.parametrize("value", ["", "a-b", "a_b", "a b"])
    def test_rejects_others(self, value: str) -> None:
        assert not is_base36(value)
