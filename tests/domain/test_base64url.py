"""Tests for the legacy URL-safe base-64 helpers."""

import pytest

from retailid.domain.base64url import decode_url64, encode_url64
from retailid.domain.errors import FormatError
from samples import SAMPLE_BASE64_CODE, SAMPLE_HEX


class TestEncodeUrl64:
    def test_sample_buffer(self) -> None:
        assert encode_url64(bytes.fromhex(SAMPLE_HEX) + b"\x01") == SAMPLE_BASE64_CODE

    def test_strips_padding(self) -> None:
        assert encode_url64(b"\x01") == "AQ"

    def test_url_safe_substitutions(self) -> None:
        assert encode_url64(b"\xfb\xff") == "-_8"


class TestDecodeUrl64:
    def test_restores_padding(self) -> None:
        assert decode_url64("AQ") == b"\x01"

    def test_reverses_substitutions(self) -> None:
        assert decode_url64("-_8") == b"\xfb\xff"

    def test_sample_code(self) -> None:
        assert decode_url64(SAMPLE_BASE64_CODE) == bytes.fromhex(SAMPLE_HEX) + b"\x01"

    @pytest.mark.parametrize("value", ["!!!not-valid!!!", "A", "AB CD", "AQ==="])
    def test_rejects_invalid(self, value: str) -> None:
        with pytest.raises(FormatError):
            decode_url64(value)

    @pytest.mark.parametrize("data", [b"\x00", b"\x00\x01\x02", bytes(range(64))])
    def test_round_trip(self, data: bytes) -> None:
        assert decode_url64(encode_url64(data)) == data
