"""Tests for short code extraction and encoding detection."""

import pytest

from retailid.domain.errors import EmptyInputError, MalformedUrlError
from retailid.domain.shortcode import ShortCode, detect_encoding, extract_short_code
from retailid.domain.types import Encoding, EncodingHint


class TestExtractShortCode:
    def test_uppercase_scheme_hints_base36(self) -> None:
        assert extract_short_code("HTTPS://1A4.COM/ABC123") == ShortCode(
            short_code="ABC123", domain="1A4.COM", scheme_hint=Encoding.BASE36
        )

    def test_lowercase_scheme_hints_base64(self) -> None:
        result = extract_short_code("https://1a4.com/GkBg")
        assert result.scheme_hint is Encoding.BASE64
        assert result.domain == "1a4.com"
        assert result.short_code == "GkBg"

    def test_mixed_case_scheme_has_no_hint(self) -> None:
        assert extract_short_code("Https://1a4.com/abc").scheme_hint is None

    def test_strips_query_and_fragment(self) -> None:
        result = extract_short_code("https://1a4.com/code?utm=qr#top")
        assert result.short_code == "code"

    def test_fragment_containing_question_mark(self) -> None:
        assert extract_short_code("https://1a4.com/code#a?b").short_code == "code"

    def test_last_segment_wins(self) -> None:
        result = extract_short_code("https://example.com/a/b/code/")
        assert result.domain == "example.com"
        assert result.short_code == "code"

    def test_empty_segments_ignored(self) -> None:
        assert extract_short_code("https://1a4.com//code//").short_code == "code"

    def test_surrounding_whitespace_trimmed(self) -> None:
        assert extract_short_code("  HTTPS://1A4.COM/X1  \n").short_code == "X1"

    def test_bare_short_code(self) -> None:
        assert extract_short_code(" 5LN8CBN1UB33DON9CHKX ") == ShortCode(
            short_code="5LN8CBN1UB33DON9CHKX"
        )

    def test_non_letter_scheme_is_bare(self) -> None:
        result = extract_short_code("h2://x/y")
        assert result.domain is None
        assert result.short_code == "h2://x/y"

    @pytest.mark.parametrize("raw", ["", "   ", "\t\n"])
    def test_empty_input(self, raw: str) -> None:
        with pytest.raises(EmptyInputError):
            extract_short_code(raw)

    @pytest.mark.parametrize(
        "raw",
        [
            "https://1a4.com",
            "https://1a4.com/",
            "https://",
            "https://1a4.com?x=/y",
            "https://#/a/b",
        ],
    )
    def test_missing_path_segment(self, raw: str) -> None:
        with pytest.raises(MalformedUrlError):
            extract_short_code(raw)


class TestDetectEncoding:
    def test_hint_wins(self) -> None:
        assert detect_encoding("abc-def", Encoding.BASE36) is EncodingHint.BASE36
        assert detect_encoding("ABC", Encoding.BASE64) is EncodingHint.BASE64

    @pytest.mark.parametrize("code", ["ab-c", "ab_c", "-", "_x"])
    def test_base64_only_characters(self, code: str) -> None:
        assert detect_encoding(code) is EncodingHint.BASE64

    def test_ambiguous(self) -> None:
        assert detect_encoding("5LN8CBN1UB33DON9CHKX") is EncodingHint.UNKNOWN
