"""Short code extraction and encoding detection for scanned input.

Pure functions, no infrastructure dependencies. The scheme is matched on
the raw text (not through ``urllib``) because its casing carries the
encoding hint: ``HTTPS://`` marks base-36 and ``https://`` marks base-64.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from retailid.domain.errors import EmptyInputError, MalformedUrlError
from retailid.domain.types import Encoding, EncodingHint

_SCHEME_PATTERN = re.compile(r"^([A-Za-z]+)://")

# Present in URL-safe base-64, absent from the base-36 alphabet.
_BASE64_ONLY_CHARS = frozenset("-_")


@dataclass(frozen=True)
class ShortCode:
    """The identifying parts of a scanned string."""

    short_code: str
    domain: str | None = None
    scheme_hint: Encoding | None = None


def _scheme_hint(scheme: str) -> Encoding | None:
    if scheme == scheme.upper():
        return Encoding.BASE36
    if scheme == scheme.lower():
        return Encoding.BASE64
    return None


def extract_short_code(raw: str) -> ShortCode:
    """Split *raw* into short code, domain, and scheme-casing hint.

    URL input (``scheme://domain/.../code``) drops the fragment and query,
    ignores empty path segments, and takes the first segment as the domain
    and the last as the short code. Anything else is a bare short code.

    Raises:
        EmptyInputError: If *raw* is empty after trimming.
        MalformedUrlError: If a URL lacks a short code segment.
    """
    text = (raw or "").strip()
    if not text:
        msg = "Empty retail ID input"
        raise EmptyInputError(msg)

    match = _SCHEME_PATTERN.match(text)
    if match is None:
        return ShortCode(short_code=text)

    remainder = text[match.end() :]
    remainder = remainder.split("#", 1)[0]
    remainder = remainder.split("?", 1)[0]
    segments = [segment for segment in remainder.split("/") if segment]
    if len(segments) < 2:
        msg = f"No short code path segment in URL: {text!r}"
        raise MalformedUrlError(msg)

    return ShortCode(
        short_code=segments[-1],
        domain=segments[0],
        scheme_hint=_scheme_hint(match.group(1)),
    )


def detect_encoding(short_code: str, scheme_hint: Encoding | None = None) -> EncodingHint:
    """Pick the most likely encoding for *short_code*.

    A scheme hint always wins. Otherwise ``-`` or ``_`` implies base-64;
    anything else is ambiguous.
    """
    if scheme_hint is not None:
        return EncodingHint(scheme_hint.value)
    if _BASE64_ONLY_CHARS.intersection(short_code):
        return EncodingHint.BASE64
    return EncodingHint.UNKNOWN
