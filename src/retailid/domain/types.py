"""Encoding and validation enums shared across the domain layer."""

from __future__ import annotations

from enum import StrEnum


class Encoding(StrEnum):
    """Textual encodings of a retail identifier buffer."""

    BASE36 = "base36"
    BASE64 = "base64"


class EncodingHint(StrEnum):
    """Result of encoding detection; ``UNKNOWN`` when nothing points either way."""

    BASE36 = "base36"
    BASE64 = "base64"
    UNKNOWN = "unknown"


class ValidationMode(StrEnum):
    """How strictly the identifier prefix of a decoded buffer is checked.

    - ``strict``: hex must start with a known prefix.
    - ``mongo``: first 4 bytes must be a plausible creation timestamp.
    - ``any``: no constraint.
    """

    STRICT = "strict"
    MONGO = "mongo"
    ANY = "any"


def legacy_fallback_mode(strict: bool) -> ValidationMode:
    """Map the legacy boolean ``strict`` flag to an explicit fallback mode."""
    return ValidationMode.MONGO if strict else ValidationMode.ANY
