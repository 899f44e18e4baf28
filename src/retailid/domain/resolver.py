"""RetailIdResolver — turn scanned text into a batch ID and index.

Resolution is a two-pass search over both encodings:

1. Strict pass: the decoded identifier must carry a known prefix.
2. Fallback pass: the configured fallback mode (``mongo`` or ``any``).

Within each pass the hinted encoding is tried first and the first
success wins. Decode failures inside a pass only advance the search;
exhausting both passes raises :class:`UnrecognizedIdError`.

INVARIANT: A strict match in either encoding always beats a relaxed
match in the hinted one.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from retailid.domain.base36 import decode_base36
from retailid.domain.base64url import decode_url64
from retailid.domain.errors import FormatError, RetailIdError, UnrecognizedIdError
from retailid.domain.ids import (
    KNOWN_PREFIXES,
    MAX_OBJECT_ID_TIMESTAMP,
    MIN_OBJECT_ID_TIMESTAMP,
    OBJECT_ID_LENGTH,
    ObjectIdentifier,
)
from retailid.domain.shortcode import detect_encoding, extract_short_code
from retailid.domain.types import Encoding, EncodingHint, ValidationMode
from retailid.domain.varint import VarInt

logger = logging.getLogger(__name__)

MIN_BUFFER_LENGTH = OBJECT_ID_LENGTH + 1

_TRY_ORDER: dict[EncodingHint, tuple[Encoding, Encoding]] = {
    EncodingHint.BASE36: (Encoding.BASE36, Encoding.BASE64),
    EncodingHint.BASE64: (Encoding.BASE64, Encoding.BASE36),
    EncodingHint.UNKNOWN: (Encoding.BASE36, Encoding.BASE64),
}


@dataclass(frozen=True)
class ParsedRetailId:
    """A fully resolved retail identifier."""

    batch_id: ObjectIdentifier
    index: int
    encoding: Encoding
    short_code: str
    domain: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "batch_id": self.batch_id.to_hex(),
            "index": self.index,
            "encoding": self.encoding.value,
            "domain": self.domain,
            "short_code": self.short_code,
        }


def decode_short_code(short_code: str, encoding: Encoding) -> bytes:
    """Decode *short_code* into a raw retail ID buffer."""
    if encoding is Encoding.BASE36:
        return decode_base36(short_code)
    return decode_url64(short_code)


def check_identifier(
    identifier: ObjectIdentifier,
    mode: ValidationMode,
    *,
    known_prefixes: tuple[str, ...] = KNOWN_PREFIXES,
    timestamp_range: tuple[int, int] = (MIN_OBJECT_ID_TIMESTAMP, MAX_OBJECT_ID_TIMESTAMP),
) -> None:
    """Validate *identifier* under *mode*.

    A known prefix satisfies every mode.

    Raises:
        FormatError: If the identifier does not satisfy *mode*.
    """
    if identifier.has_known_prefix(known_prefixes):
        return
    if mode is ValidationMode.STRICT:
        msg = f"Unknown retail ID prefix: {identifier.to_hex()}"
        raise FormatError(msg)
    if mode is ValidationMode.MONGO and not identifier.has_plausible_timestamp(*timestamp_range):
        msg = f"Implausible ObjectIdentifier timestamp: {identifier.to_hex()}"
        raise FormatError(msg)


def parse_retail_buffer(
    buffer: bytes,
    mode: ValidationMode,
    *,
    known_prefixes: tuple[str, ...] = KNOWN_PREFIXES,
    timestamp_range: tuple[int, int] = (MIN_OBJECT_ID_TIMESTAMP, MAX_OBJECT_ID_TIMESTAMP),
) -> tuple[ObjectIdentifier, int]:
    """Split a retail ID buffer into ``(batch_id, index)``.

    Bytes after the index VarInt are ignored.

    Raises:
        FormatError: If the buffer is too short or fails validation.
        UnderflowError: If the index VarInt never terminates.
        VarIntOverflowError: If the index exceeds the safe integer range.
    """
    if len(buffer) < MIN_BUFFER_LENGTH:
        msg = f"Buffer too short: expected at least {MIN_BUFFER_LENGTH} bytes, got {len(buffer)}"
        raise FormatError(msg)

    identifier = ObjectIdentifier.from_bytes(buffer[:OBJECT_ID_LENGTH])
    check_identifier(
        identifier,
        mode,
        known_prefixes=known_prefixes,
        timestamp_range=timestamp_range,
    )
    # TODO: decide with product whether trailing bytes after the index should be rejected.
    index, _ = VarInt.decode(buffer, OBJECT_ID_LENGTH)
    return identifier, index


class RetailIdResolver:
    """Resolve scanned text against a fixed prefix allowlist.

    Instances hold only immutable configuration and are safe to share.
    """

    def __init__(
        self,
        known_prefixes: Iterable[str] = KNOWN_PREFIXES,
        timestamp_range: tuple[int, int] = (MIN_OBJECT_ID_TIMESTAMP, MAX_OBJECT_ID_TIMESTAMP),
    ) -> None:
        self._known_prefixes = tuple(prefix.lower() for prefix in known_prefixes)
        self._timestamp_range = timestamp_range

    @property
    def known_prefixes(self) -> tuple[str, ...]:
        return self._known_prefixes

    def resolve(
        self,
        raw: str,
        *,
        validation_fallback: ValidationMode = ValidationMode.ANY,
        strict_prefixes_only: bool = False,
    ) -> ParsedRetailId:
        """Resolve *raw* (URL or bare short code) to a :class:`ParsedRetailId`.

        Raises:
            EmptyInputError: If *raw* is blank.
            MalformedUrlError: If *raw* is a URL without a short code.
            UnrecognizedIdError: If no encoding/validation combination fits.
        """
        extracted = extract_short_code(raw)
        hint = detect_encoding(extracted.short_code, extracted.scheme_hint)
        order = _TRY_ORDER[hint]

        modes = [ValidationMode.STRICT]
        if not strict_prefixes_only:
            modes.append(ValidationMode(validation_fallback))

        for mode in modes:
            for encoding in order:
                found = self._attempt(extracted.short_code, encoding, mode)
                if found is None:
                    continue
                batch_id, index = found
                logger.debug(
                    "Resolved %s as %s under %s validation", extracted.short_code, encoding, mode
                )
                return ParsedRetailId(
                    batch_id=batch_id,
                    index=index,
                    encoding=encoding,
                    short_code=extracted.short_code,
                    domain=extracted.domain,
                )

        if strict_prefixes_only:
            msg = f"Unrecognized retail ID (strict prefixes only): {raw!r}"
        else:
            msg = f"Unrecognized retail ID: {raw!r}"
        raise UnrecognizedIdError(msg)

    def _attempt(
        self, short_code: str, encoding: Encoding, mode: ValidationMode
    ) -> tuple[ObjectIdentifier, int] | None:
        try:
            buffer = decode_short_code(short_code, encoding)
            return parse_retail_buffer(
                buffer,
                mode,
                known_prefixes=self._known_prefixes,
                timestamp_range=self._timestamp_range,
            )
        except RetailIdError as exc:
            logger.debug("%s decode under %s validation failed: %s", encoding, mode, exc)
            return None


_default_resolver = RetailIdResolver()


def resolve(
    raw: str,
    *,
    validation_fallback: ValidationMode = ValidationMode.ANY,
    strict_prefixes_only: bool = False,
) -> ParsedRetailId:
    """Resolve *raw* with the built-in prefix allowlist."""
    return _default_resolver.resolve(
        raw,
        validation_fallback=validation_fallback,
        strict_prefixes_only=strict_prefixes_only,
    )
