"""ObjectIdentifier — the 12-byte batch identity inside every retail ID.

Byte-compatible with the MongoDB ObjectId layout: the first four bytes
are a big-endian Unix timestamp when the identifier was minted by a
mongo-style generator.

INVARIANT: An ObjectIdentifier is exactly 12 bytes and never changes.
"""

from __future__ import annotations

import os
import re
from collections.abc import Callable
from datetime import UTC, datetime

from retailid.domain.errors import ConfigurationError, FormatError

OBJECT_ID_LENGTH = 12

# Known retail ID prefixes, matched against the lowercase hex form.
KNOWN_PREFIXES: tuple[str, ...] = ("1a4", "abc")

# Plausible mongo timestamp range: [2012-01-01T00:00:00Z, 2052-01-01T00:00:00Z).
MIN_OBJECT_ID_TIMESTAMP = int(datetime(2012, 1, 1, tzinfo=UTC).timestamp())
MAX_OBJECT_ID_TIMESTAMP = int(datetime(2052, 1, 1, tzinfo=UTC).timestamp())

_HEX_PATTERN = re.compile(r"[0-9a-fA-F]{24}")


class ObjectIdentifier:
    """Immutable 12-byte identity value.

    Use the ``from_*`` constructors rather than calling the class directly.
    """

    __slots__ = ("_bytes",)

    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        raw = bytes(data)
        if len(raw) != OBJECT_ID_LENGTH:
            msg = f"ObjectIdentifier requires {OBJECT_ID_LENGTH} bytes, got {len(raw)}"
            raise FormatError(msg)
        self._bytes = raw

    @classmethod
    def from_random(cls, random_source: Callable[[int], bytes] | None = None) -> ObjectIdentifier:
        """Fill a new identifier from the OS secure random source.

        Raises:
            ConfigurationError: If no secure random source is available.
        """
        source = random_source or os.urandom
        try:
            data = source(OBJECT_ID_LENGTH)
        except NotImplementedError as exc:
            msg = "A secure random source is required to generate an ObjectIdentifier"
            raise ConfigurationError(msg) from exc
        return cls(data)

    @classmethod
    def from_hex(cls, value: str) -> ObjectIdentifier:
        """Parse a 24-character hex string (case-insensitive)."""
        if not isinstance(value, str) or _HEX_PATTERN.fullmatch(value) is None:
            msg = f"Invalid ObjectIdentifier hex string: {value!r}"
            raise FormatError(msg)
        return cls(bytes.fromhex(value))

    @classmethod
    def from_bytes(cls, data: bytes | bytearray | memoryview) -> ObjectIdentifier:
        """Copy an existing 12-byte sequence."""
        return cls(data)

    @property
    def binary(self) -> bytes:
        """The raw 12 bytes (an immutable copy)."""
        return self._bytes

    @property
    def timestamp(self) -> int:
        """First four bytes read as a big-endian Unix timestamp."""
        return int.from_bytes(self._bytes[:4], "big")

    @property
    def generated_at(self) -> datetime:
        return datetime.fromtimestamp(self.timestamp, tz=UTC)

    def to_hex(self) -> str:
        return self._bytes.hex()

    def has_known_prefix(self, prefixes: tuple[str, ...] = KNOWN_PREFIXES) -> bool:
        hex_id = self.to_hex()
        return any(hex_id.startswith(prefix.lower()) for prefix in prefixes)

    def has_plausible_timestamp(
        self,
        minimum: int = MIN_OBJECT_ID_TIMESTAMP,
        maximum: int = MAX_OBJECT_ID_TIMESTAMP,
    ) -> bool:
        return minimum <= self.timestamp < maximum

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ObjectIdentifier):
            return self._bytes == other._bytes
        if isinstance(other, (bytes, bytearray, memoryview)):
            return self._bytes == bytes(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._bytes)

    def __str__(self) -> str:
        return self.to_hex()

    def __repr__(self) -> str:
        return f"ObjectIdentifier({self.to_hex()!r})"
