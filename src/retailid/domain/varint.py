"""Unsigned LEB128 variable-length integers.

Seven data bits per byte, least-significant group first, with the high
bit (0x80) marking continuation. Values are bounded by
``MAX_SAFE_INTEGER`` (2**53 - 1) so that IDs round-trip through
runtimes whose integers are IEEE doubles.

Arithmetic uses multiplication and ``divmod`` rather than shifts; the
bound is enforced at every accumulation step, not only at the end.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from retailid.domain.errors import UnderflowError, VarIntOverflowError

MAX_SAFE_INTEGER = 2**53 - 1

_CONTINUATION = 0x80
_RADIX = 0x80


def _check_value(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"VarInt value must be a non-negative integer, got {type(value).__name__}"
        raise TypeError(msg)
    if value < 0:
        msg = f"VarInt value must be non-negative, got {value}"
        raise ValueError(msg)
    if value > MAX_SAFE_INTEGER:
        msg = f"VarInt value {value} exceeds maximum ({MAX_SAFE_INTEGER})"
        raise ValueError(msg)
    return value


@dataclass(frozen=True)
class VarInt:
    """A bounded unsigned integer together with its canonical encoding."""

    value: int
    data: bytes = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", VarInt.encode(self.value))

    @staticmethod
    def encode(value: int) -> bytes:
        """Encode *value* as the minimal LEB128 byte sequence.

        Raises:
            TypeError: If *value* is not an integer.
            ValueError: If *value* is negative or above ``MAX_SAFE_INTEGER``.
        """
        remaining = _check_value(value)
        out = bytearray()
        while remaining >= _RADIX:
            remaining, low7 = divmod(remaining, _RADIX)
            out.append(low7 | _CONTINUATION)
        out.append(remaining)
        return bytes(out)

    @staticmethod
    def decode(buffer: bytes | bytearray | memoryview, offset: int = 0) -> tuple[int, int]:
        """Decode a VarInt starting at *offset*.

        Returns:
            ``(value, bytes_consumed)``. Bytes after the terminator are
            left untouched.

        Raises:
            UnderflowError: If the buffer ends before a terminator byte.
            VarIntOverflowError: If the value would exceed ``MAX_SAFE_INTEGER``.
        """
        value = 0
        multiplier = 1
        length = 0
        while True:
            position = offset + length
            if position >= len(buffer):
                msg = f"VarInt underflow: no terminator byte after {length} byte(s)"
                raise UnderflowError(msg)
            byte = buffer[position]
            value += (byte & 0x7F) * multiplier
            if value > MAX_SAFE_INTEGER:
                msg = f"VarInt value exceeds maximum ({MAX_SAFE_INTEGER})"
                raise VarIntOverflowError(msg)

            length += 1
            if not byte & _CONTINUATION:
                return value, length

            multiplier *= _RADIX
            if multiplier > MAX_SAFE_INTEGER:
                msg = f"VarInt multiplier overflow after {length} byte(s)"
                raise VarIntOverflowError(msg)

    @classmethod
    def from_buffer(cls, buffer: bytes | bytearray | memoryview, offset: int = 0) -> VarInt:
        """Decode the VarInt at *offset* into a value object."""
        value, _ = cls.decode(buffer, offset)
        return cls(value)

    def hex(self) -> str:
        return self.data.hex()

    def __len__(self) -> int:
        return len(self.data)

    def __str__(self) -> str:
        return str(self.value)
