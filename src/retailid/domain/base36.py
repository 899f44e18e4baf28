"""Reversible base-36 codec for byte sequences.

Leading zero bytes survive the round trip as leading ``'0'`` characters,
so ``decode_base36(encode_base36(b)) == b`` for every non-empty ``b``.
Output is uppercase; input is accepted in either case.
"""

from __future__ import annotations

import re

from retailid.domain.errors import EmptyInputError, FormatError

BASE36_ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"

_BASE36_PATTERN = re.compile(r"[0-9A-Za-z]+")
_DIGIT_VALUES = {char: value for value, char in enumerate(BASE36_ALPHABET)}


def is_base36(value: str) -> bool:
    """Whether *value* is a non-empty string of base-36 characters."""
    return _BASE36_PATTERN.fullmatch(value) is not None


def encode_base36(data: bytes | bytearray | memoryview) -> str:
    """Encode *data* as an uppercase base-36 string.

    Raises:
        EmptyInputError: If *data* is empty.
    """
    raw = bytes(data)
    if not raw:
        msg = "Cannot base36-encode an empty byte sequence"
        raise EmptyInputError(msg)

    body = raw.lstrip(b"\x00")
    zeros = len(raw) - len(body)
    if not body:
        return "0" * zeros

    number = int.from_bytes(body, "big")
    digits: list[str] = []
    while number:
        number, digit = divmod(number, 36)
        digits.append(BASE36_ALPHABET[digit])
    return "0" * zeros + "".join(reversed(digits))


def decode_base36(value: str) -> bytes:
    """Decode a base-36 string produced by :func:`encode_base36`.

    Raises:
        FormatError: If *value* is empty or has characters outside ``[0-9A-Za-z]``.
    """
    if not isinstance(value, str) or not is_base36(value):
        msg = f"Invalid base36 string: {value!r}"
        raise FormatError(msg)

    body = value.lstrip("0")
    zeros = len(value) - len(body)
    if not body:
        return b"\x00" * zeros

    # Digit by digit: int(body, 36) is capped by the interpreter's str-to-int digit limit.
    number = 0
    for char in body.upper():
        number = number * 36 + _DIGIT_VALUES[char]
    return b"\x00" * zeros + number.to_bytes((number.bit_length() + 7) // 8, "big")
