"""URL-safe, unpadded base-64 used by legacy retail ID URLs."""

from __future__ import annotations

import base64
import binascii

from retailid.domain.errors import FormatError


def encode_url64(data: bytes | bytearray | memoryview) -> str:
    """Encode *data* as URL-safe base-64 with the ``=`` padding stripped."""
    return base64.urlsafe_b64encode(bytes(data)).rstrip(b"=").decode("ascii")


def decode_url64(value: str) -> bytes:
    """Decode URL-safe base-64, restoring any stripped padding.

    Raises:
        FormatError: If *value* contains characters outside the alphabet
            or has an impossible length.
    """
    standard = value.replace("-", "+").replace("_", "/")
    standard += "=" * (-len(standard) % 4)
    try:
        return base64.b64decode(standard, validate=True)
    except (binascii.Error, ValueError) as exc:
        msg = f"Invalid base64 encoding: {value!r}"
        raise FormatError(msg) from exc
