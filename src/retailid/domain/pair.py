"""RetailIdPair and short URL construction.

Two URL forms are produced:

- ``HTTPS://{DOMAIN}/{BASE36}`` — the whole string uppercased.
- ``https://{domain}/{url64}`` — legacy form; the base-64 data is
  case-sensitive and is never case-folded.
"""

from __future__ import annotations

from retailid.domain.base36 import encode_base36
from retailid.domain.base64url import encode_url64
from retailid.domain.ids import ObjectIdentifier
from retailid.domain.resolver import ParsedRetailId, RetailIdResolver, resolve
from retailid.domain.types import Encoding, legacy_fallback_mode
from retailid.domain.varint import VarInt

DEFAULT_DOMAIN = "1a4.com"


def build_retail_buffer(batch_id: ObjectIdentifier, index: int) -> bytes:
    """Concatenate the identifier bytes and the index VarInt."""
    return batch_id.binary + VarInt.encode(index)


def encode_short_url(
    batch_id: ObjectIdentifier,
    index: int,
    *,
    domain: str | None = None,
    base64: bool = False,
) -> str:
    """Build a shareable short URL for ``(batch_id, index)``.

    Raises:
        TypeError: If *index* is not an integer.
        ValueError: If *index* is outside the VarInt range.
    """
    host = domain or DEFAULT_DOMAIN
    buffer = build_retail_buffer(batch_id, index)
    if base64:
        return f"https://{host}/{encode_url64(buffer)}"
    return f"HTTPS://{host}/{encode_base36(buffer)}".upper()


class RetailIdPair:
    """A resolved retail ID that can re-encode itself.

    Build from an already resolved value, or parse text with
    :meth:`parse`.
    """

    def __init__(self, parsed: ParsedRetailId) -> None:
        self._parsed = parsed

    @classmethod
    def parse(
        cls,
        raw: str,
        strict: bool = False,
        *,
        resolver: RetailIdResolver | None = None,
    ) -> RetailIdPair:
        """Resolve *raw* with the legacy ``strict`` flag.

        ``strict=True`` falls back to mongo timestamp validation,
        ``strict=False`` falls back to accepting any identifier. Neither
        restricts resolution to known prefixes only.
        """
        fallback = legacy_fallback_mode(strict)
        if resolver is None:
            parsed = resolve(raw, validation_fallback=fallback, strict_prefixes_only=False)
        else:
            parsed = resolver.resolve(raw, validation_fallback=fallback, strict_prefixes_only=False)
        return cls(parsed)

    @property
    def parsed(self) -> ParsedRetailId:
        return self._parsed

    @property
    def batch_id(self) -> ObjectIdentifier:
        return self._parsed.batch_id

    @property
    def index(self) -> int:
        return self._parsed.index

    @property
    def encoding(self) -> Encoding:
        return self._parsed.encoding

    @property
    def domain(self) -> str | None:
        return self._parsed.domain

    @property
    def short_code(self) -> str:
        return self._parsed.short_code

    def encode(self, *, domain: str | None = None, base64: bool = False) -> str:
        """Re-encode as a short URL (base-36 unless *base64* is set).

        The scanned domain is not reused: without *domain* the URL points at
        ``DEFAULT_DOMAIN``, so re-encoding is only idempotent for URLs on that
        domain. Pass ``domain=pair.domain`` to keep the original host.
        """
        return encode_short_url(self.batch_id, self.index, domain=domain, base64=base64)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RetailIdPair):
            return NotImplemented
        return (self.batch_id, self.index) == (other.batch_id, other.index)

    def __hash__(self) -> int:
        return hash((self.batch_id, self.index))

    def __repr__(self) -> str:
        return f"RetailIdPair(batch_id={self.batch_id.to_hex()!r}, index={self.index})"
