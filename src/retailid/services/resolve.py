"""ResolveService — scanned text in, batch ID and index out."""

from __future__ import annotations

import logging

from retailid.domain.errors import RetailIdError
from retailid.domain.pair import RetailIdPair
from retailid.domain.types import ValidationMode
from retailid.services._helpers import error_result
from retailid.services.base import BaseService
from retailid.services.result import ServiceResult

logger = logging.getLogger(__name__)


class ResolveService(BaseService):
    """Resolve scanned payloads using the configured resolver policy."""

    def resolve(
        self,
        raw: str,
        *,
        validation_fallback: ValidationMode | None = None,
        strict_prefixes_only: bool | None = None,
    ) -> ServiceResult:
        """Resolve *raw* to its batch ID and index.

        Unset arguments fall back to the ``[resolver]`` configuration.
        """
        op = "resolve"
        config = self._settings.resolver
        fallback = validation_fallback or config.validation_fallback
        strict_only = (
            config.strict_prefixes_only if strict_prefixes_only is None else strict_prefixes_only
        )
        try:
            parsed = self._resolver.resolve(
                raw,
                validation_fallback=fallback,
                strict_prefixes_only=strict_only,
            )
        except RetailIdError as exc:
            logger.debug("Resolve failed for %r: %s", raw, exc)
            return error_result(op, exc, input=raw)

        warnings: list[str] = []
        if not parsed.batch_id.has_known_prefix(self._resolver.known_prefixes):
            warnings.append(
                f"Batch ID {parsed.batch_id.to_hex()} has no known prefix "
                f"(accepted under {fallback} validation)"
            )
        return ServiceResult(ok=True, op=op, data=parsed.to_dict(), warnings=warnings)

    def convert(
        self,
        raw: str,
        *,
        strict: bool = False,
        domain: str | None = None,
        base64: bool | None = None,
    ) -> ServiceResult:
        """Re-encode a scanned retail ID as a short URL.

        *strict* is the legacy flag: True falls back to mongo validation,
        False to accepting any identifier.
        """
        op = "convert"
        encode_config = self._settings.encode
        use_base64 = encode_config.base64 if base64 is None else base64
        try:
            pair = RetailIdPair.parse(raw, strict, resolver=self._resolver)
        except RetailIdError as exc:
            return error_result(op, exc, input=raw)

        url = pair.encode(domain=domain or encode_config.domain, base64=use_base64)
        data = pair.parsed.to_dict()
        data["url"] = url
        return ServiceResult(ok=True, op=op, data=data)
