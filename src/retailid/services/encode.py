"""EncodeService — build short URLs for new or existing batch IDs."""

from __future__ import annotations

import logging

from retailid.domain.errors import RetailIdError
from retailid.domain.ids import ObjectIdentifier
from retailid.domain.pair import encode_short_url
from retailid.services._helpers import error_result
from retailid.services.base import BaseService
from retailid.services.result import ServiceResult

logger = logging.getLogger(__name__)


class EncodeService(BaseService):
    """Encode ``(batch_id, index)`` pairs with the configured URL defaults."""

    def encode(
        self,
        batch_id: str,
        index: int,
        *,
        domain: str | None = None,
        base64: bool | None = None,
    ) -> ServiceResult:
        """Encode a hex *batch_id* and *index* as a short URL."""
        op = "encode"
        config = self._settings.encode
        use_base64 = config.base64 if base64 is None else base64
        try:
            identifier = ObjectIdentifier.from_hex(batch_id)
            url = encode_short_url(
                identifier,
                index,
                domain=domain or config.domain,
                base64=use_base64,
            )
        except (RetailIdError, ValueError, TypeError) as exc:
            return error_result(op, exc, batch_id=batch_id, index=index)

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "batch_id": identifier.to_hex(),
                "index": index,
                "encoding": "base64" if use_base64 else "base36",
                "url": url,
            },
        )

    def generate(
        self,
        *,
        count: int = 1,
        index: int = 0,
        domain: str | None = None,
        base64: bool | None = None,
    ) -> ServiceResult:
        """Mint *count* random batch IDs and encode each at *index*.

        Failing to reach a secure random source aborts the whole batch.
        """
        op = "generate"
        if count < 1:
            return error_result(op, ValueError(f"count must be at least 1, got {count}"))

        config = self._settings.encode
        use_base64 = config.base64 if base64 is None else base64
        items: list[dict[str, object]] = []
        try:
            for _ in range(count):
                identifier = ObjectIdentifier.from_random()
                url = encode_short_url(
                    identifier,
                    index,
                    domain=domain or config.domain,
                    base64=use_base64,
                )
                items.append({"id": identifier.to_hex(), "index": index, "url": url})
        except (RetailIdError, ValueError, TypeError) as exc:
            return error_result(op, exc, count=count)

        logger.debug("Generated %d batch ID(s)", len(items))
        return ServiceResult(ok=True, op=op, data={"count": len(items), "items": items})
