"""ServiceResult and ServiceError — the contract between services and the CLI.

Services never raise for expected failures (bad input, unrecognized IDs,
no random source); they return ``ServiceResult(ok=False)`` carrying a
stable error code that ``--json`` consumers can branch on.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult.

    Attributes:
        code: Stable machine-readable code, e.g. ``"UNRECOGNIZED_ID"``.
        message: Human-readable message (the exception text).
        detail: Inputs and the exception class name, for ``--verbose``.
    """

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_exception(cls, exc: BaseException, code: str, **detail: Any) -> ServiceError:
        return cls(
            code=code,
            message=str(exc),
            detail={"exception": type(exc).__name__, **detail},
        )


class ServiceResult(BaseModel):
    """Return type of every service operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (``resolve``, ``encode``, ...).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues, such as an ID accepted without a known prefix.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata shown with ``--verbose``.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(cls, op: str, error: ServiceError) -> ServiceResult:
        return cls(ok=False, op=op, error=error)
