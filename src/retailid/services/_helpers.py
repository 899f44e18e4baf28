"""Shared service-layer helper functions."""

from __future__ import annotations

from retailid.domain.errors import (
    ConfigurationError,
    RetailIdError,
    UnrecognizedIdError,
)
from retailid.services.result import ServiceError, ServiceResult


def error_code(exc: Exception) -> str:
    """Stable error code for a domain or argument error.

    Examples:
        >>> error_code(UnrecognizedIdError("nope"))
        'UNRECOGNIZED_ID'
        >>> error_code(ValueError("bad index"))
        'INVALID_INPUT'
    """
    if isinstance(exc, UnrecognizedIdError):
        return "UNRECOGNIZED_ID"
    if isinstance(exc, ConfigurationError):
        return "CONFIGURATION_ERROR"
    return "INVALID_INPUT"


def error_result(
    op: str,
    exc: RetailIdError | ValueError | TypeError,
    **detail: object,
) -> ServiceResult:
    """Wrap *exc* in a failed ServiceResult for *op*."""
    return ServiceResult.failure(op, ServiceError.from_exception(exc, error_code(exc), **detail))
