"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, retailid.toml only contains
overrides. An empty file (or no file) reproduces the built-in behaviour.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from retailid.domain.ids import KNOWN_PREFIXES
from retailid.domain.pair import DEFAULT_DOMAIN
from retailid.domain.types import ValidationMode

# --- retailid.toml sections ---


class ResolverConfig(BaseModel):
    """[resolver] section."""

    model_config = {"frozen": True}

    known_prefixes: tuple[str, ...] = KNOWN_PREFIXES
    validation_fallback: ValidationMode = ValidationMode.ANY
    strict_prefixes_only: bool = False

    @field_validator("known_prefixes")
    @classmethod
    def _lowercase_hex_prefixes(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        prefixes = tuple(prefix.strip().lower() for prefix in value)
        for prefix in prefixes:
            if not prefix or any(ch not in "0123456789abcdef" for ch in prefix):
                msg = f"Known prefix must be non-empty hex, got {prefix!r}"
                raise ValueError(msg)
        return prefixes

    @field_validator("validation_fallback")
    @classmethod
    def _fallback_is_relaxed(cls, value: ValidationMode) -> ValidationMode:
        if value is ValidationMode.STRICT:
            msg = "validation_fallback must be 'mongo' or 'any'; use strict_prefixes_only instead"
            raise ValueError(msg)
        return value


class EncodeConfig(BaseModel):
    """[encode] section."""

    model_config = {"frozen": True}

    domain: str = DEFAULT_DOMAIN
    base64: bool = False


class RetailIdConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    resolver: ResolverConfig = Field(default_factory=ResolverConfig)
    encode: EncodeConfig = Field(default_factory=EncodeConfig)
