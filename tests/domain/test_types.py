"""Tests for encoding and validation enums."""

from retailid.domain.types import Encoding, ValidationMode, legacy_fallback_mode


def test_enum_values_are_wire_strings() -> None:
    assert Encoding.BASE36 == "base36"
    assert Encoding.BASE64 == "base64"
    assert {m.value for m in ValidationMode} == {"strict", "mongo", "any"}


def test_legacy_strict_maps_to_mongo() -> None:
    assert legacy_fallback_mode(True) is ValidationMode.MONGO


def test_legacy_non_strict_maps_to_any() -> None:
    assert legacy_fallback_mode(False) is ValidationMode.ANY
