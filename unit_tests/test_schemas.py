"""Unit tests for matching.classes.schemas."""

import pytest
from pydantic import ValidationError

from matching.classes.enums import ValueEncoding
from matching.classes.schemas import EscapeSpec, LikeRequest
from matching.errors import ConfigurationError


# ================================
#  EscapeSpec
# ================================


@pytest.mark.parametrize("raw", ["", None, b""])
def test_escape_spec_empty_means_disabled(raw) -> None:
    """An empty or missing escape should disable escaping, not fail."""
    spec = EscapeSpec.from_string(raw)
    assert spec.char is None
    assert not spec.enabled
    assert str(spec) == ""


@pytest.mark.parametrize("raw", ["$", "\\", "#", "é"])
def test_escape_spec_single_character(raw: str) -> None:
    """A one-character escape should be accepted as-is."""
    spec = EscapeSpec.from_string(raw)
    assert spec.char == raw
    assert spec.enabled


def test_escape_spec_from_utf8_bytes() -> None:
    """Bytes should be decoded before the length check."""
    assert EscapeSpec.from_string("é".encode("utf-8")).char == "é"


@pytest.mark.parametrize("raw", ["$$", "ab", "\\\\", "abc"])
def test_escape_spec_rejects_long_escape(raw: str) -> None:
    """Escapes of two or more characters should raise ConfigurationError naming the value."""
    with pytest.raises(ConfigurationError) as exc_info:
        EscapeSpec.from_string(raw)
    assert exc_info.value.value == raw
    assert repr(raw) in str(exc_info.value)


def test_configuration_error_is_a_value_error() -> None:
    """Callers catching ValueError should also catch ConfigurationError."""
    with pytest.raises(ValueError):
        EscapeSpec.from_string("$$")


def test_escape_spec_is_frozen() -> None:
    """EscapeSpec should reject mutation after construction."""
    spec = EscapeSpec.from_string("$")
    with pytest.raises(ValidationError):
        spec.char = "#"


def test_escape_spec_direct_construction_validates_length() -> None:
    """Constructing the model directly should still enforce a single character."""
    with pytest.raises(ValidationError):
        EscapeSpec(char="$$")


def test_escape_spec_equality_and_hash() -> None:
    """Equal escape specs should be interchangeable as dict keys."""
    assert EscapeSpec.from_string("$") == EscapeSpec(char="$")
    assert hash(EscapeSpec.disabled()) == hash(EscapeSpec.from_string(""))


# ================================
#  LikeRequest
# ================================


def test_like_request_defaults() -> None:
    """value_encoding should default to utf-8 and escape to None."""
    request = LikeRequest(value="abc", pattern="a%")
    assert request.value_encoding is ValueEncoding.UTF8
    assert request.escape is None


@pytest.mark.parametrize(("raw", "expected"), [("utf8", ValueEncoding.UTF8), ("BASE64", ValueEncoding.BASE64)])
def test_like_request_accepts_encoding_aliases(raw: str, expected: ValueEncoding) -> None:
    assert LikeRequest(value="", pattern="", value_encoding=raw).value_encoding is expected


def test_like_request_rejects_unknown_encoding() -> None:
    with pytest.raises(ValidationError):
        LikeRequest(value="", pattern="", value_encoding="latin-1")


def test_like_request_rejects_extra_fields() -> None:
    with pytest.raises(ValidationError):
        LikeRequest(value="", pattern="", flags="i")
