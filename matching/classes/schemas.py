"""
Pydantic schemas for LIKE escape configuration and evaluation requests.

EscapeSpec is the validated escape-character setting handed to the compiler.
LikeRequest / LikeResponse are the request and response bodies of the
evaluation service.
"""

from typing import Optional, Union
from pydantic import BaseModel, Field, ConfigDict, constr, field_validator

from .enums import ValueEncoding
from matching.errors import ConfigurationError


# -----------------------------
#        ESCAPE SETTING
# -----------------------------

class EscapeSpec(BaseModel):
    """
    Escape character setting for a LIKE pattern.

    ``char`` is None when escaping is disabled, otherwise the single character
    that makes the following '%', '_' or escape character literal.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    char: Optional[constr(min_length=1, max_length=1)] = Field(
        None,
        description="The escape character, or None when escaping is disabled."
    )

    @classmethod
    def disabled(cls) -> "EscapeSpec":
        return cls(char=None)

    @classmethod
    def from_string(cls, escape: Union[str, bytes, None]) -> "EscapeSpec":
        """
        Build an EscapeSpec from a raw escape string.

        Args:
            escape: The escape string. None or "" disables escaping. Bytes are
                decoded as UTF-8 first.

        Returns:
            The validated EscapeSpec.

        Raises:
            ConfigurationError: If the escape string is longer than one character.
        """
        if escape is None:
            return cls.disabled()
        if isinstance(escape, bytes):
            escape = escape.decode("utf-8", errors="replace")
        if escape == "":
            return cls.disabled()
        if len(escape) != 1:
            raise ConfigurationError(
                f"Escape must be empty or a single character, got {escape!r}",
                value=escape,
            )
        return cls(char=escape)

    @property
    def enabled(self) -> bool:
        return self.char is not None

    def __str__(self) -> str:
        return self.char if self.char is not None else ""


# -----------------------------
#      EVALUATION SERVICE
# -----------------------------

class LikeRequest(BaseModel):
    """
    Body of a LIKE evaluation request.

    ``value`` is read according to ``value_encoding``. Use base64 to submit
    byte sequences that are not valid UTF-8.
    """
    model_config = ConfigDict(extra="forbid")

    value: str = Field(..., description="The value to test.")
    pattern: str = Field(..., description="The LIKE pattern.")
    escape: Optional[str] = Field(
        None,
        description="Escape character. Omit or send an empty string to disable escaping."
    )
    value_encoding: ValueEncoding = Field(
        ValueEncoding.UTF8,
        description="How 'value' is encoded: 'utf-8' (plain text) or 'base64' (raw bytes)."
    )

    @field_validator("value_encoding", mode="before")
    @classmethod
    def _parse_value_encoding(cls, v):
        if isinstance(v, str):
            parsed = ValueEncoding.from_string(v)
            if parsed is None:
                raise ValueError(f"Unsupported value_encoding: {v!r}")
            return parsed
        return v


class LikeResponse(BaseModel):
    matches: bool
