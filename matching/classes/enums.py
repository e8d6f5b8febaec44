"""
Enum classes used by the LIKE pattern compiler.
"""

from enum import Enum


class TokenKind(Enum):
    """Kinds of token a LIKE pattern is broken into."""
    LITERAL = "literal"
    ANY_CHAR = "any_char"          # '_'
    ANY_SEQUENCE = "any_sequence"  # '%'


class ScanState(Enum):
    """State of the left-to-right scan over a LIKE pattern."""
    NORMAL = 1
    ESCAPED = 2  # previous character was the escape character


class ValueEncoding(Enum):
    """How the evaluation service should read a submitted value."""
    UTF8 = "utf-8"
    BASE64 = "base64"

    @classmethod
    def from_string(cls, encoding: str) -> "ValueEncoding | None":
        """
        Convert a string to a ValueEncoding.
        Returns None if the string doesn't name a supported encoding.
        """
        _map = {
            "utf-8": cls.UTF8,
            "utf8": cls.UTF8,
            "base64": cls.BASE64,
        }
        return _map.get(encoding.strip().lower(), None)
