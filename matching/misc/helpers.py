"""
Helper functions for byte-level value handling.

The matcher only ever sees well-formed UTF-8. These helpers decide whether a
value can be matched as-is and repair it when it cannot.
"""

from typing import Union


def is_ascii(value: bytes) -> bool:
    """
    Return True when every byte of *value* is a 7-bit code point.

    Examples:
        >>> is_ascii(b"abc")
        True
        >>> is_ascii("é".encode("utf-8"))
        False
        >>> is_ascii(b"")
        True
    """
    return value.isascii()


def repair_utf8(value: bytes) -> bytes:
    """
    Return *value* as well-formed UTF-8.

    Malformed sequences are replaced by U+FFFD. Well-formed input comes back
    unchanged.

    Examples:
        >>> repair_utf8(b"caf\\xc3\\xa9")
        b'caf\\xc3\\xa9'
        >>> repair_utf8(b"a\\xffb")
        b'a\\xef\\xbf\\xbdb'
    """
    return value.decode("utf-8", errors="replace").encode("utf-8")


def to_bytes(value: Union[str, bytes, bytearray, memoryview]) -> bytes:
    """Coerce a str (encoded as UTF-8) or bytes-like value to bytes."""
    if isinstance(value, bytes):
        return value
    if isinstance(value, str):
        # Lone surrogates are not valid UTF-8; they come out as U+FFFD.
        return repair_utf8(value.encode("utf-8", errors="surrogatepass"))
    return bytes(value)
