"""
SQL-facing LIKE functions.

These mirror the functions a query engine registers for LIKE:

- like_pattern(pattern)          the VARCHAR -> LIKE pattern cast (no escape)
- like_pattern(pattern, escape)  LIKE ... ESCAPE '<c>'
- like(value, pattern)           the boolean LIKE operator itself
"""

from typing import Union

from matching.classes.schemas import EscapeSpec
from matching.compiler import CompiledMatcher, compile_like_pattern
from matching.engine import like_matches

_NO_ESCAPE = object()


def like_pattern(
    pattern: Union[str, bytes],
    escape: Union[str, bytes, object] = _NO_ESCAPE,
) -> CompiledMatcher:
    """
    Compile a LIKE pattern the way the SQL layer does.

    Without ``escape`` this is the plain cast and escaping is disabled. With
    ``escape`` the value must be empty (escaping disabled) or one character.

    Raises:
        ConfigurationError: If ``escape`` is longer than one character.
    """
    if escape is _NO_ESCAPE:
        return compile_like_pattern(pattern, EscapeSpec.disabled())
    return compile_like_pattern(pattern, EscapeSpec.from_string(escape))


def like(value: Union[bytes, str], pattern: CompiledMatcher) -> bool:
    """Evaluate ``value LIKE pattern``."""
    return like_matches(pattern, value)
