"""
Shared SQL LIKE helpers.

Utilities in this module centralize escaping rules for SQL LIKE patterns so
all callers use consistent behavior.
"""

import re
from typing import Optional

from matching.config import LIKE_DEFAULT_ESCAPE
from matching.errors import ConfigurationError

# LIKE wildcards. The escape character itself is added per call.
_LIKE_WILDCARDS = "%_"


def escape_like(value: str, escape: Optional[str] = None) -> str:
    r"""
    Escape SQL LIKE metacharacters so *value* is treated as a literal string.

    Uses ``escape`` as the LIKE escape character (``\`` unless configured
    otherwise). The result must be compiled with the same escape character.

    Raises:
        ConfigurationError: If ``escape`` is not exactly one character.

    Examples:
        >>> escape_like("100%")
        '100\\%'
        >>> escape_like("a_b#c", "#")
        'a#_b##c'
    """
    esc = LIKE_DEFAULT_ESCAPE if escape is None else escape
    if len(esc) != 1:
        raise ConfigurationError(
            f"escape_like needs a single escape character, got {esc!r}",
            value=esc,
        )
    escape_re = re.compile(f"([{re.escape(_LIKE_WILDCARDS + esc)}])")
    return escape_re.sub(lambda m: esc + m.group(1), value)
