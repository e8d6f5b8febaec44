"""
LIKE matcher engine.

Applies a CompiledMatcher to a byte value. ASCII values are matched as-is;
anything else is first repaired to well-formed UTF-8 so the matcher never
sees a malformed sequence. Matching never raises.
"""

import logging
from typing import Union

from matching.compiler import CompiledMatcher
from matching.misc.helpers import is_ascii, repair_utf8, to_bytes

logger = logging.getLogger(__name__)


def like_matches(matcher: CompiledMatcher, value: Union[bytes, str]) -> bool:
    """
    Return True iff the whole of *value* satisfies *matcher*.

    Args:
        matcher: A matcher from compile_like_pattern().
        value:   The value to test. Bytes may be malformed UTF-8; str values
                 are encoded as UTF-8.

    Returns:
        True when the anchored pattern covers the entire value.
    """
    data = to_bytes(value)
    if not is_ascii(data):
        # Round-trip through str to replace malformed sequences with U+FFFD.
        repaired = repair_utf8(data)
        if repaired != data:
            logger.debug("Repaired malformed UTF-8 value before LIKE match (%d -> %d bytes)", len(data), len(repaired))
        data = repaired
    return matcher.match(data)
