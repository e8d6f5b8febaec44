"""
SQL LIKE pattern compiler.

Turns a LIKE pattern ('%' = any sequence, '_' = any single character, plus an
optional escape character) into an immutable, anchored matcher.

The pattern is scanned once, left to right, into LikeTokens. The tokens are
then translated into a bytes regular expression in which every literal is
escaped, so only the emitted wildcards carry meaning. Matching splits the
tokens on '%' and places each piece at its leftmost position, so a long
value never sends the regex engine into nested backtracking.

Compilation is pure: nothing is cached here. Callers that reuse the same
(pattern, escape) pair should cache the CompiledMatcher themselves.
"""

import logging
import re
from dataclasses import dataclass
from typing import Union

from matching.classes.enums import ScanState, TokenKind
from matching.classes.schemas import EscapeSpec
from matching.misc.helpers import to_bytes

logger = logging.getLogger(__name__)

# One UTF-8 encoded code point. Values are repaired before matching, so the
# input is always well-formed and this never has to deal with stray bytes.
_UTF8_CHAR = (
    rb"(?:[\x00-\x7f]"
    rb"|[\xc0-\xdf][\x80-\xbf]"
    rb"|[\xe0-\xef][\x80-\xbf]{2}"
    rb"|[\xf0-\xf7][\x80-\xbf]{3})"
)
_ANY_SEQUENCE = rb".*"
_START_ANCHOR = rb"\A"
_END_ANCHOR = rb"\Z"

# DOTALL: wildcards match newlines too. MULTILINE is deliberately absent so
# the anchors only match at the true ends of the value.
_REGEX_FLAGS = re.DOTALL


@dataclass(frozen=True, slots=True)
class LikeToken:
    """One element of a scanned LIKE pattern."""
    kind: TokenKind
    char: str | None = None  # set only for LITERAL

    def __str__(self) -> str:
        if self.kind is TokenKind.LITERAL:
            return self.char
        return "%" if self.kind is TokenKind.ANY_SEQUENCE else "_"


_ANY_CHAR_TOKEN = LikeToken(TokenKind.ANY_CHAR)
_ANY_SEQUENCE_TOKEN = LikeToken(TokenKind.ANY_SEQUENCE)


@dataclass(frozen=True, slots=True)
class CompiledMatcher:
    """
    An anchored LIKE matcher. Immutable once built and safe to share
    between threads.

    ``regex`` is the whole pattern as one anchored expression, kept for
    inspection. Matching runs ``segments`` instead: the pieces between the
    '%'s (literals and '_' only), each placed at its leftmost position in
    turn. That keeps matching at O(len(value) * len(pattern)) whatever the
    number of '%'s.
    """
    pattern: str
    escape: EscapeSpec
    tokens: tuple[LikeToken, ...]
    regex: re.Pattern
    segments: tuple[re.Pattern, ...]  # last one is anchored to the end

    @property
    def translated(self) -> bytes:
        """The anchored regular expression the tokens were translated to."""
        return self.regex.pattern

    def match(self, data: bytes) -> bool:
        """Return True iff the whole of *data* (well-formed UTF-8) matches."""
        if len(self.segments) == 1:
            return self.segments[0].match(data) is not None

        head, *middle, tail = self.segments
        found = head.match(data)
        if found is None:
            return False
        pos = found.end()

        for segment in middle:
            found = segment.search(data, pos)
            if found is None:
                return False
            pos = found.end()

        return tail.search(data, pos) is not None


# ===============================
#     PRIVATE HELPER METHODS
# ===============================


def _scan(pattern: str, escape: EscapeSpec) -> list[LikeToken]:
    """
    Break a LIKE pattern into tokens.

    An escape character makes the next character literal, whatever it is. A
    trailing escape character with nothing after it is ignored.
    """
    tokens: list[LikeToken] = []
    state = ScanState.NORMAL

    for char in pattern:
        if escape.enabled and state is ScanState.NORMAL and char == escape.char:
            state = ScanState.ESCAPED
            continue

        if char == "%" and state is ScanState.NORMAL:
            tokens.append(_ANY_SEQUENCE_TOKEN)
        elif char == "_" and state is ScanState.NORMAL:
            tokens.append(_ANY_CHAR_TOKEN)
        else:
            tokens.append(LikeToken(TokenKind.LITERAL, char))
        state = ScanState.NORMAL

    if state is ScanState.ESCAPED:
        logger.debug("Ignoring dangling escape character at end of LIKE pattern %r", pattern)

    return tokens


def _token_regex(token: LikeToken) -> bytes:
    if token.kind is TokenKind.ANY_SEQUENCE:
        return _ANY_SEQUENCE
    if token.kind is TokenKind.ANY_CHAR:
        return _UTF8_CHAR
    return re.escape(to_bytes(token.char))


def _translate(tokens: list[LikeToken]) -> bytes:
    """Translate tokens into an anchored bytes regular expression."""
    parts: list[bytes] = [_START_ANCHOR]
    previous_kind: TokenKind | None = None

    for token in tokens:
        # '%%' accepts exactly what '%' accepts.
        if not (token.kind is TokenKind.ANY_SEQUENCE and previous_kind is TokenKind.ANY_SEQUENCE):
            parts.append(_token_regex(token))
        previous_kind = token.kind

    parts.append(_END_ANCHOR)
    return b"".join(parts)


def _split_segments(tokens: list[LikeToken]) -> list[re.Pattern]:
    """
    Compile the '%'-free runs of tokens between the '%'s.

    The first segment is matched at the start of the value and the last is
    anchored to its end. Empty runs in the middle ('%%') are dropped.
    """
    runs: list[list[bytes]] = [[]]
    for token in tokens:
        if token.kind is TokenKind.ANY_SEQUENCE:
            runs.append([])
        else:
            runs[-1].append(_token_regex(token))

    if len(runs) == 1:
        return [re.compile(_START_ANCHOR + b"".join(runs[0]) + _END_ANCHOR, _REGEX_FLAGS)]

    head, *middle, tail = runs
    segments = [re.compile(b"".join(head), _REGEX_FLAGS)]
    segments.extend(re.compile(b"".join(run), _REGEX_FLAGS) for run in middle if run)
    segments.append(re.compile(b"".join(tail) + _END_ANCHOR, _REGEX_FLAGS))
    return segments


# ===============================
#         PUBLIC METHODS
# ===============================


def compile_like_pattern(
    pattern: Union[str, bytes],
    escape: Union[EscapeSpec, str, bytes, None] = None,
) -> CompiledMatcher:
    """
    Compile a LIKE pattern into an anchored matcher.

    Args:
        pattern: The LIKE pattern. Bytes are decoded as UTF-8.
        escape:  An EscapeSpec, or a raw escape string (None / "" disables
                 escaping).

    Returns:
        The CompiledMatcher. An empty pattern only matches the empty value.

    Raises:
        ConfigurationError: If a raw escape string is longer than one character.
    """
    if isinstance(pattern, bytes):
        pattern = pattern.decode("utf-8", errors="replace")
    if not isinstance(escape, EscapeSpec):
        escape = EscapeSpec.from_string(escape)

    tokens = _scan(pattern, escape)
    regex = re.compile(_translate(tokens), _REGEX_FLAGS)
    return CompiledMatcher(
        pattern=pattern,
        escape=escape,
        tokens=tuple(tokens),
        regex=regex,
        segments=tuple(_split_segments(tokens)),
    )
