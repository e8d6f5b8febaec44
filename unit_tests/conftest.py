"""Shared pytest fixtures for unit tests."""

from typing import Callable
from pathlib import Path
import sys

import pytest

# Ensure project root is importable when tests run from repository root.
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from matching.compiler import compile_like_pattern
from matching.engine import like_matches


@pytest.fixture
def like_factory() -> Callable[..., Callable[[bytes | str], bool]]:
    """Return a factory that compiles a pattern and hands back a match predicate."""

    def _factory(pattern: str, escape: str | None = None) -> Callable[[bytes | str], bool]:
        """Compile *pattern* once and return ``value -> bool``."""
        matcher = compile_like_pattern(pattern, escape)

        def _matches(value: bytes | str) -> bool:
            return like_matches(matcher, value)

        return _matches

    return _factory
