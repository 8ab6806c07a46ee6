from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Protocol

from core.walker import FileEntry


class Matcher(Protocol):
    def matches(self, text: str) -> bool: ...


class PatternMatcher:
    """Regular expression searched anywhere in the text."""

    def __init__(self, pattern: str, flags: int = 0) -> None:
        self.pattern = re.compile(pattern, flags)

    def matches(self, text: str) -> bool:
        return self.pattern.search(text) is not None

    def __repr__(self) -> str:
        return f"PatternMatcher({self.pattern.pattern!r})"


class SubstringMatcher:
    """Case-insensitive fragment match; '-' and '_' are interchangeable."""

    def __init__(self, fragment: str) -> None:
        self.fragment = _fold(fragment)

    def matches(self, text: str) -> bool:
        return self.fragment in _fold(text)

    def __repr__(self) -> str:
        return f"SubstringMatcher({self.fragment!r})"


def _fold(text: str) -> str:
    return text.lower().replace("-", "_")


def matches_entry(matchers: Iterable[Matcher], entry: FileEntry) -> bool:
    """True if any matcher accepts the entry's base name or relative path."""
    return any(
        m.matches(entry.name) or m.matches(entry.relative_path) for m in matchers
    )
