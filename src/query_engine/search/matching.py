"""
Case-insensitive matching helpers.

Matching runs against the original text with re.IGNORECASE so that span
offsets always index into the caller's string, whatever its casing.
"""

import re
from functools import lru_cache


@lru_cache(maxsize=1024)
def _compile(needle: str) -> re.Pattern[str]:
    return re.compile(re.escape(needle), re.IGNORECASE)


def find_spans(text: str, needle: str) -> list[tuple[int, int]]:
    """Return (start, end) offsets of non-overlapping occurrences of needle."""
    if not text or not needle:
        return []
    return [m.span() for m in _compile(needle).finditer(text)]


def find_all_spans(text: str, needle: str) -> list[tuple[int, int]]:
    """Return (start, end) offsets of every occurrence, overlapping ones included."""
    if not text or not needle:
        return []
    pattern = _compile(needle)
    spans: list[tuple[int, int]] = []
    match = pattern.search(text)
    while match:
        spans.append(match.span())
        match = pattern.search(text, match.start() + 1)
    return spans


def first_span(text: str, needle: str) -> tuple[int, int] | None:
    if not text or not needle:
        return None
    match = _compile(needle).search(text)
    return match.span() if match else None


def contains(text: str, needle: str) -> bool:
    return first_span(text, needle) is not None


def count(text: str, needle: str) -> int:
    return len(find_spans(text, needle))
