"""
Search Term Highlighting

Wraps matched spans of a text in a markup tag, preserving the original
casing. Overlapping matches are resolved in favour of the longer one, so a
phrase match subsumes any term it contains.
"""

import re
from dataclasses import dataclass

from query_engine.core.config import settings
from query_engine.search import matching
from query_engine.search.query import ParsedQuery

TAG_NAME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9-]*$")
MARKUP_PATTERN = re.compile(r"<[^<>]*>")


@dataclass(frozen=True)
class MatchSpan:
    """Half-open [start, end) range of a match in the source text."""

    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start

    def overlaps(self, start: int, end: int) -> bool:
        return self.start < end and start < self.end


def _wrapped_pattern(tag: str) -> re.Pattern[str]:
    name = re.escape(tag)
    return re.compile(rf"<{name}(?:\s[^>]*)?>.*?</{name}\s*>", re.IGNORECASE | re.DOTALL)


def _protected_ranges(text: str, tag: str) -> list[tuple[int, int]]:
    """Markup tags and regions already wrapped in tag are never matched."""
    ranges = [m.span() for m in MARKUP_PATTERN.finditer(text)]
    ranges.extend(m.span() for m in _wrapped_pattern(tag).finditer(text))
    return ranges


def collect_spans(text: str, query: ParsedQuery, tag: str) -> list[MatchSpan]:
    """Find every match of a term, phrase or OR alternative outside markup."""
    protected = _protected_ranges(text, tag)
    spans: set[MatchSpan] = set()
    for needle in query.match_needles():
        # Overlapping occurrences too, so resolve_overlaps sees every candidate
        for start, end in matching.find_all_spans(text, needle):
            span = MatchSpan(start, end)
            if any(span.overlaps(p_start, p_end) for p_start, p_end in protected):
                continue
            spans.add(span)
    return list(spans)


def resolve_overlaps(spans: list[MatchSpan]) -> list[MatchSpan]:
    """
    Keep the longest of any overlapping spans (ties go to the earlier start).

    Returns:
        Non-overlapping spans ordered left to right.
    """
    accepted: list[MatchSpan] = []
    for span in sorted(spans, key=lambda s: (-s.length, s.start)):
        if not any(span.overlaps(kept.start, kept.end) for kept in accepted):
            accepted.append(span)
    accepted.sort(key=lambda s: s.start)
    return accepted


def highlight_search_terms(
    text: str,
    query: ParsedQuery,
    tag: str = settings.HIGHLIGHT_TAG,
) -> str:
    """
    Wrap every match of the query in <tag>...</tag>.

    Exclusions are never highlighted. Existing markup passes through
    untouched, which also makes the function idempotent for a given tag.

    Raises:
        ValueError: If tag is not a plain element name.
    """
    if not TAG_NAME_PATTERN.match(tag or ""):
        raise ValueError(f"Invalid highlight tag: {tag!r}")
    if not text:
        return text

    spans = resolve_overlaps(collect_spans(text, query, tag))
    if not spans:
        return text

    parts: list[str] = []
    pos = 0
    for span in spans:
        parts.append(text[pos : span.start])
        parts.append(f"<{tag}>{text[span.start : span.end]}</{tag}>")
        pos = span.end
    parts.append(text[pos:])
    return "".join(parts)
