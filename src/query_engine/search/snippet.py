"""
Snippet Generation for Search Results

Generates KWIC (Key Word In Context) snippets: a bounded window of text
starting at the first match of the query, with optional highlighting.
"""

from dataclasses import dataclass

from query_engine.core.config import settings
from query_engine.search import matching
from query_engine.search.highlight import highlight_search_terms
from query_engine.search.query import ParsedQuery

ELLIPSIS = "..."


@dataclass
class Snippet:
    """A text snippet with optional highlighting."""

    text: str  # The snippet text (may include highlight tags)
    plain_text: str  # The snippet without highlight tags


def find_first_match(text: str, query: ParsedQuery) -> tuple[int, int] | None:
    """Earliest (start, end) match of any term, phrase or OR alternative."""
    best: tuple[int, int] | None = None
    for needle in query.match_needles():
        span = matching.first_span(text, needle)
        if span is None:
            continue
        # Prefer the earliest start, then the longer match at that start
        if best is None or (span[0], -span[1]) < (best[0], -best[1]):
            best = span
    return best


def _window(text_len: int, match: tuple[int, int], max_length: int) -> tuple[int, int]:
    # Start at the match, pulled back only as far as the text end requires
    window_start = max(0, min(match[0], text_len - max_length))
    return window_start, min(text_len, window_start + max_length)


def create_search_snippet(
    text: str,
    query: ParsedQuery,
    max_length: int = settings.SNIPPET_LENGTH,
) -> str:
    """
    Extract a snippet of at most max_length characters from the first match on.

    A trailing ellipsis is appended when the snippet stops before the end of
    the text, so the result never exceeds max_length + 3 characters. Text
    that already fits is returned unchanged.

    Raises:
        ValueError: If max_length is negative.
    """
    if max_length < 0:
        raise ValueError(f"max_length must be >= 0, got {max_length}")
    if len(text) <= max_length:
        return text

    match = find_first_match(text, query)
    if match is None:
        return text[:max_length] + ELLIPSIS

    start, end = _window(len(text), match, max_length)
    snippet = text[start:end]
    if start > 0:
        snippet = snippet.lstrip()
    if end < len(text):
        snippet += ELLIPSIS
    return snippet


def generate_snippet(
    text: str,
    query: ParsedQuery,
    max_length: int = settings.SNIPPET_LENGTH,
    highlight: bool = True,
    tag: str = settings.HIGHLIGHT_TAG,
) -> Snippet:
    """
    Generate a snippet and, if requested, its highlighted form.

    Args:
        text: The original text content.
        query: Parsed query whose matches drive the window and highlighting.
        max_length: Maximum snippet length before the ellipsis.
        highlight: Whether to wrap matches in tag.
        tag: Highlight tag name.

    Returns:
        Snippet object with text and plain_text
    """
    if not text:
        return Snippet(text="", plain_text="")

    plain_text = create_search_snippet(text, query, max_length)
    if highlight:
        return Snippet(
            text=highlight_search_terms(plain_text, query, tag),
            plain_text=plain_text,
        )
    return Snippet(text=plain_text, plain_text=plain_text)
