"""
Search Query Parser

Turns a free-text query into a ParsedQuery. Supported syntax, in order of
precedence:

    "exact phrase"    contiguous, case-insensitive phrase
    -term             excluded term
    field:value       field-scoped term (allow-listed fields only)
    a OR b            OR groups (the whole remaining query is partitioned)
    term              plain term

Parsing is fail-soft: malformed input degrades to plain terms and never
raises. Use the validator to reject bad queries.
"""

import logging
import re
import unicodedata

from query_engine.core.config import SearchField
from query_engine.search.query import FieldQuery, ParsedQuery

logger = logging.getLogger(__name__)

OR_CONNECTOR = "OR"
EXCLUDE_PREFIX = "-"

PHRASE_PATTERN = re.compile(r'"([^"]*)"')
FIELD_PATTERN = re.compile(r"^([A-Za-z_][A-Za-z0-9_]*):(\S+)$")


def normalize_token(token: str) -> str:
    """Fold a token for matching: NFC normalization plus lower-casing."""
    return unicodedata.normalize("NFC", token).lower()


def split_field_token(token: str) -> tuple[str, str] | None:
    """Split 'field:value' into its parts, or None if the token isn't one."""
    match = FIELD_PATTERN.match(token)
    if not match:
        return None
    return match.group(1), match.group(2)


def extract_phrases(query: str) -> tuple[list[str], str]:
    """
    Pull every matched pair of double quotes out of the query.

    Returns:
        (phrases, remainder) where remainder has each phrase replaced by a
        space. A dangling quote is left in the remainder as ordinary text.
    """
    phrases: list[str] = []

    def take(match: re.Match[str]) -> str:
        phrase = normalize_token(match.group(1).strip())
        if phrase:
            phrases.append(phrase)
        return " "

    remainder = PHRASE_PATTERN.sub(take, query)
    return phrases, remainder


def parse_search_query(raw: str | None) -> ParsedQuery:
    """
    Parse a raw query string into a ParsedQuery.

    Args:
        raw: The query as typed by the user. None is treated as blank.

    Returns:
        ParsedQuery; all categories are empty for blank input.
    """
    query = (raw or "").strip()
    if not query:
        return ParsedQuery()

    phrases, remainder = extract_phrases(query)

    excluded: list[str] = []
    field_queries: list[FieldQuery] = []
    rest: list[str] = []

    for token in remainder.split():
        if token.startswith(EXCLUDE_PREFIX) and len(token) > 1:
            excluded.append(normalize_token(token[1:]))
            continue

        parts = split_field_token(token)
        if parts and SearchField.is_allowed(parts[0]):
            field_queries.append(
                FieldQuery(
                    field=normalize_token(parts[0]),
                    value=normalize_token(parts[1]),
                )
            )
            continue

        rest.append(token)

    # OR is all-or-nothing: once a connector appears, every remaining token
    # (including those before the first OR) becomes its own group.
    terms: list[str] = []
    or_queries: list[tuple[str, ...]] = []
    if OR_CONNECTOR in rest:
        or_queries = [
            (normalize_token(token),) for token in rest if token != OR_CONNECTOR
        ]
    else:
        terms = [normalize_token(token) for token in rest]

    parsed = ParsedQuery(
        terms=tuple(terms),
        exact_phrases=tuple(phrases),
        excluded_terms=tuple(excluded),
        field_queries=tuple(field_queries),
        or_queries=tuple(or_queries),
        original_query=query,
    )
    logger.debug(
        f"Parsed query {query!r}: terms={len(terms)} phrases={len(phrases)} "
        f"excluded={len(excluded)} fields={len(field_queries)} or_groups={len(or_queries)}"
    )
    return parsed
