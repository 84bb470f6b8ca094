"""
Search Query Validation

Checks a raw query against length and syntax rules before it is trusted.
All problems are collected and returned; nothing is raised.
"""

from query_engine.core.config import SearchField, settings
from query_engine.search.parser import EXCLUDE_PREFIX, PHRASE_PATTERN, split_field_token
from query_engine.search.query import ValidationResult

EMPTY_QUERY_ERROR = "Search query cannot be empty"
UNMATCHED_QUOTES_ERROR = "Unmatched quotes in search query"


def _too_long_error(max_len: int) -> str:
    return f"Search query too long (maximum {max_len} characters)"


def _invalid_field_error(field: str) -> str:
    return f'Invalid field "{field}" in field:value query'


def _invalid_fields(query: str) -> list[str]:
    """Distinct field names outside the allow-list, in order of appearance."""
    remainder = PHRASE_PATTERN.sub(" ", query)
    invalid: list[str] = []
    for token in remainder.split():
        if token.startswith(EXCLUDE_PREFIX):
            continue
        parts = split_field_token(token)
        if parts is None:
            continue
        field = parts[0]
        if not SearchField.is_allowed(field) and field not in invalid:
            invalid.append(field)
    return invalid


def validate_search_query(raw: str | None, max_len: int | None = None) -> ValidationResult:
    """
    Validate a raw search query.

    Args:
        raw: The query as typed by the user.
        max_len: Override for the maximum query length (defaults to settings).

    Returns:
        ValidationResult; valid is True iff no errors were found.
    """
    limit = settings.MAX_QUERY_LEN if max_len is None else max_len
    query = raw or ""

    if not query.strip():
        return ValidationResult(valid=False, errors=(EMPTY_QUERY_ERROR,))

    errors: list[str] = []
    if len(query) > limit:
        errors.append(_too_long_error(limit))

    if query.count('"') % 2 != 0:
        errors.append(UNMATCHED_QUOTES_ERROR)

    errors.extend(_invalid_field_error(field) for field in _invalid_fields(query))

    return ValidationResult(valid=not errors, errors=tuple(errors))
