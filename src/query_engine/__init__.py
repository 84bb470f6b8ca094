"""
Search Query Engine

Parses free-text search queries and scores, highlights and snippets text
against them. Pure functions, no I/O.
"""

from query_engine.core.config import SearchField
from query_engine.search import (
    FieldQuery,
    ParsedQuery,
    SearchHit,
    SearchWeights,
    Snippet,
    ValidationResult,
    calculate_relevance_score,
    create_search_snippet,
    generate_snippet,
    highlight_search_terms,
    parse_search_query,
    rank_records,
    score_record,
    validate_search_query,
)

__all__ = [
    "SearchField",
    "FieldQuery",
    "ParsedQuery",
    "SearchHit",
    "SearchWeights",
    "Snippet",
    "ValidationResult",
    "calculate_relevance_score",
    "create_search_snippet",
    "generate_snippet",
    "highlight_search_terms",
    "parse_search_query",
    "rank_records",
    "score_record",
    "validate_search_query",
]
