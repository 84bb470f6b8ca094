"""Query parsing, scoring, highlighting and snippets."""

from query_engine.search.query import FieldQuery, ParsedQuery, ValidationResult
from query_engine.search.parser import parse_search_query
from query_engine.search.validator import validate_search_query
from query_engine.search.scoring import RelevanceConfig, calculate_relevance_score
from query_engine.search.highlight import MatchSpan, highlight_search_terms
from query_engine.search.snippet import Snippet, create_search_snippet, generate_snippet
from query_engine.search.ranking import (
    SearchHit,
    SearchWeights,
    default_search_weights,
    rank_records,
    score_record,
)

__all__ = [
    "FieldQuery",
    "ParsedQuery",
    "ValidationResult",
    "parse_search_query",
    "validate_search_query",
    "RelevanceConfig",
    "calculate_relevance_score",
    "MatchSpan",
    "highlight_search_terms",
    "Snippet",
    "create_search_snippet",
    "generate_snippet",
    "SearchHit",
    "SearchWeights",
    "default_search_weights",
    "rank_records",
    "score_record",
]
