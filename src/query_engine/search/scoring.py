"""
Relevance Scoring

Scores a piece of text against a ParsedQuery. Presence, not frequency, is
rewarded: each distinct clause that matches adds its length once.

score(text, q) = max(0, terms + phrases * multiplier + fields + or_groups - exclusions) * weight
"""

import logging
from dataclasses import dataclass, field

from query_engine.core.config import settings
from query_engine.search import matching
from query_engine.search.query import ParsedQuery

logger = logging.getLogger(__name__)


@dataclass
class RelevanceConfig:
    """Relevance scoring parameters."""

    phrase_multiplier: float = field(default_factory=lambda: settings.PHRASE_MULTIPLIER)
    exclusion_penalty: float = 1.0  # Per occurrence, times the excluded term length


def _positive_score(
    text: str,
    query: ParsedQuery,
    config: RelevanceConfig,
    scope: str | None,
) -> float:
    score = 0.0

    for term in dict.fromkeys(query.terms):
        if matching.contains(text, term):
            score += len(term)

    for phrase in dict.fromkeys(query.exact_phrases):
        if matching.contains(text, phrase):
            score += len(phrase) * config.phrase_multiplier

    for fq in dict.fromkeys(query.field_queries):
        if scope is not None and fq.field != scope:
            continue
        if matching.contains(text, fq.value):
            score += len(fq.value)

    # Groups are satisfied independently; only the first present
    # alternative of a group counts.
    for group in query.or_queries:
        for alternative in group:
            if matching.contains(text, alternative):
                score += len(alternative)
                break

    return score


def _exclusion_penalty(text: str, query: ParsedQuery, config: RelevanceConfig) -> float:
    penalty = 0.0
    for term in dict.fromkeys(query.excluded_terms):
        occurrences = matching.count(text, term)
        if occurrences:
            penalty += occurrences * len(term) * config.exclusion_penalty
    return penalty


def calculate_relevance_score(
    text: str,
    query: ParsedQuery,
    weight: float = 1.0,
    config: RelevanceConfig | None = None,
    scope: str | None = None,
) -> float:
    """
    Calculate the relevance of text for a parsed query.

    Args:
        text: Text to score (e.g. one field of a record).
        query: Parsed query.
        weight: Non-negative multiplier applied to the final score.
        config: Scoring parameters.
        scope: Field name the text belongs to. When given, only field queries
            for that field contribute; when None, every field query is matched
            against the text.

    Returns:
        Score >= 0. Exactly 0.0 when nothing matches.

    Raises:
        ValueError: If weight is negative.
    """
    if weight < 0:
        raise ValueError(f"weight must be >= 0, got {weight}")
    if not text or not query.has_positive_clauses:
        return 0.0

    config = config or RelevanceConfig()

    base = _positive_score(text, query, config, scope)
    if base <= 0:
        return 0.0

    base -= _exclusion_penalty(text, query, config)
    if base <= 0:
        logger.debug(f"Exclusions cancelled all matches for query {query.original_query!r}")
        return 0.0

    return base * weight
