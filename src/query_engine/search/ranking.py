"""
Record Ranking

Combines per-field relevance scores into one score per record and orders
candidate records. Records are supplied by the caller; nothing here touches
storage.
"""

import dataclasses
import logging
from dataclasses import dataclass, field
from typing import Iterable, Mapping

from query_engine.search.query import ParsedQuery
from query_engine.search.scoring import RelevanceConfig, calculate_relevance_score

logger = logging.getLogger(__name__)


@dataclass
class SearchWeights:
    """Per-field score multipliers."""

    name: float = 3.0  # Titles are the strongest signal
    description: float = 2.0
    tags: float = 1.5
    brief_text: float = 1.0
    default: float = 1.0  # Any field not listed above

    def for_field(self, field_name: str) -> float:
        weighted = {f.name for f in dataclasses.fields(self) if f.name != "default"}
        if field_name in weighted:
            return getattr(self, field_name)
        return self.default


default_search_weights = SearchWeights()


@dataclass
class SearchHit:
    """A scored record."""

    record_id: str
    score: float
    field_scores: dict[str, float] = field(default_factory=dict)


def score_fields(
    fields: Mapping[str, str],
    query: ParsedQuery,
    weights: SearchWeights | None = None,
    config: RelevanceConfig | None = None,
) -> dict[str, float]:
    """Score each field of a record with its weight. Field queries stay scoped."""
    weights = weights or default_search_weights
    return {
        name: calculate_relevance_score(
            text or "", query, weights.for_field(name), config, scope=name
        )
        for name, text in fields.items()
    }


def score_record(
    fields: Mapping[str, str],
    query: ParsedQuery,
    weights: SearchWeights | None = None,
    config: RelevanceConfig | None = None,
) -> float:
    """
    Calculate the combined relevance of a record.

    Args:
        fields: Field name to text, e.g. {"name": ..., "description": ...}.
        query: Parsed query.
        weights: Field weights (defaults to default_search_weights).
        config: Scoring parameters.

    Returns:
        Sum of the weighted field scores.
    """
    return sum(score_fields(fields, query, weights, config).values())


def rank_records(
    records: Iterable[tuple[str, Mapping[str, str]]],
    query: ParsedQuery,
    weights: SearchWeights | None = None,
    min_score: float = 0.0,
    config: RelevanceConfig | None = None,
) -> list[SearchHit]:
    """
    Score and sort candidate records, best first.

    Records scoring at or below min_score are dropped when the query has
    anything to match; a query with nothing to match keeps every record at
    score 0 in input order.
    """
    hits: list[SearchHit] = []
    for record_id, fields in records:
        field_scores = score_fields(fields, query, weights, config)
        hits.append(
            SearchHit(
                record_id=record_id,
                score=sum(field_scores.values()),
                field_scores=field_scores,
            )
        )

    if query.has_positive_clauses:
        hits = [hit for hit in hits if hit.score > min_score]

    # sort() is stable, so equal scores keep input order
    hits.sort(key=lambda hit: hit.score, reverse=True)
    logger.debug(f"Ranked {len(hits)} records for query {query.original_query!r}")
    return hits
