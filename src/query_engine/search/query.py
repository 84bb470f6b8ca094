"""
Structured Query Types

Immutable values produced by the parser and validator and consumed by the
scorer, highlighter and snippet extractor.
"""

from pydantic import BaseModel, ConfigDict, Field


class FieldQuery(BaseModel):
    """A field:value pair scoping a match to one record attribute."""

    model_config = ConfigDict(frozen=True)

    field: str
    value: str


class ParsedQuery(BaseModel):
    """
    Structured form of a raw search query.

    All tokens are lower-cased at parse time, so every consumer can match
    case-insensitively without re-folding the query.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    terms: tuple[str, ...] = ()
    exact_phrases: tuple[str, ...] = Field(default=(), alias="exactPhrases")
    excluded_terms: tuple[str, ...] = Field(default=(), alias="excludedTerms")
    field_queries: tuple[FieldQuery, ...] = Field(default=(), alias="fieldQueries")
    or_queries: tuple[tuple[str, ...], ...] = Field(default=(), alias="orQueries")
    original_query: str = Field(default="", alias="originalQuery")

    @property
    def is_empty(self) -> bool:
        return not (
            self.terms
            or self.exact_phrases
            or self.excluded_terms
            or self.field_queries
            or self.or_queries
        )

    @property
    def has_positive_clauses(self) -> bool:
        """True when something other than exclusions can match."""
        return bool(
            self.terms or self.exact_phrases or self.field_queries or self.or_queries
        )

    def match_needles(self) -> list[str]:
        """Strings that highlighting and snippets look for, deduplicated."""
        needles: list[str] = []
        needles.extend(self.terms)
        needles.extend(self.exact_phrases)
        for group in self.or_queries:
            needles.extend(group)
        return list(dict.fromkeys(n for n in needles if n))


class ValidationResult(BaseModel):
    """Outcome of validating a raw query. Problems are data, never raised."""

    model_config = ConfigDict(frozen=True)

    valid: bool
    errors: tuple[str, ...] = ()
