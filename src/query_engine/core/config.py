"""
Engine Configuration

Settings shared by the parser, validator, scorer and snippet extractor.
Values come from environment variables and are read once at import.
"""

import os
from enum import Enum


class SearchField(str, Enum):
    """Fields that may be targeted with field:value syntax"""

    NAME = "name"
    DESCRIPTION = "description"
    STATUS = "status"
    TAGS = "tags"
    CATEGORY = "category"

    @classmethod
    def is_allowed(cls, field: str) -> bool:
        return field.lower() in cls._value2member_map_


def _get_int(name: str, default: int) -> int:
    """Read a non-negative integer environment variable."""
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise RuntimeError(f"Invalid {name} value: '{raw}'. Must be an integer.")
    if value < 0:
        raise RuntimeError(f"Invalid {name} value: '{raw}'. Must be >= 0.")
    return value


def _get_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        raise RuntimeError(f"Invalid {name} value: '{raw}'. Must be a number.")
    if value < 0:
        raise RuntimeError(f"Invalid {name} value: '{raw}'. Must be >= 0.")
    return value


class EngineSettings:
    """Query engine configuration"""

    # Validation
    MAX_QUERY_LEN: int = _get_int("SEARCH_MAX_QUERY_LEN", 500)

    # Display
    SNIPPET_LENGTH: int = _get_int("SEARCH_SNIPPET_LENGTH", 150)
    HIGHLIGHT_TAG: str = os.getenv("SEARCH_HIGHLIGHT_TAG", "mark")

    # Scoring
    PHRASE_MULTIPLIER: float = _get_float("SEARCH_PHRASE_MULTIPLIER", 2.0)


settings = EngineSettings()
