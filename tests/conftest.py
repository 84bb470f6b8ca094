"""Test fixtures for query engine tests."""

import pytest


@pytest.fixture
def clean_env(monkeypatch):
    """Clean environment variables for testing."""
    # Remove all custom env vars to test defaults
    env_vars = [
        "SEARCH_MAX_QUERY_LEN",
        "SEARCH_SNIPPET_LENGTH",
        "SEARCH_HIGHLIGHT_TAG",
        "SEARCH_PHRASE_MULTIPLIER",
    ]
    for var in env_vars:
        monkeypatch.delenv(var, raising=False)
    yield
