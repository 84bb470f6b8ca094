"""Test relevance scoring."""

import pytest

from query_engine import ParsedQuery, calculate_relevance_score, parse_search_query
from query_engine.search.scoring import RelevanceConfig


class TestCalculateRelevanceScore:
    """Test the relevance formula."""

    def test_simple_terms(self):
        """Should add the length of each matched term."""
        query = parse_search_query("париж отдых")
        score = calculate_relevance_score("Отдых в Париже", query, 1.0)
        assert score == 10

    def test_exact_phrase_bonus(self):
        """Should double the phrase length."""
        query = parse_search_query('"горящие авиабилеты"')
        text = "Горящие авиабилеты от Купибилет - лучшие предложения"
        assert calculate_relevance_score(text, query, 1.0) == 36

    def test_phrase_beats_terms(self):
        """Should rank a phrase match above the same words as terms."""
        text = "горящие авиабилеты"
        phrase = calculate_relevance_score(text, parse_search_query('"горящие авиабилеты"'))
        terms = calculate_relevance_score(text, parse_search_query("горящие авиабилеты"))
        assert phrase > terms

    def test_weight_multiplier(self):
        """Should scale linearly with weight."""
        query = parse_search_query("париж")
        text = "Париж - город любви"
        score1 = calculate_relevance_score(text, query, 1.0)
        score2 = calculate_relevance_score(text, query, 3.0)
        assert score2 == score1 * 3

    def test_default_weight(self):
        """Should use a neutral weight of 1.0."""
        query = parse_search_query("париж")
        assert calculate_relevance_score("Париж", query) == 5

    def test_presence_not_frequency(self):
        """Should count each term once regardless of occurrences."""
        query = parse_search_query("париж париж")
        assert calculate_relevance_score("Париж, Париж, Париж", query) == 5

    def test_excluded_term_penalty(self):
        """Should score text with an excluded term lower."""
        query = parse_search_query("отдых -дорого")
        score1 = calculate_relevance_score("Отдых в Париже", query, 1.0)
        score2 = calculate_relevance_score("Отдых в Париже, но дорого", query, 1.0)
        assert score1 > score2
        assert score2 == 0

    def test_exclusion_keeps_strong_matches(self):
        """Should subtract the excluded length, not zero the score."""
        query = parse_search_query("путешествие париж -дорого")
        text = "Путешествие в Париж, дорого"
        assert calculate_relevance_score(text, query) == 11 + 5 - 6

    def test_exclusion_per_occurrence(self):
        """Should penalize every occurrence of an excluded term."""
        query = parse_search_query("путешествие -дорого")
        once = calculate_relevance_score("путешествие дорого", query)
        twice = calculate_relevance_score("путешествие дорого дорого", query)
        assert once == 5
        assert twice == 0

    def test_or_queries(self):
        """Should score text matching any OR alternative."""
        query = parse_search_query("москва OR спб")
        assert calculate_relevance_score("Путешествие в Москва", query) == 6
        assert calculate_relevance_score("Путешествие в СПб", query) == 3
        assert calculate_relevance_score("Путешествие в Казань", query) == 0

    def test_or_group_counts_first_alternative(self):
        """Should add only one alternative per satisfied group."""
        query = ParsedQuery(or_queries=(("спб", "питер"),))
        assert calculate_relevance_score("питер и спб", query) == 3

    def test_field_query_substring(self):
        """Should match field values against the text."""
        query = parse_search_query("name:париж")
        assert calculate_relevance_score("Париж", query) == 5

    def test_field_query_scope(self):
        """Should only count field queries for the scored field."""
        query = parse_search_query("name:париж")
        assert calculate_relevance_score("Париж", query, scope="name") == 5
        assert calculate_relevance_score("Париж", query, scope="description") == 0

    def test_no_match(self):
        """Should return zero when nothing matches."""
        query = parse_search_query("париж")
        assert calculate_relevance_score("Отдых в Лондоне", query, 10.0) == 0

    def test_empty_query(self):
        """Should return zero for an empty query."""
        assert calculate_relevance_score("Париж", parse_search_query("")) == 0

    def test_only_exclusions(self):
        """Should return zero when the query only excludes."""
        assert calculate_relevance_score("дорого", parse_search_query("-дорого")) == 0

    def test_empty_text(self):
        """Should return zero for empty text."""
        assert calculate_relevance_score("", parse_search_query("париж")) == 0

    def test_zero_weight(self):
        """Should return zero with a zero weight."""
        assert calculate_relevance_score("Париж", parse_search_query("париж"), 0.0) == 0

    def test_negative_weight(self):
        """Should reject negative weights."""
        with pytest.raises(ValueError):
            calculate_relevance_score("Париж", parse_search_query("париж"), -1.0)

    def test_custom_config(self):
        """Should apply a custom phrase multiplier."""
        query = parse_search_query('"горящие авиабилеты"')
        config = RelevanceConfig(phrase_multiplier=3.0)
        assert calculate_relevance_score("горящие авиабилеты", query, config=config) == 54

    def test_special_characters(self):
        """Should match regex metacharacters literally."""
        query = parse_search_query("$100.99")
        assert calculate_relevance_score("Price is $100.99", query) == 7
        assert calculate_relevance_score("Price is $100999", query) == 0
