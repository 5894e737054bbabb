"""Tests for single word lookup."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from smart_speller.error_handling import ErrorCode, SpellerError
from smart_speller.spelling.deletion_index import build_deletion_index
from smart_speller.spelling.edit_distance import distance
from smart_speller.spelling.frequency_table import FrequencyTable
from smart_speller.spelling.lookup import LookupEngine, is_pass_through


@pytest.fixture
def engine(table: FrequencyTable) -> LookupEngine:
    return LookupEngine(table, build_deletion_index(table, max_distance=2))


class TestPassThrough:
    """Test cases for the pass-through pattern."""

    @pytest.mark.parametrize("token", ["42", "$5", "abc1", "€10", "£", "¥3"])
    def test_digits_and_currency_pass_through(self, token: str) -> None:
        assert is_pass_through(token)

    @pytest.mark.parametrize("token", ["hello", "dollar", ""])
    def test_words_do_not_pass_through(self, token: str) -> None:
        assert not is_pass_through(token)


class TestLookupEngine:
    """Test cases for LookupEngine.lookup()."""

    def test_transposition_finds_the(self, engine: LookupEngine) -> None:
        """Test that a swapped pair of letters still reaches the intended word."""
        suggestions = engine.lookup("hte", max_distance=2)

        assert "the" in suggestions
        assert suggestions["the"] <= 2

    def test_exact_word_ranks_first(self, engine: LookupEngine) -> None:
        suggestions = engine.lookup("dog")

        assert next(iter(suggestions)) == "dog"
        assert suggestions["dog"] == 0
        assert suggestions["fox"] == 2

    def test_orders_by_distance_then_frequency(self, engine: LookupEngine) -> None:
        """Test that equally distant words are ranked by corpus frequency."""
        suggestions = engine.lookup("helo")

        assert list(suggestions) == ["help", "hello", "held", "hell"]
        assert set(suggestions.values()) == {1}

    def test_single_letter_words_reached_from_empty_variant(self, engine: LookupEngine) -> None:
        assert engine.lookup("b") == {"a": 1, "i": 1}

    @pytest.mark.parametrize("query", ["zzzzz", "qqq", "xyzzyq"])
    def test_unresolved_query_returns_itself(self, engine: LookupEngine, query: str) -> None:
        """Test that a query far from every entry comes back unchanged."""
        assert engine.lookup(query) == {query: 0}

    def test_overlong_query_is_rejected_quickly(self, engine: LookupEngine) -> None:
        query = "hellohellohello"

        assert engine.lookup(query) == {query: 0}

    @pytest.mark.parametrize("token", ["$5", "42", "3rd"])
    def test_pass_through_tokens_are_not_corrected(
        self, engine: LookupEngine, token: str
    ) -> None:
        assert engine.lookup(token) == {token: 0}

    @pytest.mark.parametrize(
        "query", ["hte", "helo", "dgo", "quikc", "brwn", "lazzy", "ovr", "ct", "cartt"]
    )
    @pytest.mark.parametrize("max_distance", [1, 2])
    def test_suggestions_are_within_bound_and_sorted(
        self, engine: LookupEngine, table: FrequencyTable, query: str, max_distance: int
    ) -> None:
        """Test that every suggestion respects the bound and the ranking rule."""
        suggestions = engine.lookup(query, max_distance=max_distance)

        assert all(word_distance <= max_distance for word_distance in suggestions.values())
        assert all(distance(query, word) == d for word, d in suggestions.items())

        keys = [(d, -table.frequency(word)) for word, d in suggestions.items()]
        assert keys == sorted(keys)

    @pytest.mark.parametrize("query, rearranged", [("abcdef", "efabcd"), ("abcd", "cdab")])
    def test_same_length_rearrangement_beyond_bound_is_rejected(
        self, query: str, rearranged: str
    ) -> None:
        """Test that sharing a deletion variant is not enough for equal-length words."""
        table = FrequencyTable({rearranged: 10})
        engine = LookupEngine(table, build_deletion_index(table, max_distance=2))

        assert distance(query, rearranged) > 2
        assert engine.lookup(query) == {query: 0}

    def test_transposed_same_length_word_keeps_true_distance(self, engine: LookupEngine) -> None:
        assert engine.lookup("dgo") == {"dog": 1}

    def test_smaller_bound_narrows_results(self, engine: LookupEngine) -> None:
        assert "fox" in engine.lookup("dog", max_distance=2)
        assert "fox" not in engine.lookup("dog", max_distance=1)

    @pytest.mark.parametrize("max_distance", [-1, 3])
    def test_bound_outside_index_depth_is_rejected(
        self, engine: LookupEngine, max_distance: int
    ) -> None:
        with pytest.raises(SpellerError) as exc_info:
            engine.lookup("dog", max_distance=max_distance)

        assert exc_info.value.error_code == ErrorCode.VALIDATION_ERROR.value
        assert exc_info.value.details["field"] == "max_distance"

    def test_records_lookup_outcomes(self, table: FrequencyTable) -> None:
        """Test that each lookup increments the counter for its outcome."""
        counter = MagicMock()
        engine = LookupEngine(table, build_deletion_index(table), metrics={"lookups_total": counter})

        engine.lookup("42")
        counter.labels.assert_called_with(outcome="pass_through")
        engine.lookup("helo")
        counter.labels.assert_called_with(outcome="suggested")
        engine.lookup("zzzzz")
        counter.labels.assert_called_with(outcome="unresolved")
        engine.lookup("hellohellohello")
        counter.labels.assert_called_with(outcome="rejected")
        assert counter.labels.return_value.inc.call_count == 4
