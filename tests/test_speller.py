"""Tests for the SmartSpeller facade."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from smart_speller.config import Settings
from smart_speller.protocols import SpellCorrectorProtocol
from smart_speller.spelling.frequency_table import FrequencyTable
from smart_speller.spelling.models import SentenceCorrectionResult
from smart_speller.spelling.speller import SmartSpeller


class TestSmartSpeller:
    """Test cases for correct(), candidates() and process()."""

    def test_satisfies_corrector_protocol(self, speller: SmartSpeller) -> None:
        corrector: SpellCorrectorProtocol = speller

        assert corrector.correct("helo") == "help"

    @pytest.mark.parametrize(
        "word, expected",
        [("helo", "help"), ("hte", "the"), ("dgo", "dog"), ("dog", "dog"), ("b", "a")],
    )
    def test_correct(self, speller: SmartSpeller, word: str, expected: str) -> None:
        assert speller.correct(word) == expected

    def test_correct_returns_unknown_word_unchanged(self, speller: SmartSpeller) -> None:
        assert speller.correct("zzzzz") == "zzzzz"

    def test_candidates_are_ranked(self, speller: SmartSpeller) -> None:
        assert speller.candidates("helo") == ["help", "hello", "held", "hell"]

    def test_candidates_lowercase_the_query(self, speller: SmartSpeller) -> None:
        assert speller.candidates("HELO") == speller.candidates("helo")

    @pytest.mark.parametrize("token", ["$5", "42", "€3"])
    def test_pass_through_candidates_are_unchanged(
        self, speller: SmartSpeller, token: str
    ) -> None:
        assert speller.candidates(token) == [token]
        assert speller.correct(token) == token

    def test_suggestions_carry_distance_and_frequency(self, speller: SmartSpeller) -> None:
        suggestions = speller.suggestions("dog")

        assert [(s.word, s.distance, s.frequency) for s in suggestions] == [
            ("dog", 0, 90),
            ("fox", 2, 60),
        ]

    def test_process_probabilities_sum_to_one(self, speller: SmartSpeller) -> None:
        ranked = speller.process("helo dgo")

        assert sum(ranked.values()) == pytest.approx(1.0)
        assert next(iter(ranked)) == "help dog"
        assert list(ranked) == ["help dog", "hello dog", "held dog", "hell dog"]

    def test_process_keeps_pass_through_tokens(self, speller: SmartSpeller) -> None:
        ranked = speller.process("$5 dgo")

        assert all(sentence.startswith("$5 ") for sentence in ranked)
        assert sum(ranked.values()) == pytest.approx(1.0)

    def test_process_of_empty_sentence(self, speller: SmartSpeller) -> None:
        assert speller.process("") == {}

    def test_report(self, speller: SmartSpeller) -> None:
        report = speller.report("Helo dgo", top=3)

        assert isinstance(report, SentenceCorrectionResult)
        assert report.tokens == ["helo", "dgo"]
        assert report.best == "help dog"
        assert len(report.candidates) == 3
        assert report.total_candidates == 4
        assert report.candidates[0].sentence == "help dog"

    def test_report_of_empty_sentence(self, speller: SmartSpeller) -> None:
        report = speller.report("")

        assert report.best is None
        assert report.candidates == []

    def test_records_build_metrics(self, table: FrequencyTable) -> None:
        metrics = {
            "index_build_duration_seconds": MagicMock(),
            "vocabulary_size": MagicMock(),
            "deletion_variants": MagicMock(),
        }

        speller = SmartSpeller(table, metrics=metrics)

        metrics["index_build_duration_seconds"].observe.assert_called_once()
        metrics["vocabulary_size"].set.assert_called_once_with(table.vocabulary_size)
        metrics["deletion_variants"].set.assert_called_once_with(speller.index.variant_count)


class TestSmartSpellerConstruction:
    """Test cases for the alternate constructors."""

    def test_from_corpus(self, corpus_file: Path) -> None:
        speller = SmartSpeller.from_corpus(corpus_file, max_distance=1)

        assert speller.index.max_distance == 1
        assert speller.correct("helo") == "help"

    def test_from_settings(self, corpus_file: Path) -> None:
        settings = Settings(
            CORPUS_PATH=str(corpus_file), MAX_EDIT_DISTANCE=1, MAX_SENTENCE_CANDIDATES=3
        )

        speller = SmartSpeller.from_settings(settings)

        assert speller.index.max_distance == 1
        assert speller.expander.max_candidates == 3

    def test_bundled_corpus_loads(self) -> None:
        """Test that the packaged dictionary builds a working corrector."""
        speller = SmartSpeller.from_settings(Settings())

        assert speller.correct("teh") == "the"
        assert speller.correct("speling") == "spelling"
