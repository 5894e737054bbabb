"""
Spelling corrector facade.

Wires the frequency table, deletion index, lookup engine, sentence expander
and probability scorer together behind ``correct``, ``candidates`` and
``process``. Everything is built in the constructor and only read afterwards.
"""

from __future__ import annotations

import time
from pathlib import Path
from typing import TYPE_CHECKING, Any

from smart_speller.logging_utils import create_service_logger
from smart_speller.scoring.probability import ProbabilityScorer
from smart_speller.spelling.deletion_index import DEFAULT_MAX_DISTANCE, build_deletion_index
from smart_speller.spelling.frequency_table import FrequencyTable, load_frequency_table
from smart_speller.spelling.lookup import LookupEngine, is_pass_through
from smart_speller.spelling.models import RankedSentence, SentenceCorrectionResult, WordSuggestion
from smart_speller.spelling.sentence_expander import (
    DEFAULT_MAX_CANDIDATES,
    SentenceExpander,
    tokenize,
)

if TYPE_CHECKING:  # pragma: no cover - imported for static typing only
    from smart_speller.config import Settings

logger = create_service_logger("smart_speller.speller")


class SmartSpeller:
    """SymSpell-style corrector with frequency-ranked sentence candidates."""

    def __init__(
        self,
        table: FrequencyTable,
        max_distance: int = DEFAULT_MAX_DISTANCE,
        max_candidates: int = DEFAULT_MAX_CANDIDATES,
        metrics: dict[str, Any] | None = None,
    ) -> None:
        started = time.perf_counter()
        self.table = table
        self.index = build_deletion_index(table, max_distance)
        self.engine = LookupEngine(table, self.index, metrics=metrics)
        self.expander = SentenceExpander(
            self.engine, table, max_candidates=max_candidates, metrics=metrics
        )
        self.scorer = ProbabilityScorer(table)
        elapsed = time.perf_counter() - started

        if metrics and "index_build_duration_seconds" in metrics:
            metrics["index_build_duration_seconds"].observe(elapsed)
            metrics["vocabulary_size"].set(table.vocabulary_size)
            metrics["deletion_variants"].set(self.index.variant_count)

        logger.info(
            "Spell corrector initialized",
            vocabulary_size=table.vocabulary_size,
            deletion_variants=self.index.variant_count,
            max_distance=max_distance,
            build_seconds=round(elapsed, 3),
        )

    @classmethod
    def from_corpus(
        cls,
        path: str | Path,
        max_distance: int = DEFAULT_MAX_DISTANCE,
        max_candidates: int = DEFAULT_MAX_CANDIDATES,
        encoding: str = "utf-8",
        metrics: dict[str, Any] | None = None,
    ) -> SmartSpeller:
        return cls(
            load_frequency_table(path, encoding=encoding),
            max_distance=max_distance,
            max_candidates=max_candidates,
            metrics=metrics,
        )

    @classmethod
    def from_settings(
        cls, settings: Settings, metrics: dict[str, Any] | None = None
    ) -> SmartSpeller:
        return cls.from_corpus(
            settings.effective_corpus_path,
            max_distance=settings.MAX_EDIT_DISTANCE,
            max_candidates=settings.MAX_SENTENCE_CANDIDATES,
            encoding=settings.CORPUS_ENCODING,
            metrics=metrics,
        )

    def lookup(self, word: str, max_distance: int | None = None) -> dict[str, int]:
        """Ranked ``{suggestion: distance}`` for a single word."""
        return self.engine.lookup(word, max_distance)

    def candidates(self, word: str) -> list[str]:
        """All suggestions for ``word``, best first.

        Pass-through tokens come back exactly as given; other words are
        lowercased to match the vocabulary.
        """
        if is_pass_through(word):
            return [word]
        return list(self.engine.lookup(word.lower()))

    def correct(self, word: str) -> str:
        """Top suggestion for ``word``, or ``word`` itself when there is none."""
        suggestions = self.candidates(word)
        return suggestions[0] if suggestions else word

    def suggestions(self, word: str) -> list[WordSuggestion]:
        """Suggestions with their distance and corpus frequency."""
        query = word if is_pass_through(word) else word.lower()
        return [
            WordSuggestion(
                word=suggestion,
                distance=distance,
                frequency=self.table.frequency(suggestion),
            )
            for suggestion, distance in self.engine.lookup(query).items()
        ]

    def expand(self, sentence: str, max_candidates: int | None = None) -> list[str]:
        return self.expander.expand(sentence, max_candidates)

    def process(self, sentence: str, max_candidates: int | None = None) -> dict[str, float]:
        """Candidate sentences with normalized probabilities, most probable first."""
        return self.scorer.rank(self.expand(sentence, max_candidates))

    def report(
        self, sentence: str, top: int | None = None, max_candidates: int | None = None
    ) -> SentenceCorrectionResult:
        """Structured view of ``process`` for callers that serialize results."""
        ranked = self.process(sentence, max_candidates)
        selected = list(ranked.items())[:top] if top is not None else list(ranked.items())
        return SentenceCorrectionResult(
            original_text=sentence,
            tokens=tokenize(sentence),
            best=next(iter(ranked), None),
            candidates=[
                RankedSentence(sentence=candidate, probability=min(probability, 1.0))
                for candidate, probability in selected
            ],
            total_candidates=len(ranked),
        )
