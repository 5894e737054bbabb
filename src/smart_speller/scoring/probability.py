"""Unigram probability scoring of words and candidate sentences."""

from __future__ import annotations

import math
from collections.abc import Iterable

from smart_speller.scoring.log_math import log_sum_exp_all
from smart_speller.spelling.frequency_table import FrequencyTable
from smart_speller.spelling.lookup import is_pass_through


class ProbabilityScorer:
    """Add-one smoothed unigram model over a frequency table.

    The denominator is fixed for the lifetime of the table, so it is computed
    once at construction.
    """

    def __init__(self, table: FrequencyTable) -> None:
        self.table = table
        self._log_denominator = math.log(table.total + table.vocabulary_size)

    def word_log_probability(self, word: str) -> float:
        return math.log(self.table.frequency(word) + 1) - self._log_denominator

    def word_log_probabilities(self, words: Iterable[str]) -> dict[str, float]:
        """Log-probability per distinct word, most probable first."""
        scored = {word: self.word_log_probability(word) for word in words}
        return dict(sorted(scored.items(), key=lambda item: item[1], reverse=True))

    def sentence_log_probability(self, sentence: str) -> float:
        """Sum of word log-probabilities; pass-through tokens count as certain."""
        return sum(
            self.word_log_probability(token)
            for token in sentence.split()
            if not is_pass_through(token)
        )

    def rank(self, sentences: Iterable[str]) -> dict[str, float]:
        """Normalize candidate sentences into a distribution, most probable first.

        Returns:
            Ordered mapping sentence -> probability; values sum to 1. An empty
            input gives an empty mapping.
        """
        log_probabilities = {
            sentence: self.sentence_log_probability(sentence) for sentence in sentences
        }
        if not log_probabilities:
            return {}

        denominator = log_sum_exp_all(list(log_probabilities.values()))
        probabilities = {
            sentence: math.exp(log_probability - denominator)
            for sentence, log_probability in log_probabilities.items()
        }
        return dict(sorted(probabilities.items(), key=lambda item: item[1], reverse=True))
