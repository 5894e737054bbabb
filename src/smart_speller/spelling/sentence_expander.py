"""
Sentence candidate expansion.

Each token is limited to its closest suggestions, those at the smallest edit
distance found, and starts at the most frequent of them. Further ones are admitted
one at a time, always for the token whose next suggestion is the most
frequent word (its "horizon"), until the cartesian product of admitted
suggestions reaches the candidate budget or no token has anything left.
"""

from __future__ import annotations

import heapq
import itertools
import math
from typing import Any

from smart_speller.logging_utils import create_service_logger
from smart_speller.spelling.frequency_table import FrequencyTable
from smart_speller.spelling.lookup import LookupEngine

logger = create_service_logger("smart_speller.sentence_expander")

DEFAULT_MAX_CANDIDATES = 12


def tokenize(sentence: str) -> list[str]:
    """Lowercase and split on whitespace."""
    return sentence.lower().split()


class SentenceExpander:
    def __init__(
        self,
        engine: LookupEngine,
        table: FrequencyTable,
        max_candidates: int = DEFAULT_MAX_CANDIDATES,
        metrics: dict[str, Any] | None = None,
    ) -> None:
        self.engine = engine
        self.table = table
        self.max_candidates = max_candidates
        self._metrics = metrics

    def closest_suggestions(self, token: str) -> list[str]:
        """Suggestions at the smallest edit distance found for ``token``, best first.

        Unresolved tokens come back from the lookup as themselves at distance 0.
        """
        suggestions = self.engine.lookup(token)
        nearest = min(suggestions.values())
        return [word for word, distance in suggestions.items() if distance == nearest]

    def expand(self, sentence: str, max_candidates: int | None = None) -> list[str]:
        """Expand ``sentence`` into alternate full sentences, best guess first.

        The budget is checked only after each admitted suggestion, so the
        result may hold more than ``max_candidates`` sentences.
        """
        if max_candidates is None:
            max_candidates = self.max_candidates

        tokens = tokenize(sentence)
        if not tokens:
            return []

        ranked = [self.closest_suggestions(token) for token in tokens]
        included = [[suggestions[0]] for suggestions in ranked]

        heap = [(-self._horizon(ranked[i], 1), i) for i in range(len(ranked))]
        heapq.heapify(heap)

        product = 1
        while product < max_candidates:
            negative_horizon, position = heapq.heappop(heap)
            if negative_horizon == 0:
                break
            chosen = included[position]
            chosen.append(ranked[position][len(chosen)])
            heapq.heappush(heap, (-self._horizon(ranked[position], len(chosen)), position))
            product = math.prod(len(choices) for choices in included)

        sentences = [" ".join(combination) for combination in itertools.product(*included)]
        logger.debug(
            f"Expanded {len(tokens)} tokens into {len(sentences)} candidate sentences",
            admitted=[len(choices) for choices in included],
        )
        if self._metrics and "sentence_candidates" in self._metrics:
            self._metrics["sentence_expansions_total"].inc()
            self._metrics["sentence_candidates"].observe(len(sentences))
        return sentences

    def _horizon(self, suggestions: list[str], next_index: int) -> int:
        if next_index < len(suggestions):
            return self.table.frequency(suggestions[next_index])
        return 0
