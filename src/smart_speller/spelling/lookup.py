"""Single word lookup against the deletion index."""

from __future__ import annotations

import re
from collections import deque
from typing import Any

from smart_speller.error_handling import raise_validation_error
from smart_speller.logging_utils import create_service_logger
from smart_speller.spelling.deletion_index import DeletionIndex, single_deletions
from smart_speller.spelling.edit_distance import trimmed_distance
from smart_speller.spelling.frequency_table import FrequencyTable

logger = create_service_logger("smart_speller.lookup")

# Digits and currency markers are never corrected nor scored
PASS_THROUGH = re.compile(r"[\d$€£¥]")


def is_pass_through(token: str) -> bool:
    return PASS_THROUGH.search(token) is not None


class LookupEngine:
    """Ranked suggestions for one query within a bounded edit distance.

    The engine only reads the frequency table and the index, so a single
    instance can serve any number of concurrent callers.
    """

    def __init__(
        self,
        table: FrequencyTable,
        index: DeletionIndex,
        metrics: dict[str, Any] | None = None,
    ) -> None:
        self.table = table
        self.index = index
        self._metrics = metrics

    @property
    def max_distance(self) -> int:
        return self.index.max_distance

    def lookup(self, query: str, max_distance: int | None = None) -> dict[str, int]:
        """Return ``{suggestion: distance}`` ordered by distance, then frequency.

        A query that cannot or should not be corrected comes back unchanged
        as ``{query: 0}``.
        """
        if max_distance is None:
            max_distance = self.index.max_distance
        elif not 0 <= max_distance <= self.index.max_distance:
            raise_validation_error(
                service="smart_speller",
                operation="lookup",
                field="max_distance",
                message=(
                    f"max_distance must be between 0 and the indexed depth "
                    f"{self.index.max_distance}, got {max_distance}"
                ),
            )

        if is_pass_through(query):
            self._record("pass_through")
            return {query: 0}

        if len(query) - max_distance > self.index.max_word_length:
            self._record("rejected")
            return {query: 0}

        suggestions = self._search(query, max_distance)
        if not suggestions:
            self._record("unresolved")
            return {query: 0}

        self._record("suggested")
        ranked = sorted(
            suggestions.items(),
            key=lambda item: (item[1], -self.table.frequency(item[0]), item[0]),
        )
        return dict(ranked)

    def _search(self, query: str, max_distance: int) -> dict[str, int]:
        candidates: deque[str] = deque([query])
        visited: set[str] = {query}
        suggestions: dict[str, int] = {}
        # Words already judged, accepted or not
        seen: set[str] = set()

        while candidates:
            candidate = candidates.popleft()

            if self.index.is_word(candidate) and candidate not in seen:
                seen.add(candidate)
                suggestions[candidate] = len(query) - len(candidate)

            for word in self.index.words_for(candidate):
                if word in seen:
                    continue
                seen.add(word)

                distance = self._distance(query, candidate, word)
                if distance <= max_distance:
                    suggestions[word] = distance

            if len(query) - len(candidate) < max_distance:
                for deletion in single_deletions(candidate):
                    if deletion not in visited:
                        visited.add(deletion)
                        candidates.append(deletion)

        return suggestions

    @staticmethod
    def _distance(query: str, candidate: str, word: str) -> int:
        """Edit distance between ``query`` and a ``word`` reached via ``candidate``.

        When either side is the shared variant itself, the other side is only
        a run of deletions away and the length difference is exact. Every
        other pair, equal length or not, gets the full Damerau-Levenshtein
        computation on its trimmed core.
        """
        if word == query:
            return 0
        if len(word) == len(candidate):
            return len(query) - len(candidate)
        if len(query) == len(candidate):
            return len(word) - len(candidate)
        return trimmed_distance(word, query)

    def _record(self, outcome: str) -> None:
        if self._metrics and "lookups_total" in self._metrics:
            self._metrics["lookups_total"].labels(outcome=outcome).inc()
