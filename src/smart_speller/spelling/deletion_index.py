"""
Deletion index construction.

Every dictionary word is registered under each string obtainable by deleting
1..max_distance of its characters. A misspelling and its correction share a
deletion variant whenever their edit distance is within the bound, so the
lookup only has to generate deletions of the query, never insertions,
substitutions or transpositions.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from smart_speller.logging_utils import create_service_logger
from smart_speller.spelling.frequency_table import FrequencyTable

logger = create_service_logger("smart_speller.deletion_index")

DEFAULT_MAX_DISTANCE = 2

_EMPTY: Mapping[str, int] = MappingProxyType({})


def _next_bit_permutation(mask: int) -> int:
    """Lexicographically next integer with the same number of set bits."""
    t = mask | (mask - 1)
    return (t + 1) | (((~t & -~t) - 1) >> (mask & -mask).bit_length())


def deletions(word: str, depth: int) -> list[str]:
    """Distinct strings formed by deleting exactly ``depth`` characters.

    Each bitmask selects the ``len(word) - depth`` positions that are kept, so
    every subset is visited once and character order is preserved. Words no
    longer than ``depth`` have no variants.
    """
    n = len(word)
    if depth < 1 or n <= depth:
        return []

    variants: dict[str, None] = {}
    limit = 1 << n
    mask = (1 << (n - depth)) - 1
    while mask < limit:
        variants["".join(word[i] for i in range(n) if mask >> i & 1)] = None
        mask = _next_bit_permutation(mask)
    return list(variants)


def single_deletions(word: str) -> list[str]:
    """All distinct depth-1 deletions, including ``""`` for one-letter words."""
    return list(dict.fromkeys(word[:i] + word[i + 1 :] for i in range(len(word))))


class DeletionIndex:
    """Read-only multimap from deletion variant to ``{word: depth}``."""

    def __init__(
        self,
        variants: dict[str, dict[str, int]],
        words: Iterable[str],
        max_distance: int,
    ) -> None:
        self._variants = variants
        self._words = frozenset(words)
        self.max_distance = max_distance
        self.max_word_length = max((len(word) for word in self._words), default=0)

    def words_for(self, variant: str) -> Mapping[str, int]:
        """Dictionary words indexed under ``variant`` with their deletion depth."""
        entries = self._variants.get(variant)
        return MappingProxyType(entries) if entries is not None else _EMPTY

    def is_word(self, candidate: str) -> bool:
        return candidate in self._words

    @property
    def variant_count(self) -> int:
        return len(self._variants)

    @property
    def entry_count(self) -> int:
        return sum(len(entries) for entries in self._variants.values())

    def __contains__(self, variant: object) -> bool:
        return variant in self._variants

    def __repr__(self) -> str:
        return (
            f"DeletionIndex(words={len(self._words)}, variants={self.variant_count}, "
            f"max_distance={self.max_distance})"
        )


def build_deletion_index(
    table: FrequencyTable, max_distance: int = DEFAULT_MAX_DISTANCE
) -> DeletionIndex:
    """Build the deletion index for every word of ``table``.

    Single-letter words are reachable only from the empty variant at depth 1.
    Longer words register each distinct variant once per depth.
    """
    variants: dict[str, dict[str, int]] = {}

    for word in table:
        if len(word) == 1:
            variants.setdefault("", {})[word] = 1
            continue
        for depth in range(1, max_distance + 1):
            for variant in deletions(word, depth):
                variants.setdefault(variant, {})[word] = depth

    index = DeletionIndex(variants, table.keys(), max_distance)
    logger.info(
        f"Built deletion index: {index.variant_count} variants, "
        f"{index.entry_count} entries, max word length {index.max_word_length}"
    )
    return index
