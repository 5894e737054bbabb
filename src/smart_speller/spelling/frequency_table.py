"""
Frequency table loading.

The corpus is a line oriented text resource; each line holds a word and an
optional occurrence count (``<word> [<frequency>]``). Counts for repeated
words are summed. Single letters other than the standalone vowels ``a`` and
``i`` are treated as initials and never enter the vocabulary.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path

from smart_speller.error_handling import raise_initialization_failed, raise_resource_not_found
from smart_speller.logging_utils import create_service_logger

logger = create_service_logger("smart_speller.frequency_table")

STANDALONE_LETTERS = frozenset({"a", "i"})


def is_initial(word: str) -> bool:
    """True for single letters that only ever appear as initials."""
    return len(word) == 1 and word not in STANDALONE_LETTERS


def parse_corpus_line(line: str) -> tuple[str, int] | None:
    """Parse one corpus line into ``(word, frequency)``.

    Returns None for lines without a usable token. A missing or non-numeric
    frequency defaults to 1; a negative one makes the line malformed.
    """
    fields = line.split()
    if not fields:
        return None

    word = fields[0].lower()
    frequency = 1
    if len(fields) > 1:
        try:
            frequency = int(fields[1])
        except ValueError:
            frequency = 1
    if frequency < 0:
        return None
    return word, frequency


class FrequencyTable(Mapping[str, int]):
    """Immutable word -> occurrence count mapping.

    Unknown words have a frequency of 0, mirroring ``Counter`` semantics, so
    ranking code never needs a membership check before reading a count.
    """

    def __init__(self, counts: Mapping[str, int]) -> None:
        self._counts: dict[str, int] = {word: count for word, count in counts.items() if count >= 0}
        self._total = sum(self._counts.values())

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> FrequencyTable:
        """Build a table from corpus lines, skipping malformed lines and initials."""
        counter: Counter[str] = Counter()
        skipped = 0
        for line_number, line in enumerate(lines, start=1):
            parsed = parse_corpus_line(line)
            if parsed is None:
                if line.strip():
                    skipped += 1
                    logger.debug(f"Skipping malformed corpus line {line_number}: {line.rstrip()!r}")
                continue
            word, frequency = parsed
            if is_initial(word):
                continue
            counter[word] += frequency

        if skipped:
            logger.info(f"Skipped {skipped} malformed corpus lines")
        return cls(counter)

    def __getitem__(self, word: str) -> int:
        return self._counts[word]

    def __iter__(self) -> Iterator[str]:
        return iter(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    def __contains__(self, word: object) -> bool:
        return word in self._counts

    def frequency(self, word: str) -> int:
        """Occurrence count of ``word``; 0 when it is not in the vocabulary."""
        return self._counts.get(word, 0)

    @property
    def total(self) -> int:
        """Total frequency mass of the corpus."""
        return self._total

    @property
    def vocabulary_size(self) -> int:
        return len(self._counts)

    def __repr__(self) -> str:
        return f"FrequencyTable(words={len(self._counts)}, total={self._total})"


def load_frequency_table(path: str | Path, encoding: str = "utf-8") -> FrequencyTable:
    """Load the frequency table from a corpus file.

    Args:
        path: Location of the corpus resource.
        encoding: Text encoding of the corpus.

    Returns:
        The loaded, immutable frequency table.

    Raises:
        SpellerError: When the corpus cannot be read or yields no vocabulary.
            There is no degraded mode: an empty table would give every
            candidate the same probability.
    """
    corpus_path = Path(path)
    logger.info(f"Loading frequency table from: {corpus_path}")

    if not corpus_path.is_file():
        raise_resource_not_found(
            service="smart_speller",
            operation="load_frequency_table",
            resource_type="corpus",
            resource_id=str(corpus_path),
        )

    try:
        with open(corpus_path, encoding=encoding) as f:
            table = FrequencyTable.from_lines(f)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Error reading corpus file: {e}", exc_info=True)
        raise_initialization_failed(
            service="smart_speller",
            operation="load_frequency_table",
            component="frequency_table",
            message=f"Corpus could not be read: {e}",
            path=str(corpus_path),
        )

    if not table:
        raise_initialization_failed(
            service="smart_speller",
            operation="load_frequency_table",
            component="frequency_table",
            message="Corpus produced an empty vocabulary",
            path=str(corpus_path),
        )

    logger.info(f"Loaded {table.vocabulary_size} words (total frequency {table.total})")
    return table
