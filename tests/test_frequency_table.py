"""Tests for corpus parsing and the frequency table."""

from __future__ import annotations

from pathlib import Path

import pytest

from smart_speller.error_handling import ErrorCode, SpellerError
from smart_speller.spelling.frequency_table import (
    FrequencyTable,
    is_initial,
    load_frequency_table,
    parse_corpus_line,
)


class TestParseCorpusLine:
    """Test cases for parse_corpus_line()."""

    @pytest.mark.parametrize(
        "line, expected",
        [
            ("the 500", ("the", 500)),
            ("The 500", ("the", 500)),
            ("word", ("word", 1)),
            ("word abc", ("word", 1)),
            ("  padded\t7  ", ("padded", 7)),
            ("word 0", ("word", 0)),
        ],
    )
    def test_parses_word_and_frequency(self, line: str, expected: tuple[str, int]) -> None:
        """Test that the word is lowercased and the count defaults to 1."""
        assert parse_corpus_line(line) == expected

    @pytest.mark.parametrize("line", ["", "   ", "\n", "word -3"])
    def test_malformed_lines(self, line: str) -> None:
        """Test that blank lines and negative counts are rejected."""
        assert parse_corpus_line(line) is None


class TestInitials:
    """Test cases for the initials filter."""

    @pytest.mark.parametrize("word", ["b", "x", "z"])
    def test_single_consonants_are_initials(self, word: str) -> None:
        assert is_initial(word)

    @pytest.mark.parametrize("word", ["a", "i", "ab", "the"])
    def test_standalone_letters_and_words_are_kept(self, word: str) -> None:
        assert not is_initial(word)


class TestFrequencyTable:
    """Test cases for FrequencyTable."""

    def test_from_lines_sums_duplicates(self) -> None:
        """Test that repeated words accumulate their counts."""
        table = FrequencyTable.from_lines(["dog 3", "Dog 4", "cat"])

        assert table["dog"] == 7
        assert table["cat"] == 1
        assert table.total == 8
        assert table.vocabulary_size == 2

    def test_from_lines_skips_initials_and_malformed_lines(self) -> None:
        """Test that initials and unusable lines never enter the vocabulary."""
        table = FrequencyTable.from_lines(["b 5", "a 10", "", "bad -1", "i 2"])

        assert set(table) == {"a", "i"}

    def test_unknown_word_has_zero_frequency(self, table: FrequencyTable) -> None:
        assert table.frequency("zebra") == 0
        assert "zebra" not in table

    def test_is_read_only_mapping(self, table: FrequencyTable) -> None:
        """Test that the table exposes no mutation methods."""
        with pytest.raises(TypeError):
            table["the"] = 1  # type: ignore[index]


class TestLoadFrequencyTable:
    """Test cases for load_frequency_table()."""

    def test_loads_corpus_file(self, corpus_file: Path) -> None:
        table = load_frequency_table(corpus_file)

        assert table["the"] == 500
        assert "b" not in table

    def test_missing_file_is_fatal(self, tmp_path: Path) -> None:
        """Test that a missing corpus raises instead of yielding an empty table."""
        with pytest.raises(SpellerError) as exc_info:
            load_frequency_table(tmp_path / "missing.txt")

        assert exc_info.value.error_code == ErrorCode.RESOURCE_NOT_FOUND.value

    def test_empty_vocabulary_is_fatal(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.txt"
        path.write_text("\n\nq 3\n", encoding="utf-8")

        with pytest.raises(SpellerError) as exc_info:
            load_frequency_table(path)

        assert exc_info.value.error_code == ErrorCode.INITIALIZATION_FAILED.value

    def test_undecodable_file_is_fatal(self, tmp_path: Path) -> None:
        path = tmp_path / "latin1.txt"
        path.write_bytes("caf\xe9 3\n".encode("latin-1"))

        with pytest.raises(SpellerError) as exc_info:
            load_frequency_table(path, encoding="utf-8")

        assert exc_info.value.error_code == ErrorCode.INITIALIZATION_FAILED.value
        assert exc_info.value.details["path"] == str(path)
