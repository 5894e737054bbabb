"""Shared fixtures: a small corpus on disk and a clean speller singleton."""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

import pytest

from smart_speller.spelling.frequency_table import FrequencyTable
from smart_speller.spelling.speller import SmartSpeller
from smart_speller.startup_setup import reset_speller

CORPUS_LINES = [
    "the 500",
    "quick 120",
    "brown 80",
    "fox 60",
    "jumps 40",
    "over 200",
    "lazy 30",
    "dog 90",
    "hello 100",
    "help 300",
    "hell 50",
    "held 70",
    "cat 110",
    "car 150",
    "cart 20",
    "a 1000",
    "i 900",
    "b 5",
]

# Six words one substitution away from "bax", ranked bat > bad > ... > bay
BAX_NEIGHBOURS = {"bat": 60, "bad": 50, "bag": 40, "ban": 30, "bar": 20, "bay": 10}


@pytest.fixture
def corpus_lines() -> list[str]:
    return list(CORPUS_LINES)


@pytest.fixture
def corpus_file(tmp_path: Path, corpus_lines: list[str]) -> Path:
    path = tmp_path / "corpus.txt"
    path.write_text("\n".join(corpus_lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def table(corpus_lines: list[str]) -> FrequencyTable:
    return FrequencyTable.from_lines(corpus_lines)


@pytest.fixture
def speller(table: FrequencyTable) -> SmartSpeller:
    return SmartSpeller(table)


@pytest.fixture
def bax_speller() -> SmartSpeller:
    return SmartSpeller(FrequencyTable(BAX_NEIGHBOURS), max_candidates=12)


@pytest.fixture(autouse=True)
def clean_speller() -> Generator[None, None, None]:
    """Every test starts and ends without a shared speller."""
    reset_speller()
    yield
    reset_speller()
