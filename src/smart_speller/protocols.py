from __future__ import annotations

from typing import Protocol


class SpellCorrectorProtocol(Protocol):
    """Public surface shared by every spelling corrector."""

    def correct(self, word: str) -> str:
        """Return the top suggestion for word, or the word itself when none exists."""
        ...

    def candidates(self, word: str) -> list[str]:
        """Return every suggestion for word, best first."""
        ...

    def process(self, sentence: str) -> dict[str, float]:
        """Return candidate sentences mapped to probabilities, most probable first."""
        ...
