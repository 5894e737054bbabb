"""Result models returned by the speller's reporting API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class WordSuggestion(BaseModel):
    word: str
    distance: int = Field(ge=0)
    frequency: int = Field(ge=0)

    model_config = ConfigDict(frozen=True)


class RankedSentence(BaseModel):
    sentence: str
    probability: float = Field(ge=0.0, le=1.0)

    model_config = ConfigDict(frozen=True)


class SentenceCorrectionResult(BaseModel):
    """Ranked corrections for one input sentence."""

    original_text: str
    tokens: list[str]
    best: str | None = None
    candidates: list[RankedSentence] = Field(default_factory=list)
    total_candidates: int = 0

    model_config = ConfigDict(frozen=True)
