"""Confusion matrix evaluation of corrector output."""

from .scores import CategoryCounts, ConfusionMatrix, Scores

__all__ = ["CategoryCounts", "ConfusionMatrix", "Scores"]
