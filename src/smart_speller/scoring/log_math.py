"""
Logarithm utilities.

All functions take and return natural-log probabilities. ``-inf`` stands for
probability zero throughout.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

NEGATIVE_INFINITY = float("-inf")


def log_sum_exp(log1: float, log2: float) -> float:
    """``log(exp(log1) + exp(log2))`` without leaving log space."""
    if log1 < log2:
        log1, log2 = log2, log1
    if math.isinf(log2):
        return log1
    return math.log1p(math.exp(log2 - log1)) + log1


def log_sum_exp_all(logarithms: Sequence[float]) -> float:
    """``log(sum(exp(x)))`` over a non-empty collection.

    Raises:
        ValueError: If ``logarithms`` is empty.
    """
    if not logarithms:
        raise ValueError("log_sum_exp_all requires at least one value")
    maximum = max(logarithms)
    if math.isinf(maximum):
        return maximum
    return math.log(math.fsum(math.exp(value - maximum) for value in logarithms)) + maximum


def log_sum_exp_normalize(logarithms: Sequence[float]) -> list[float]:
    """Shift log values so they describe a distribution (log space)."""
    total = log_sum_exp_all(logarithms)
    return [value - total for value in logarithms]


def exp_normalize(logarithms: Sequence[float]) -> list[float]:
    """Normalized probabilities (normal space) from log values."""
    return [math.exp(value) for value in log_sum_exp_normalize(logarithms)]


def log_dot(logarithms1: Sequence[float], logarithms2: Sequence[float]) -> float:
    """Log of the dot product of two vectors given element-wise in log space."""
    if len(logarithms1) != len(logarithms2):
        raise ValueError(
            f"Vectors must be the same size, got {len(logarithms1)} and {len(logarithms2)}"
        )
    return log_sum_exp_all([a + b for a, b in zip(logarithms1, logarithms2)])


def log_fuzzy_or(log1: float, log2: float) -> float:
    """Probabilistic union ``p + q - p*q`` in log space."""
    if log1 < log2:
        log1, log2 = log2, log1
    if log2 == NEGATIVE_INFINITY:
        return log1
    return math.log1p(math.exp(log2) * math.expm1(-log1)) + log1


def log_fuzzy_or_all(logarithms: Sequence[float]) -> float:
    """Fuzzy-or over a collection, reduced as a balanced binary tree.

    Pairwise reduction in halves keeps rounding error growth logarithmic in
    the number of terms. An empty collection yields 0.0.
    """
    n = len(logarithms)
    if n == 0:
        return 0.0
    if n == 1:
        return logarithms[0]
    if n == 2:
        return log_fuzzy_or(logarithms[0], logarithms[1])
    middle = n // 2
    return log_fuzzy_or(
        log_fuzzy_or_all(logarithms[:middle]),
        log_fuzzy_or_all(logarithms[middle:]),
    )
