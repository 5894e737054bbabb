"""Tests for log-space probability primitives."""

from __future__ import annotations

import math

import pytest

from smart_speller.scoring.log_math import (
    NEGATIVE_INFINITY,
    exp_normalize,
    log_dot,
    log_fuzzy_or,
    log_fuzzy_or_all,
    log_sum_exp,
    log_sum_exp_all,
    log_sum_exp_normalize,
)


class TestLogSumExp:
    """Test cases for log_sum_exp() and log_sum_exp_all()."""

    @pytest.mark.parametrize("x", [-1000.0, -3.5, 0.0, 2.0])
    def test_singleton_is_identity(self, x: float) -> None:
        assert log_sum_exp_all([x]) == x

    @pytest.mark.parametrize("x", [-1000.0, -3.5, 0.0, 2.0])
    def test_pair_of_equal_values_adds_log_two(self, x: float) -> None:
        assert log_sum_exp_all([x, x]) == pytest.approx(x + math.log(2))
        assert log_sum_exp(x, x) == pytest.approx(x + math.log(2))

    def test_matches_direct_computation(self) -> None:
        values = [math.log(0.1), math.log(0.2), math.log(0.3)]

        assert log_sum_exp_all(values) == pytest.approx(math.log(0.6))
        assert log_sum_exp(values[0], values[1]) == pytest.approx(math.log(0.3))

    def test_negative_infinity_is_zero_probability(self) -> None:
        assert log_sum_exp_all([NEGATIVE_INFINITY, 0.0]) == 0.0
        assert log_sum_exp(NEGATIVE_INFINITY, -2.0) == -2.0
        assert log_sum_exp_all([NEGATIVE_INFINITY, NEGATIVE_INFINITY]) == NEGATIVE_INFINITY

    def test_large_magnitudes_do_not_underflow(self) -> None:
        assert log_sum_exp_all([-2000.0, -2000.0]) == pytest.approx(-2000.0 + math.log(2))

    def test_empty_collection_is_a_caller_error(self) -> None:
        with pytest.raises(ValueError):
            log_sum_exp_all([])


class TestNormalization:
    """Test cases for log_sum_exp_normalize() and exp_normalize()."""

    def test_normalized_probabilities_sum_to_one(self) -> None:
        probabilities = exp_normalize([-5.0, -6.0, -9.0])

        assert sum(probabilities) == pytest.approx(1.0)
        assert probabilities == sorted(probabilities, reverse=True)

    def test_log_normalized_values_keep_differences(self) -> None:
        normalized = log_sum_exp_normalize([-1.0, -2.0])

        assert normalized[0] - normalized[1] == pytest.approx(1.0)


class TestLogDot:
    """Test cases for log_dot()."""

    def test_dot_product_in_log_space(self) -> None:
        v1 = [math.log(0.5), math.log(0.5)]
        v2 = [math.log(0.2), math.log(0.4)]

        assert log_dot(v1, v2) == pytest.approx(math.log(0.3))

    def test_vectors_must_have_equal_length(self) -> None:
        with pytest.raises(ValueError):
            log_dot([0.0], [0.0, 0.0])


class TestLogFuzzyOr:
    """Test cases for log_fuzzy_or() and log_fuzzy_or_all()."""

    @pytest.mark.parametrize("p, q", [(0.5, 0.5), (0.1, 0.9), (1e-9, 0.3), (0.999, 0.2)])
    def test_probabilistic_union(self, p: float, q: float) -> None:
        assert math.exp(log_fuzzy_or(math.log(p), math.log(q))) == pytest.approx(p + q - p * q)

    @pytest.mark.parametrize("a, b", [(-0.1, -3.0), (-7.0, -0.5), (-2.0, -2.0)])
    def test_commutative(self, a: float, b: float) -> None:
        assert log_fuzzy_or(a, b) == pytest.approx(log_fuzzy_or(b, a))

    def test_zero_probability_is_identity(self) -> None:
        assert log_fuzzy_or(-1.5, NEGATIVE_INFINITY) == -1.5

    def test_empty_collection_is_zero(self) -> None:
        assert log_fuzzy_or_all([]) == 0.0

    def test_singleton_is_identity(self) -> None:
        assert log_fuzzy_or_all([-4.2]) == -4.2

    @pytest.mark.parametrize("probabilities", [[0.2, 0.3], [0.1, 0.2, 0.3], [0.05] * 7])
    def test_collection_union(self, probabilities: list[float]) -> None:
        """Test that the tree reduction equals 1 - prod(1 - p)."""
        expected = 1 - math.prod(1 - p for p in probabilities)
        result = log_fuzzy_or_all([math.log(p) for p in probabilities])

        assert math.exp(result) == pytest.approx(expected)
