"""Tests for the TopK transform."""

from __future__ import annotations

import numpy as np
import pytest

from logit_sampler.exceptions import InvalidParameterError
from logit_sampler.transforms.top_k import TopK


class TestTopK:
    """Tests for top-k filtering."""

    def test_known_vector(self, ascending_logits: np.ndarray) -> None:
        """TopK(3) keeps the three largest logits."""
        result = TopK(3).apply(ascending_logits)
        expected = [-np.inf, -np.inf, -np.inf, -np.inf, 1.0, 2.0, 4.0]
        np.testing.assert_array_equal(result, expected)

    @pytest.mark.parametrize("k", [0, -1, -100])
    def test_non_positive_k_raises(self, k: int, ascending_logits: np.ndarray) -> None:
        """k <= 0 raises InvalidParameterError."""
        with pytest.raises(InvalidParameterError, match="k must be positive"):
            TopK(k).apply(ascending_logits)

    @pytest.mark.parametrize("k", [2.9, 0.5, float("nan")])
    def test_non_integral_k_raises(self, k: float, ascending_logits: np.ndarray) -> None:
        """Fractional or NaN k is rejected rather than truncated."""
        with pytest.raises(InvalidParameterError, match="k must be an integer"):
            TopK(k).apply(ascending_logits)

    def test_integral_float_k_accepted(self, ascending_logits: np.ndarray) -> None:
        """A float holding a whole number behaves like the int."""
        np.testing.assert_array_equal(
            TopK(3.0).apply(ascending_logits), TopK(3).apply(ascending_logits)
        )

    @pytest.mark.parametrize("k", [7, 10, 1000])
    def test_k_at_least_length_is_identity(self, k: int, ascending_logits: np.ndarray) -> None:
        """k >= len leaves the vector unchanged."""
        result = TopK(k).apply(ascending_logits)
        np.testing.assert_array_equal(result, ascending_logits)

    @pytest.mark.parametrize("k", [1, 5, 100, 999])
    def test_excluded_count_and_kept_values(self, k: int) -> None:
        """Exactly len-k positions become -inf; the k kept are the largest."""
        rng = np.random.default_rng(3)
        logits = rng.standard_normal(1000)
        result = TopK(k).apply(logits)

        assert int(np.sum(np.isneginf(result))) == len(logits) - k
        kept = np.sort(result[np.isfinite(result)])
        np.testing.assert_array_equal(kept, np.sort(logits)[-k:])

    def test_ties_keep_lower_index(self) -> None:
        """Among equal logits the stable sort keeps the earlier position."""
        logits = np.array([1.0, 5.0, 1.0, 1.0])
        result = TopK(2).apply(logits)
        np.testing.assert_array_equal(result, [1.0, 5.0, -np.inf, -np.inf])

    def test_length_preserved(self, ascending_logits: np.ndarray) -> None:
        """The output has the same length as the input."""
        assert len(TopK(2).apply(ascending_logits)) == len(ascending_logits)

    def test_input_not_mutated(self, ascending_logits: np.ndarray) -> None:
        """apply() does not write into the input array."""
        before = ascending_logits.copy()
        TopK(2).apply(ascending_logits)
        np.testing.assert_array_equal(ascending_logits, before)
