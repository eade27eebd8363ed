"""Base class for score transforms.

Defines the abstract interface shared by every transform and the
numerically stable softmax used by the probability-based ones.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np


class ScoreTransform(ABC):
    """Abstract base class for score transforms.

    A transform maps a logit vector to a new logit vector of the same
    length. Narrowing transforms only ever write ``-inf``; they never
    re-admit a position a previous transform excluded. The input array
    is left untouched.

    Args:
        value: The transform's single scalar parameter. It is validated
            when ``apply()`` runs, not at construction.
    """

    name: str = ""

    def __init__(self, value: float) -> None:
        self._value = value

    @property
    def value(self) -> float:
        """The scalar parameter this transform was built with."""
        return self._value

    @abstractmethod
    def apply(self, logits: np.ndarray) -> np.ndarray:
        """Return the reshaped logit vector.

        Args:
            logits: 1-D logit array (vocab_size,). May contain ``-inf``.

        Returns:
            New array with the same shape as *logits*.

        Raises:
            InvalidParameterError: If the transform's parameter is out of range.
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"


def stable_softmax(logits: np.ndarray) -> np.ndarray:
    """Numerically stable softmax via shift-by-max.

    Args:
        logits: 1-D logit array (may contain -inf for excluded tokens).

    Returns:
        Probability array of the same shape, summing to 1.0. Excluded
        positions get probability 0.
    """
    finite_mask = np.isfinite(logits)
    if not np.any(finite_mask):
        # All masked -- return uniform over all tokens (degenerate case).
        n = len(logits)
        return np.full(n, 1.0 / n) if n else np.zeros(0)

    max_logit = np.max(logits[finite_mask])
    # -inf - max_logit is still -inf, exp(-inf) = 0.
    exp_shifted = np.exp(logits - max_logit)
    result: np.ndarray = exp_shifted / np.sum(exp_shifted)
    return result
