"""Nucleus (top-p) filtering transform."""

from __future__ import annotations

import numpy as np

from logit_sampler.exceptions import InvalidParameterError
from logit_sampler.transforms.base import ScoreTransform, stable_softmax
from logit_sampler.transforms.registry import TransformRegistry


@TransformRegistry.register("top_p")
class TopP(ScoreTransform):
    """Keep the shortest probability-sorted prefix whose mass exceeds p.

    Probabilities come from a stable softmax of the logits. Walking the
    tokens in descending probability order, the token at which the
    cumulative mass first exceeds ``p`` is kept and every later token is
    set to -inf on the logits (not on the probabilities).
    """

    def apply(self, logits: np.ndarray) -> np.ndarray:
        """Exclude the tail beyond the nucleus.

        Raises:
            InvalidParameterError: If p is not in (0, 1).
        """
        p = float(self._value)
        if not 0 < p < 1:
            raise InvalidParameterError(f"p must be between 0 and 1, got {p}")

        probs = stable_softmax(logits)
        order = np.argsort(-probs, kind="stable")
        cumulative = np.cumsum(probs[order])

        result = np.array(logits, dtype=np.float64)
        crossed = cumulative > p
        if np.any(crossed):
            cutoff_idx = int(np.argmax(crossed))
            result[order[cutoff_idx + 1 :]] = -np.inf
        return result
