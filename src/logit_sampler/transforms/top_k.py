"""Top-k filtering transform."""

from __future__ import annotations

import numpy as np

from logit_sampler.exceptions import InvalidParameterError
from logit_sampler.transforms.base import ScoreTransform
from logit_sampler.transforms.registry import TransformRegistry


@TransformRegistry.register("top_k")
class TopK(ScoreTransform):
    """Keep only the k highest logits, setting the rest to -inf.

    Indices are fully sorted by descending logit with a stable sort, so
    among exactly equal logits the lower index is kept first.
    """

    def apply(self, logits: np.ndarray) -> np.ndarray:
        """Exclude everything outside the top k.

        Raises:
            InvalidParameterError: If k is not a positive integer.
        """
        if not float(self._value).is_integer():
            raise InvalidParameterError(f"k must be an integer, got {self._value}")
        k = int(self._value)
        if k <= 0:
            raise InvalidParameterError(f"k must be positive, got {k}")
        if k >= len(logits):
            return np.array(logits, dtype=np.float64)

        # Negating keeps the sort stable in descending order.
        order = np.argsort(-logits, kind="stable")
        result = np.array(logits, dtype=np.float64)
        result[order[k:]] = -np.inf
        return result
