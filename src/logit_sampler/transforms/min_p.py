"""Min-p filtering transform."""

from __future__ import annotations

import numpy as np

from logit_sampler.exceptions import InvalidParameterError
from logit_sampler.transforms.base import ScoreTransform, stable_softmax
from logit_sampler.transforms.registry import TransformRegistry


@TransformRegistry.register("min_p")
class MinP(ScoreTransform):
    """Exclude tokens whose probability is below ``p * max probability``.

    Unlike top-p, the cutoff depends on the magnitude of the mode's
    probability rather than on the cumulative mass of a sorted prefix.
    """

    def apply(self, logits: np.ndarray) -> np.ndarray:
        """Exclude low-probability tokens relative to the mode.

        Raises:
            InvalidParameterError: If p is not in (0, 1).
        """
        p = float(self._value)
        if not 0 < p < 1:
            raise InvalidParameterError(f"p must be between 0 and 1, got {p}")

        probs = stable_softmax(logits)
        if len(probs) == 0:
            return np.array(logits, dtype=np.float64)

        threshold = p * float(np.max(probs))
        result = np.array(logits, dtype=np.float64)
        result[probs < threshold] = -np.inf
        return result
