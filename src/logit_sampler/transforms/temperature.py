"""Temperature scaling transform."""

from __future__ import annotations

import numpy as np

from logit_sampler.exceptions import InvalidParameterError
from logit_sampler.transforms.base import ScoreTransform
from logit_sampler.transforms.registry import TransformRegistry

# Floor for the divisor so tiny non-zero temperatures stay finite.
_MIN_TEMPERATURE = 1e-7
_MAX_TEMPERATURE = 2.0


@TransformRegistry.register("temperature")
class Temperature(ScoreTransform):
    """Shift logits by their maximum, then divide by the temperature.

    Formula::

        x_i' = (x_i - max(x)) / max(t, 1e-7)

    The shift leaves the ranking unchanged and keeps the largest value at
    0, so later exponentiation cannot overflow. A temperature of exactly 0
    is valid here but is intercepted by ``SamplerChain``, which switches
    to greedy selection instead of applying it.
    """

    def apply(self, logits: np.ndarray) -> np.ndarray:
        """Rescale *logits* by the temperature.

        Raises:
            InvalidParameterError: If the temperature is outside [0, 2].
        """
        t = float(self._value)
        if not 0 <= t <= _MAX_TEMPERATURE:
            raise InvalidParameterError(
                f"temperature must be between 0 and {_MAX_TEMPERATURE}, got {t}"
            )

        finite_mask = np.isfinite(logits)
        if not np.any(finite_mask):
            return np.array(logits, dtype=np.float64)

        max_logit = np.max(logits[finite_mask])
        result: np.ndarray = (logits - max_logit) / max(t, _MIN_TEMPERATURE)
        return result
