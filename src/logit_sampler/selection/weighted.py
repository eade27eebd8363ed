"""Weighted (categorical) selector.

Draws one token in proportion to its softmax probability. Excluded
positions are dropped before the softmax, and the draw locates a uniform
value from a ``numpy.random.Generator`` in the cumulative distribution.
"""

from __future__ import annotations

import threading

import numpy as np

from logit_sampler.exceptions import (
    InvalidParameterError,
    NoValidCandidateError,
    SamplingFailureError,
)
from logit_sampler.selection.base import Selector
from logit_sampler.selection.registry import SelectorRegistry
from logit_sampler.transforms.base import stable_softmax


@SelectorRegistry.register("weighted")
class Weighted(Selector):
    """Randomized draw proportional to probability mass.

    Args:
        seed: Optional RNG seed. The same seed and the same input vector
            always give the same sequence of draws.
        rng: Optional pre-built generator. Takes precedence over *seed*.
            With neither, the generator is seeded from OS entropy.

    Raises:
        InvalidParameterError: If *seed* is given and is not an integer.
    """

    def __init__(self, seed: int | None = None, rng: np.random.Generator | None = None) -> None:
        if seed is not None and (
            isinstance(seed, bool) or not isinstance(seed, (int, np.integer))
        ):
            raise InvalidParameterError(f"seed must be an integer, got {seed!r}")
        self._seed = seed
        self._rng = rng if rng is not None else np.random.default_rng(seed)
        self._lock = threading.Lock()

    @property
    def seed(self) -> int | None:
        """The seed this selector was built with, if any."""
        return self._seed

    def sample(self, logits: np.ndarray) -> int:
        """Draw one token index from the softmax of the non-excluded logits.

        Raises:
            NoValidCandidateError: If every position is -inf.
            SamplingFailureError: If a kept score is NaN or +inf, or the
                probability mass is not finite and positive, so the draw
                has no result.
        """
        # Keep a map back to the original vocabulary indices.
        indices = np.flatnonzero(~np.isneginf(logits))
        if len(indices) == 0:
            raise NoValidCandidateError("no valid logits found for weighted sampling")

        kept = logits[indices]
        if not np.all(np.isfinite(kept)):
            raise SamplingFailureError("weighted sampler failed, non-finite logits found")

        probs = stable_softmax(kept)
        cdf = np.cumsum(probs)
        total = float(cdf[-1])
        if not np.isfinite(total) or total <= 0.0:
            raise SamplingFailureError("weighted sampler failed, no valid token found")

        with self._lock:
            u = float(self._rng.random())

        # side="right" skips candidates whose probability underflowed to 0.
        pos = int(np.searchsorted(cdf, u * total, side="right"))
        # u * total can round up to total when u is just below 1.
        pos = min(pos, len(indices) - 1)
        return int(indices[pos])

    def __repr__(self) -> str:
        return f"Weighted(seed={self._seed!r})"
