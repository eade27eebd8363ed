"""Greedy (arg-max) selector."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from logit_sampler.exceptions import NoValidCandidateError
from logit_sampler.selection.base import Selector
from logit_sampler.selection.registry import SelectorRegistry

if TYPE_CHECKING:
    from logit_sampler.transforms.base import ScoreTransform


@SelectorRegistry.register("greedy")
class Greedy(Selector):
    """Deterministic arg-max selection.

    Ties resolve to the first occurrence of the maximum. Stateless, so a
    single instance is safe to share.

    A vector whose every position is -inf raises NoValidCandidateError
    rather than returning index 0, so an excluded position is never
    selected.
    """

    def sample(self, logits: np.ndarray, *transforms: ScoreTransform) -> int:
        """Return the index of the largest logit.

        Transforms passed after *logits* are accepted and ignored: greedy
        selection is the arg-max of whatever vector it receives.

        Raises:
            NoValidCandidateError: If *logits* is empty or fully excluded.
        """
        if len(logits) == 0 or np.all(np.isneginf(logits)):
            raise NoValidCandidateError("no valid logits found for greedy sampling")
        return int(np.argmax(logits))
