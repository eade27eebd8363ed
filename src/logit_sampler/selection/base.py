"""Base class for selectors."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import numpy as np


class Selector(ABC):
    """Abstract base class for token selectors.

    A selector picks exactly one index from a (possibly transform-narrowed)
    logit vector. Positions holding ``-inf`` are excluded and must never
    be returned.
    """

    name: str = ""

    @abstractmethod
    def sample(self, logits: np.ndarray) -> int:
        """Select one token index.

        Args:
            logits: 1-D logit array (vocab_size,).

        Returns:
            Vocabulary index of the selected token.

        Raises:
            NoValidCandidateError: If every position is excluded.
            SamplingFailureError: If the random draw produced no result.
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
