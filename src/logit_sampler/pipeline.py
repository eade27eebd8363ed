"""Sampler chain: the entry point the inference loop calls once per token.

Orchestrates the per-token pipeline:
    raw scores → private float64 copy → transforms (in order) → selector → index.

A ``Temperature`` transform carrying exactly 0 is never applied; it
switches that invocation to greedy selection instead.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

import numpy as np

from logit_sampler.exceptions import InvalidParameterError, NoValidCandidateError
from logit_sampler.logging.types import TokenSamplingRecord
from logit_sampler.selection.greedy import Greedy
from logit_sampler.transforms.temperature import Temperature

if TYPE_CHECKING:
    from collections.abc import Sequence

    from logit_sampler.logging.logger import SamplingLogger
    from logit_sampler.selection.base import Selector
    from logit_sampler.transforms.base import ScoreTransform

logger = logging.getLogger("logit_sampler")

_GREEDY = Greedy()


def _is_zero_temperature(transform: ScoreTransform) -> bool:
    return isinstance(transform, Temperature) and transform.value == 0


def _to_numpy(scores: Any) -> np.ndarray:
    """Copy *scores* into a new 1-D float64 array.

    Accepts sequences of floats, numpy arrays of any float width, and
    tensors exposing ``detach().cpu().numpy()``.

    Raises:
        InvalidParameterError: If the scores are not one-dimensional.
    """
    if not isinstance(scores, np.ndarray):
        try:
            scores = scores.detach().cpu().numpy()
        except AttributeError:
            pass
    # np.array always copies, so callers' buffers are never mutated.
    working = np.array(scores, dtype=np.float64)
    if working.ndim != 1:
        raise InvalidParameterError(
            f"scores must be a 1-D vector, got shape {working.shape}"
        )
    return working


class SamplerChain:
    """Ordered composition of score transforms followed by one selector.

    Constructed once per generation (or per request) and called once per
    token. Transforms and the greedy selector are stateless; the weighted
    selector's generator is the only state carried across calls.

    Args:
        transforms: Transforms to apply, in order.
        selector: Selector invoked on the final vector.
        sampling_logger: Optional logger receiving one record per token.
        config_hash: Config fingerprint copied into each record.
    """

    def __init__(
        self,
        transforms: Sequence[ScoreTransform],
        selector: Selector,
        sampling_logger: SamplingLogger | None = None,
        config_hash: str = "",
    ) -> None:
        self._transforms = tuple(transforms)
        self._selector = selector
        self._logger = sampling_logger
        self._config_hash = config_hash

    @property
    def transforms(self) -> tuple[ScoreTransform, ...]:
        """The configured transforms, in application order."""
        return self._transforms

    @property
    def selector(self) -> Selector:
        """The configured selector (unaffected by the zero-temperature override)."""
        return self._selector

    def sample(self, raw_scores: Any) -> int:
        """Run every transform, then select one token index.

        Args:
            raw_scores: Logits for one step, length = vocabulary size.
                float32 or float64; the caller's buffer is not modified.

        Returns:
            Vocabulary index of the selected token.

        Raises:
            InvalidParameterError: If a transform parameter is out of range
                or the scores are not 1-D. Later transforms are not run.
            NoValidCandidateError: If the scores are empty or every
                position ends up excluded.
            SamplingFailureError: If the weighted draw produced no result.
        """
        t_start_ns = time.perf_counter_ns()

        logits = _to_numpy(raw_scores)
        if len(logits) == 0:
            raise NoValidCandidateError("cannot sample from an empty score vector")

        selector = self._selector
        greedy_override = False
        applied: list[str] = []
        for transform in self._transforms:
            if _is_zero_temperature(transform):
                selector = _GREEDY
                greedy_override = True
                continue
            logits = transform.apply(logits)
            applied.append(transform.name)

        if greedy_override:
            logger.debug(
                "temperature=0 in chain, using greedy instead of %s", self._selector.name
            )

        token_id = selector.sample(logits)

        if self._logger is not None:
            self._logger.log_token(
                TokenSamplingRecord(
                    timestamp_ns=t_start_ns,
                    total_sampling_ms=(time.perf_counter_ns() - t_start_ns) / 1_000_000.0,
                    selector_used=selector.name,
                    greedy_override=greedy_override,
                    transforms_applied=tuple(applied),
                    num_candidates=int(np.count_nonzero(~np.isneginf(logits))),
                    token_id=token_id,
                    vocab_size=len(logits),
                    config_hash=self._config_hash,
                )
            )
        return token_id

    def __repr__(self) -> str:
        return f"SamplerChain(transforms={list(self._transforms)!r}, selector={self._selector!r})"
