"""Diagnostic logger for per-token sampling events.

Uses the standard ``logging`` module with the ``"logit_sampler"`` logger.
No ``print()`` statements. Supports three verbosity levels and an
in-memory diagnostic mode for post-hoc analysis.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from logit_sampler.config import SamplerConfig
    from logit_sampler.logging.types import TokenSamplingRecord

logger = logging.getLogger("logit_sampler")


class SamplingLogger:
    """Per-token diagnostic logger.

    Log levels:
        ``"none"``: No logging output. Records are still stored if
        ``diagnostic_mode=True``.

        ``"summary"``: One line per token (token_id, candidates, selector,
        transforms, timing).

        ``"full"``: Full JSON dump of all record fields.
    """

    def __init__(self, config: SamplerConfig) -> None:
        self._log_level = config.log_level
        self._diagnostic_mode = config.diagnostic_mode
        self._records: list[TokenSamplingRecord] = []

    def log_token(self, record: TokenSamplingRecord) -> None:
        """Log a single token sampling event.

        Args:
            record: Immutable record of the sampling pipeline execution.
        """
        if self._diagnostic_mode:
            self._records.append(record)

        if self._log_level == "none":
            return

        if self._log_level == "summary":
            logger.info(
                "token=%d candidates=%d/%d selector=%s%s transforms=%s total=%.3fms",
                record.token_id,
                record.num_candidates,
                record.vocab_size,
                record.selector_used,
                " [GREEDY-OVERRIDE]" if record.greedy_override else "",
                ",".join(record.transforms_applied) or "-",
                record.total_sampling_ms,
            )
        elif self._log_level == "full":
            logger.info("sampling_record: %s", json.dumps(asdict(record), default=str))

    def get_diagnostic_data(self) -> list[TokenSamplingRecord]:
        """Return all stored records (requires ``diagnostic_mode=True``).

        Returns:
            A copy of the stored records; empty if diagnostic_mode is False.
        """
        return list(self._records)

    def get_summary_stats(self) -> dict[str, Any]:
        """Compute summary statistics over all stored records.

        Returns:
            Dictionary with aggregate stats, or empty dict if no records.
        """
        if not self._records:
            return {}

        candidates = [r.num_candidates for r in self._records]
        total_times = [r.total_sampling_ms for r in self._records]
        override_count = sum(1 for r in self._records if r.greedy_override)

        n = len(self._records)
        return {
            "total_tokens": n,
            "mean_candidates": sum(candidates) / n,
            "min_candidates": min(candidates),
            "max_candidates": max(candidates),
            "mean_total_ms": sum(total_times) / n,
            "max_total_ms": max(total_times),
            "greedy_override_count": override_count,
            "greedy_override_rate": override_count / n,
        }
