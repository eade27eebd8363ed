"""Data types for the diagnostic logging subsystem."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TokenSamplingRecord:
    """Immutable record of a single token sampling event.

    Attributes:
        timestamp_ns: Monotonic clock reading at the start of sampling (ns).
        total_sampling_ms: Time for the full transform-then-select run (ms).
        selector_used: Name of the selector that picked the token.
        greedy_override: True if a zero temperature forced greedy selection.
        transforms_applied: Names of the transforms applied, in order.
        num_candidates: Non-excluded positions left before selection.
        token_id: Vocabulary index of the selected token.
        vocab_size: Length of the score vector.
        config_hash: 16-char SHA-256 prefix of the active config.
    """

    # Timing
    timestamp_ns: int
    total_sampling_ms: float

    # Pipeline
    selector_used: str
    greedy_override: bool
    transforms_applied: tuple[str, ...]
    num_candidates: int

    # Selection
    token_id: int
    vocab_size: int

    # Config snapshot
    config_hash: str
