"""Shared pytest fixtures for logit-sampler tests.

Provides reusable configuration objects and sample logit arrays that are
used across multiple test modules.
"""

from __future__ import annotations

import numpy as np
import pytest

from logit_sampler.config import SamplerConfig


@pytest.fixture
def default_config() -> SamplerConfig:
    """Return a SamplerConfig with all default values, ignoring any .env file."""
    return SamplerConfig(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def ascending_logits() -> np.ndarray:
    """Return the seven-token vector [-3, -2, -1, 0, 1, 2, 4]."""
    return np.array([-3.0, -2.0, -1.0, 0.0, 1.0, 2.0, 4.0])


@pytest.fixture
def sample_logits_uniform() -> np.ndarray:
    """Return equal logits over a vocabulary of 100."""
    return np.zeros(100, dtype=np.float64)


@pytest.fixture
def sample_logits_peaked() -> np.ndarray:
    """Return logits with one dominant token (index 0).

    Token 0 has logit 10.0; all others have logit 0.0.
    After softmax, token 0 has ~99.5% probability.
    """
    logits = np.zeros(100, dtype=np.float64)
    logits[0] = 10.0
    return logits


@pytest.fixture
def sample_logits_large_vocab() -> np.ndarray:
    """Return random logits for a larger vocabulary (32000).

    Uses a fixed RNG seed for reproducibility.
    """
    rng = np.random.default_rng(seed=12345)
    return rng.standard_normal(32000).astype(np.float64)
