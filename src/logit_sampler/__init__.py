"""logit-sampler: token selection for autoregressive text generation.

Turns one step's logits into a token index by applying an ordered chain
of score transforms (temperature, top-k, top-p, min-p) and then a
selector (greedy arg-max or a weighted random draw).
"""

from __future__ import annotations

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("logit-sampler")
except PackageNotFoundError:
    __version__ = "0.0.0"

from logit_sampler.config import SamplerConfig, resolve_config, validate_overrides
from logit_sampler.exceptions import (
    ConfigValidationError,
    InvalidParameterError,
    LogitSamplerError,
    NoValidCandidateError,
    SamplingFailureError,
)
from logit_sampler.factory import build_sampler
from logit_sampler.pipeline import SamplerChain
from logit_sampler.selection import Greedy, Selector, Weighted
from logit_sampler.transforms import MinP, ScoreTransform, Temperature, TopK, TopP

__all__ = [
    "ConfigValidationError",
    "Greedy",
    "InvalidParameterError",
    "LogitSamplerError",
    "MinP",
    "NoValidCandidateError",
    "SamplerChain",
    "SamplerConfig",
    "SamplingFailureError",
    "ScoreTransform",
    "Selector",
    "Temperature",
    "TopK",
    "TopP",
    "Weighted",
    "__version__",
    "build_sampler",
    "resolve_config",
    "validate_overrides",
]
