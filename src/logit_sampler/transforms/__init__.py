"""Score transform subsystem for logit-sampler.

Transforms reshape a logit vector before selection: temperature scaling
rescales it, while top-k, top-p and min-p narrow the candidate set by
setting positions to -inf.
"""

from logit_sampler.transforms.base import ScoreTransform, stable_softmax
from logit_sampler.transforms.min_p import MinP
from logit_sampler.transforms.registry import TransformRegistry
from logit_sampler.transforms.temperature import Temperature
from logit_sampler.transforms.top_k import TopK
from logit_sampler.transforms.top_p import TopP

__all__ = [
    "MinP",
    "ScoreTransform",
    "Temperature",
    "TopK",
    "TopP",
    "TransformRegistry",
    "stable_softmax",
]
