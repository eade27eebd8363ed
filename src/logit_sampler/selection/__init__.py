"""Token selection subsystem for logit-sampler.

Selectors pick one index from a logit vector: ``Greedy`` takes the
arg-max, ``Weighted`` draws from the softmax distribution.
"""

from logit_sampler.selection.base import Selector
from logit_sampler.selection.greedy import Greedy
from logit_sampler.selection.registry import SelectorRegistry
from logit_sampler.selection.weighted import Weighted

__all__ = [
    "Greedy",
    "Selector",
    "SelectorRegistry",
    "Weighted",
]
