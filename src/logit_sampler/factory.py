"""Builds a ``SamplerChain`` from a ``SamplerConfig``.

This module is the central wiring point: it maps the string identifiers
in the config to the registered transform and selector classes. A
transform whose config value disables it is left out of the chain.
"""

from __future__ import annotations

import hashlib
import logging
from typing import TYPE_CHECKING

from logit_sampler.config import SamplerConfig
from logit_sampler.exceptions import ConfigValidationError
from logit_sampler.logging.logger import SamplingLogger
from logit_sampler.pipeline import SamplerChain
from logit_sampler.selection.registry import SelectorRegistry
from logit_sampler.transforms.registry import TransformRegistry

if TYPE_CHECKING:
    from logit_sampler.selection.base import Selector
    from logit_sampler.transforms.base import ScoreTransform

logger = logging.getLogger("logit_sampler")


def config_hash(config: SamplerConfig) -> str:
    """Return the first 16 hex characters of the SHA-256 of the config dump."""
    raw = config.model_dump_json().encode("utf-8")
    return hashlib.sha256(raw).hexdigest()[:16]


def _transform_value(config: SamplerConfig, name: str) -> float | None:
    """Return the configured parameter for *name*, or None if disabled."""
    if name == "temperature":
        return config.temperature
    if name == "top_k":
        return config.top_k if config.top_k > 0 else None
    if name == "top_p":
        return None if config.top_p >= 1.0 else config.top_p
    if name == "min_p":
        return None if config.min_p <= 0.0 else config.min_p
    raise ConfigValidationError(
        f"Unknown transform '{name}' in transform_order. "
        f"Available: {', '.join(TransformRegistry.list_registered())}"
    )


def build_transforms(config: SamplerConfig) -> list[ScoreTransform]:
    """Instantiate the enabled transforms in ``config.transform_order``.

    Raises:
        ConfigValidationError: If the order names an unknown transform.
    """
    transforms: list[ScoreTransform] = []
    for name in config.transform_order:
        value = _transform_value(config, name)
        if value is not None:
            transforms.append(TransformRegistry.build(name, value))
    return transforms


def build_selector(config: SamplerConfig) -> Selector:
    """Instantiate the selector named by ``config.selector``.

    Raises:
        ConfigValidationError: If the selector name is not registered.
    """
    try:
        return SelectorRegistry.build(config.selector, seed=config.seed)
    except KeyError as exc:
        raise ConfigValidationError(str(exc.args[0])) from exc


def build_sampler(
    config: SamplerConfig | None = None,
    sampling_logger: SamplingLogger | None = None,
) -> SamplerChain:
    """Build a full sampler chain from *config*.

    Args:
        config: Configuration to build from. Loaded from the environment
            when omitted.
        sampling_logger: Logger for per-token records. A new one is built
            from *config* when omitted.

    Returns:
        A ready-to-use SamplerChain.
    """
    if config is None:
        config = SamplerConfig()

    transforms = build_transforms(config)
    selector = build_selector(config)
    chain = SamplerChain(
        transforms,
        selector,
        sampling_logger=sampling_logger or SamplingLogger(config),
        config_hash=config_hash(config),
    )
    logger.debug(
        "Built sampler chain: transforms=%s, selector=%s",
        [t.name for t in transforms],
        selector.name,
    )
    return chain
