"""Registry for score transform implementations.

Uses a decorator pattern for registration so that the factory can build
a transform chain from the names listed in ``SamplerConfig.transform_order``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from collections.abc import Callable

    from logit_sampler.transforms.base import ScoreTransform


class TransformRegistry:
    """Registry mapping string names to ScoreTransform classes.

    Built-in transforms register via the ``@TransformRegistry.register()``
    decorator. The ``build()`` class method instantiates a transform with
    its scalar parameter.
    """

    _registry: ClassVar[dict[str, type[ScoreTransform]]] = {}

    @classmethod
    def register(cls, name: str) -> Callable[[type[ScoreTransform]], type[ScoreTransform]]:
        """Decorator that registers a ScoreTransform class under *name*.

        Args:
            name: Identifier used in config ``transform_order``.

        Returns:
            Decorator that registers the class and returns it unchanged.

        Raises:
            ValueError: If *name* is already registered.
        """

        def decorator(klass: type[ScoreTransform]) -> type[ScoreTransform]:
            if name in cls._registry:
                raise ValueError(f"Transform '{name}' is already registered")
            klass.name = name
            cls._registry[name] = klass
            return klass

        return decorator

    @classmethod
    def get(cls, name: str) -> type[ScoreTransform]:
        """Return the transform class registered under *name*.

        Raises:
            KeyError: If *name* is not registered.
        """
        if name not in cls._registry:
            available = ", ".join(sorted(cls._registry)) or "(none)"
            raise KeyError(f"Unknown transform '{name}'. Available: {available}")
        return cls._registry[name]

    @classmethod
    def build(cls, name: str, value: float) -> ScoreTransform:
        """Instantiate the transform registered under *name* with *value*."""
        return cls.get(name)(value)

    @classmethod
    def list_registered(cls) -> list[str]:
        """Return sorted list of registered transform names."""
        return sorted(cls._registry)
