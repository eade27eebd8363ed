"""Registry for selector implementations.

Mirrors the transform registry: built-in selectors register themselves
at import time, and the factory builds one by the config's ``selector``
name.
"""

from __future__ import annotations

import inspect
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from collections.abc import Callable

    from logit_sampler.selection.base import Selector


class SelectorRegistry:
    """Registry mapping string names to Selector classes."""

    _registry: ClassVar[dict[str, type[Selector]]] = {}

    @classmethod
    def register(cls, name: str) -> Callable[[type[Selector]], type[Selector]]:
        """Decorator that registers a Selector class under *name*.

        Raises:
            ValueError: If *name* is already registered.
        """

        def decorator(klass: type[Selector]) -> type[Selector]:
            if name in cls._registry:
                raise ValueError(f"Selector '{name}' is already registered")
            klass.name = name
            cls._registry[name] = klass
            return klass

        return decorator

    @classmethod
    def get(cls, name: str) -> type[Selector]:
        """Return the selector class registered under *name*.

        Raises:
            KeyError: If *name* is not registered.
        """
        if name not in cls._registry:
            available = ", ".join(sorted(cls._registry)) or "(none)"
            raise KeyError(f"Unknown selector '{name}'. Available: {available}")
        return cls._registry[name]

    @classmethod
    def build(cls, name: str, seed: int | None = None) -> Selector:
        """Instantiate the selector registered under *name*.

        If the selector constructor accepts a ``seed`` argument (detected
        from its signature), it is passed. Otherwise, the constructor is
        called with no arguments. Constructor errors propagate.
        """
        klass = cls.get(name)
        if "seed" in inspect.signature(klass.__init__).parameters:
            return klass(seed=seed)  # type: ignore[call-arg]
        return klass()

    @classmethod
    def list_registered(cls) -> list[str]:
        """Return sorted list of registered selector names."""
        return sorted(cls._registry)
