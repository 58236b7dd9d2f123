"""Name lookup for random sources.

Each source module registers its class with ``@register_random_source``
when it is imported. ``weighted_random.sources`` imports every built-in, so
all of them can be looked up by name (for example from the ``WR_RANDOM_SOURCE``
setting) as soon as the package is imported.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

    from weighted_random.sources.base import RandomSource

_SOURCES: dict[str, type[RandomSource]] = {}


def register_random_source(name: str) -> Callable[[type[RandomSource]], type[RandomSource]]:
    """Class decorator registering a random source under *name*.

    Raises:
        ValueError: If a different class is already registered as *name*.
    """

    def decorator(source_cls: type[RandomSource]) -> type[RandomSource]:
        existing = _SOURCES.get(name)
        if existing is not None and existing is not source_cls:
            raise ValueError(
                f"Random source {name!r} is already registered to {existing.__name__}"
            )
        _SOURCES[name] = source_cls
        return source_cls

    return decorator


class RandomSourceRegistry:
    """Lookup and construction of registered random sources by name."""

    register = staticmethod(register_random_source)

    @staticmethod
    def get(name: str) -> type[RandomSource]:
        """Return the source class registered as *name*.

        Raises:
            KeyError: If nothing is registered under *name*. The message
                lists the available names.
        """
        try:
            return _SOURCES[name]
        except KeyError:
            available = ", ".join(sorted(_SOURCES)) or "(none)"
            raise KeyError(f"Unknown random source: {name!r}. Available: {available}") from None

    @staticmethod
    def create(name: str, seed: int | None = None) -> RandomSource:
        """Instantiate the source registered as *name* with *seed*."""
        return RandomSourceRegistry.get(name)(seed=seed)  # type: ignore[call-arg]

    @staticmethod
    def list_available() -> list[str]:
        return sorted(_SOURCES)
