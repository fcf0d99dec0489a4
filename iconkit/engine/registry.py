"""Extraction strategy registry — each strategy is a plain function registered via decorator.

Usage:
    @strategy(name="structured", description="root attributes + path list")
    def structured(svg_text: str) -> StructuredVariant:
        return parse_svg_variant(svg_text)

A run uses exactly one strategy for every file.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from iconkit.errors import UnknownStrategyError
from iconkit.models.icon import VariantData

logger = logging.getLogger(__name__)

Extractor = Callable[[str], VariantData]


@dataclass
class StrategySpec:
    name: str
    fn: Extractor
    description: str = ""


class StrategyRegistry:
    """Registry of extraction strategies keyed by name."""

    def __init__(self) -> None:
        self._strategies: dict[str, StrategySpec] = {}

    def register(self, spec: StrategySpec) -> None:
        if spec.name in self._strategies:
            raise ValueError(f"Duplicate strategy name: {spec.name}")
        self._strategies[spec.name] = spec
        logger.debug("Registered strategy %s", spec.name)

    def get(self, name: str) -> StrategySpec:
        try:
            return self._strategies[name]
        except KeyError:
            known = ", ".join(sorted(self._strategies)) or "none"
            raise UnknownStrategyError(f"Unknown strategy {name!r} (known: {known})") from None

    def names(self) -> list[str]:
        return sorted(self._strategies)

    @property
    def count(self) -> int:
        return len(self._strategies)


# Module-level singleton
_registry = StrategyRegistry()


def get_registry() -> StrategyRegistry:
    return _registry


def strategy(*, name: str, description: str = ""):
    """Decorator to register an extraction strategy."""

    def decorator(fn: Extractor):
        _registry.register(StrategySpec(name=name, fn=fn, description=description))
        return fn

    return decorator
