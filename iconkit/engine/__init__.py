"""Icon discovery engine."""

from iconkit.engine import strategies  # noqa: F401  (registers built-in strategies)
from iconkit.engine.discovery import SIZE_DIRS, discover_icons
from iconkit.engine.registry import get_registry, strategy

__all__ = [
    "SIZE_DIRS",
    "discover_icons",
    "get_registry",
    "strategy",
]
