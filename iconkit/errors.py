"""Generator exceptions."""

from __future__ import annotations


class IconkitError(Exception):
    """Base class for generator failures."""


class UnparsableSvgError(IconkitError):
    """The source has no recognizable <svg> root tag."""


class UnknownStrategyError(IconkitError):
    """No extraction strategy is registered under the requested name."""
