"""Built-in extraction strategies."""

from __future__ import annotations

from iconkit.engine.registry import strategy
from iconkit.models.icon import StructuredVariant
from iconkit.svg.parser import parse_svg_variant
from iconkit.svg.raw import read_raw_variant

STRUCTURED = "structured"
RAW = "raw"


@strategy(name=STRUCTURED, description="Root attribute map plus <path> attribute list")
def structured(svg_text: str) -> StructuredVariant:
    return parse_svg_variant(svg_text)


@strategy(name=RAW, description="Cleaned markup with currentColor paint injected")
def raw(svg_text: str) -> str:
    return read_raw_variant(svg_text)
