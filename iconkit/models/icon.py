"""Icon data model shared by discovery and emission."""

from __future__ import annotations

import enum
from pathlib import Path
from typing import Union

from pydantic import BaseModel, ConfigDict, Field


class VariantLabel(str, enum.Enum):
    OUTLINE = "outline"
    SOLID = "solid"
    MINI = "mini"
    MICRO = "micro"


class StructuredVariant(BaseModel):
    """Root <svg> attributes plus the attribute set of every <path>, in order.

    Serialized as ``{"a": ..., "path": [...]}`` which is what the generated
    component reads.
    """

    model_config = ConfigDict(populate_by_name=True)

    attributes: dict[str, str] = Field(default_factory=dict, alias="a")
    primitives: list[dict[str, str]] = Field(default_factory=list, alias="path")


# Raw strategy yields the cleaned markup string itself.
VariantData = Union[StructuredVariant, str]


class IconRecord(BaseModel):
    """Every discovered variant of one canonical icon name."""

    name: str
    variants: dict[VariantLabel, VariantData] = Field(default_factory=dict)
    # Source file per variant, kept for collision reporting
    sources: dict[VariantLabel, Path] = Field(default_factory=dict)

    def set_variant(self, label: VariantLabel, data: VariantData, source: Path) -> Path | None:
        """Store a variant; returns the overwritten source if it came from another file name."""
        previous = self.sources.get(label)
        self.variants[label] = data
        self.sources[label] = source
        if previous is not None and previous.name != source.name:
            return previous
        return None

    def to_export(self) -> dict[str, object]:
        """Variants as plain data, keyed by label string."""
        out: dict[str, object] = {}
        for label, data in self.variants.items():
            if isinstance(data, StructuredVariant):
                out[label.value] = data.model_dump(by_alias=True)
            else:
                out[label.value] = data
        return out


class Collision(BaseModel):
    name: str
    variant: VariantLabel
    kept: Path
    dropped: Path


class GenerationResult(BaseModel):
    """Summary of one generation pass."""

    icons: list[str] = Field(default_factory=list)
    skipped: list[Path] = Field(default_factory=list)
    collisions: list[Collision] = Field(default_factory=list)
    written: list[Path] = Field(default_factory=list)
