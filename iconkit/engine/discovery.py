"""Discovery walker: size/variant/file traversal feeding the active extractor.

Input layout::

    <svg_root>/16/<any>/*.svg      -> micro
    <svg_root>/20/<any>/*.svg      -> mini
    <svg_root>/24/outline/*.svg    -> outline
    <svg_root>/24/solid/*.svg      -> solid

Every file's stem is normalized to a PascalCase name; all forms of the same
icon accumulate under that name.
"""

from __future__ import annotations

import logging
from pathlib import Path

from iconkit.engine.registry import Extractor
from iconkit.errors import UnparsableSvgError
from iconkit.models.icon import Collision, GenerationResult, IconRecord, VariantLabel
from iconkit.naming import to_pascal_case

logger = logging.getLogger(__name__)

SIZE_DIRS = ("16", "20", "24")

# 24 has no alias: its variant folder name is the label.
SIZE_ALIASES = {
    "16": VariantLabel.MICRO,
    "20": VariantLabel.MINI,
}

SVG_SUFFIX = ".svg"

FULL_SIZE_LABELS = frozenset({VariantLabel.OUTLINE, VariantLabel.SOLID})


def resolve_variant_label(size: str, folder: str) -> VariantLabel | None:
    """Map a size directory and variant folder to a label, or None if unsupported."""
    if size in SIZE_ALIASES:
        return SIZE_ALIASES[size]
    try:
        label = VariantLabel(folder)
    except ValueError:
        return None
    return label if label in FULL_SIZE_LABELS else None


def discover_icons(
    svg_root: Path,
    extractor: Extractor,
    result: GenerationResult | None = None,
) -> dict[str, IconRecord]:
    """Walk ``svg_root`` and return canonical name -> IconRecord.

    Missing size directories are skipped. Files the extractor cannot parse are
    logged and skipped. When two source files map to the same name and variant,
    the one processed last wins and the collision is logged.
    """
    icons: dict[str, IconRecord] = {}
    if result is None:
        result = GenerationResult()

    for size in SIZE_DIRS:
        size_path = svg_root / size
        if not size_path.is_dir():
            logger.debug("No %s directory under %s, skipping", size, svg_root)
            continue

        for variant_path in size_path.iterdir():
            if not variant_path.is_dir():
                continue

            label = resolve_variant_label(size, variant_path.name)
            if label is None:
                logger.warning("Unsupported variant folder %s/%s, skipping", size, variant_path.name)
                continue

            svg_files = [p for p in variant_path.iterdir() if p.is_file() and p.suffix == SVG_SUFFIX]
            logger.info(
                "Processing %s/%s -> %s (%d icons)", size, variant_path.name, label.value, len(svg_files)
            )

            for svg_file in svg_files:
                _process_file(svg_file, label, extractor, icons, result)

    return icons


def _process_file(
    svg_file: Path,
    label: VariantLabel,
    extractor: Extractor,
    icons: dict[str, IconRecord],
    result: GenerationResult,
) -> None:
    name = to_pascal_case(svg_file.stem)

    try:
        data = extractor(svg_file.read_text(encoding="utf-8-sig", errors="replace"))
    except UnparsableSvgError as e:
        logger.warning("Failed to parse %s, skipping: %s", svg_file, e)
        result.skipped.append(svg_file)
        return

    record = icons.get(name)
    if record is None:
        record = icons[name] = IconRecord(name=name)

    dropped = record.set_variant(label, data, svg_file)
    if dropped is not None:
        logger.warning("%s (%s): %s overrides %s", name, label.value, svg_file, dropped)
        result.collisions.append(Collision(name=name, variant=label, kept=svg_file, dropped=dropped))
