"""Artifact emitter: per-icon modules, barrel, type declarations, component.

Every output is a pure function of the aggregated icons and the strategy name.
Icon lists in the barrel and the type declarations are sorted by name so the
output does not depend on file-system listing order.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from iconkit.emit import templates
from iconkit.errors import UnknownStrategyError
from iconkit.models.icon import IconRecord

logger = logging.getLogger(__name__)


def render_icon_module(record: IconRecord) -> str:
    """``export const Name = {...};`` with the variants as a two-space JSON literal."""
    data = json.dumps(record.to_export(), indent=2)
    return templates.ICON_MODULE.format(name=record.name, data=data)


def render_barrel(names: list[str]) -> str:
    lines = [templates.BARREL_HEADER]
    for name in sorted(names):
        lines.append(templates.BARREL_LINE.format(name=name))
    return "".join(lines)


def render_type_declarations(names: list[str], strategy: str) -> str:
    lines = [templates.TYPES_IMPORTS, _lookup(templates.VARIANT_DATA_TYPES, strategy), templates.TYPES_BODY]
    for name in sorted(names):
        lines.append(templates.TYPES_LINE.format(name=name))
    return "".join(lines)


def component_source(strategy: str) -> str:
    return _lookup(templates.COMPONENTS, strategy)


def emit_artifacts(icons: dict[str, IconRecord], output_dir: Path, strategy: str) -> list[Path]:
    """Write the full artifact set under ``output_dir``; returns the written paths.

    OSError from directory creation or writes propagates.
    """
    # Resolve templates before touching the disk
    component = component_source(strategy)
    names = list(icons)
    types = render_type_declarations(names, strategy)

    icons_dir = output_dir / templates.ICONS_DIRNAME
    icons_dir.mkdir(parents=True, exist_ok=True)

    written: list[Path] = []
    for name, record in icons.items():
        written.append(_write(icons_dir / f"{name}.js", render_icon_module(record)))
    logger.info("Wrote %d icon modules to %s", len(icons), icons_dir)

    written.append(_write(output_dir / templates.COMPONENT_FILENAME, component))
    written.append(_write(output_dir / templates.BARREL_FILENAME, render_barrel(names)))
    logger.info("Generated barrel export file")
    written.append(_write(output_dir / templates.TYPES_FILENAME, types))
    logger.info("Generated type declarations")

    return written


def _write(path: Path, content: str) -> Path:
    path.write_text(content, encoding="utf-8")
    logger.debug("Wrote %s", path)
    return path


def _lookup(table: dict[str, str], strategy: str) -> str:
    try:
        return table[strategy]
    except KeyError:
        raise UnknownStrategyError(f"No templates for strategy {strategy!r}") from None
