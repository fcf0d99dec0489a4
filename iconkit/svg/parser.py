"""Structured extraction — root <svg> attributes and <path> attribute sets.

Only the two element shapes the component needs are scanned; this is not a
general markup parser.
"""

from __future__ import annotations

import logging
import re

from iconkit.errors import UnparsableSvgError
from iconkit.models.icon import StructuredVariant
from iconkit.svg.cleaner import clean_svg

logger = logging.getLogger(__name__)

_SVG_TAG_RE = re.compile(r"<svg(\s[^>]*)?>")
_PATH_TAG_RE = re.compile(r"<path(\s[^>]*?)?\s*/?>")
_ATTR_RE = re.compile(r'(\w+(?:[-:]\w+)*)\s*=\s*"([^"]*)"')

# Namespace, accessibility and slot markers on the root are dropped; the
# component sets what it needs itself.
EXCLUDED_ROOT_ATTRS = frozenset({"xmlns", "aria-hidden", "data-slot"})


def parse_svg_variant(svg_text: str) -> StructuredVariant:
    """Parse raw SVG text into a StructuredVariant.

    Raises UnparsableSvgError when no ``<svg>`` opening tag is found.
    """
    content = clean_svg(svg_text)

    svg_match = _SVG_TAG_RE.search(content)
    if not svg_match:
        raise UnparsableSvgError("No <svg> root element found")

    attributes = {
        k: v
        for k, v in _extract_attrs(svg_match.group(1) or "").items()
        if k not in EXCLUDED_ROOT_ATTRS and not k.startswith("xmlns:")
    }

    primitives: list[dict[str, str]] = []
    for match in _PATH_TAG_RE.finditer(content, svg_match.end()):
        attrs = _extract_attrs(match.group(1) or "")
        if attrs:
            primitives.append(attrs)

    logger.debug("Parsed SVG: %d root attributes, %d paths", len(attributes), len(primitives))
    return StructuredVariant(attributes=attributes, primitives=primitives)


def _extract_attrs(tag_body: str) -> dict[str, str]:
    """Collect ``name="value"`` pairs from the inside of a tag, in source order."""
    attrs: dict[str, str] = {}
    for m in _ATTR_RE.finditer(tag_body):
        attrs[m.group(1)] = m.group(2)
    return attrs
