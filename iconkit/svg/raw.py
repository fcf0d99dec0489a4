"""Raw extraction: cleaned markup with a currentColor paint attribute."""

from __future__ import annotations

from iconkit.svg.cleaner import clean_svg

_FILL_CURRENT = 'fill="currentColor"'
_STROKE_CURRENT = 'stroke="currentColor"'
_FILL_NONE = 'fill="none"'


def read_raw_variant(svg_text: str) -> str:
    """Return cleaned markup that inherits its color from the surrounding text.

    Outline icons (``fill="none"``) get ``stroke="currentColor"``, everything
    else gets ``fill="currentColor"``. Sources that already reference
    currentColor are left alone. Malformed markup passes through.
    """
    content = clean_svg(svg_text)
    if _FILL_CURRENT in content or _STROKE_CURRENT in content:
        return content

    paint = _STROKE_CURRENT if _FILL_NONE in content else _FILL_CURRENT
    return content.replace("<svg", f"<svg {paint}", 1)
