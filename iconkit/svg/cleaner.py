"""Strip XML declarations and comments before extraction."""

from __future__ import annotations

import re

_XML_DECL_RE = re.compile(r"<\?xml[^>]*\?>")
_COMMENT_RE = re.compile(r"<!--.*?-->", re.DOTALL)


def clean_svg(svg_text: str) -> str:
    """Remove every ``<?xml ...?>`` declaration and ``<!-- -->`` comment, then trim."""
    svg_text = _XML_DECL_RE.sub("", svg_text)
    svg_text = _COMMENT_RE.sub("", svg_text)
    return svg_text.strip()
