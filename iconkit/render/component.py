"""Reference implementation of the generated Icon component's behavior.

Mirrors the logic embedded in ``Icon.svelte`` (see ``iconkit.emit.templates``)
so selection and attribute merging can be exercised without a browser.
"""

from __future__ import annotations

import re
from typing import Any, Mapping

from iconkit.models.icon import StructuredVariant, VariantLabel

DEFAULT_SIZE = 24

_SVG_OPEN_RE = re.compile(r"<svg\b[^>]*>")


def select_variant(
    variant: str | None = None,
    *,
    micro: bool = False,
    mini: bool = False,
    solid: bool = False,
) -> str:
    """Explicit variant, then micro, mini, solid, else outline."""
    if variant:
        return variant
    if micro:
        return VariantLabel.MICRO.value
    if mini:
        return VariantLabel.MINI.value
    if solid:
        return VariantLabel.SOLID.value
    return VariantLabel.OUTLINE.value


def resolve_icon(src: Mapping[str, Any] | None, selected: str) -> Any | None:
    """Selected variant, falling back to outline; None when neither exists."""
    if not src:
        return None
    icon = src.get(selected)
    if icon is None:
        icon = src.get(VariantLabel.OUTLINE.value)
    return icon


def merge_root_attributes(
    root: Mapping[str, str] | None,
    size: int | str = DEFAULT_SIZE,
    rest: Mapping[str, Any] | None = None,
    class_name: str | None = None,
    style: str | None = None,
) -> dict[str, str]:
    """Build the root <svg> attributes. Later steps override earlier ones:

    1. stored root attributes
    2. width / height = size
    3. aria-hidden="true"
    4. passthrough attributes
    5. class / style, only when given
    """
    merged: dict[str, str] = dict(root or {})
    merged["width"] = str(size)
    merged["height"] = str(size)
    merged["aria-hidden"] = "true"
    for key, value in (rest or {}).items():
        merged[key] = str(value)
    if class_name:
        merged["class"] = class_name
    if style:
        merged["style"] = style
    return merged


def render_structured(
    src: Mapping[str, Any] | None,
    *,
    size: int | str = DEFAULT_SIZE,
    mini: bool = False,
    micro: bool = False,
    solid: bool = False,
    variant: str | None = None,
    class_name: str | None = None,
    style: str | None = None,
    **rest: Any,
) -> str:
    """Render structured variant data (``{"a": ..., "path": [...]}``) to markup."""
    icon = resolve_icon(src, select_variant(variant, micro=micro, mini=mini, solid=solid))
    if isinstance(icon, StructuredVariant):
        icon = icon.model_dump(by_alias=True)
    icon = icon or {}

    attrs = {"xmlns": "http://www.w3.org/2000/svg"}
    attrs.update(merge_root_attributes(icon.get("a"), size, rest, class_name, style))

    lines = [f"<svg {_attr_str(attrs)}>"]
    for path_attrs in icon.get("path", []):
        lines.append(f"  <path {_attr_str(path_attrs)} />")
    lines.append("</svg>")
    return "\n".join(lines)


def render_raw(
    src: Mapping[str, str] | None,
    *,
    size: int | str = DEFAULT_SIZE,
    mini: bool = False,
    micro: bool = False,
    solid: bool = False,
    variant: str | None = None,
    class_name: str | None = None,
    style: str | None = None,
) -> str:
    """Render raw variant markup: resize the root tag and merge class/style into it."""
    markup = resolve_icon(src, select_variant(variant, micro=micro, mini=mini, solid=solid))
    if not markup:
        return ""
    return prepare_raw_markup(markup, size, class_name, style)


def prepare_raw_markup(
    markup: str,
    size: int | str = DEFAULT_SIZE,
    class_name: str | None = None,
    style: str | None = None,
) -> str:
    """Rewrite only the root <svg> tag; the rest of the markup is untouched."""
    m = _SVG_OPEN_RE.search(markup)
    if not m:
        return markup

    tag = m.group(0)
    tag = _set_attr(tag, "width", str(size))
    tag = _set_attr(tag, "height", str(size))
    if class_name:
        tag = _append_attr(tag, "class", class_name, " ")
    if style:
        tag = _append_attr(tag, "style", style, ";")

    return markup[: m.start()] + tag + markup[m.end():]


def _attr_pattern(name: str) -> re.Pattern[str]:
    return re.compile(rf'\s{re.escape(name)}="([^"]*)"')


def _set_attr(tag: str, name: str, value: str) -> str:
    pattern = _attr_pattern(name)
    if pattern.search(tag):
        return pattern.sub(lambda _: f' {name}="{value}"', tag, count=1)
    return tag.replace("<svg", f'<svg {name}="{value}"', 1)


def _append_attr(tag: str, name: str, value: str, separator: str) -> str:
    pattern = _attr_pattern(name)
    if pattern.search(tag):
        return pattern.sub(lambda m: f' {name}="{m.group(1)}{separator}{value}"', tag, count=1)
    return tag.replace("<svg", f'<svg {name}="{value}"', 1)


def _attr_str(attrs: Mapping[str, str]) -> str:
    parts = []
    for k, v in attrs.items():
        safe_v = str(v).replace('"', "&quot;")
        parts.append(f'{k}="{safe_v}"')
    return " ".join(parts)
