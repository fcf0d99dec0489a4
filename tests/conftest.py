"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest


# Heroicons-shaped sources, one per size/variant

OUTLINE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" fill="none" viewBox="0 0 24 24" stroke-width="1.5" stroke="currentColor" aria-hidden="true" data-slot="icon">
  <path stroke-linecap="round" stroke-linejoin="round" d="M4.26 10.147a60.438 60.438 0 0 0-.491 6.347A48.62 48.62 0 0 1 12 20.904"/>
</svg>'''

SOLID_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24" fill="currentColor" aria-hidden="true" data-slot="icon">
  <path d="M11.7 2.805a.75.75 0 0 1 .6 0A60.65 60.65 0 0 1 22.83 8.72"/>
  <path d="M13.06 15.473a48.45 48.45 0 0 1 7.666-3.282"/>
</svg>'''

MINI_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 20 20" fill="currentColor" aria-hidden="true" data-slot="icon">
  <path fill-rule="evenodd" d="M9.664 1.319a.75.75 0 0 1 .672 0" clip-rule="evenodd"/>
</svg>'''

MICRO_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 16 16" fill="currentColor" aria-hidden="true" data-slot="icon">
  <path d="M7.702 1.368a.75.75 0 0 1 .597 0"/>
</svg>'''

# Declaration + comment, no currentColor anywhere
DECORATED_SVG = '''<?xml version="1.0" encoding="UTF-8"?>
<!-- exported from a design tool -->
<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <!-- body -->
  <path d="M0 0h24v24H0z"/>
</svg>'''

# Outline shape with no paint reference
OUTLINE_NO_PAINT_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" fill="none" viewBox="0 0 24 24" stroke-width="1.5">
  <path d="M12 4.5v15m7.5-7.5h-15"/>
</svg>'''

NOT_SVG = "<html><body>not an icon</body></html>"


def write_svg(root: Path, size: str, variant: str, filename: str, content: str) -> Path:
    path = root / size / variant / filename
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def outline_svg() -> str:
    return OUTLINE_SVG


@pytest.fixture
def solid_svg() -> str:
    return SOLID_SVG


@pytest.fixture
def svg_tree(tmp_path: Path) -> Path:
    """A small input tree covering every size directory."""
    root = tmp_path / "heroicons"
    write_svg(root, "24", "outline", "academic-cap.svg", OUTLINE_SVG)
    write_svg(root, "24", "solid", "academic-cap.svg", SOLID_SVG)
    write_svg(root, "20", "solid", "academic-cap.svg", MINI_SVG)
    write_svg(root, "16", "solid", "academic-cap.svg", MICRO_SVG)
    write_svg(root, "24", "outline", "plus.svg", OUTLINE_NO_PAINT_SVG)
    write_svg(root, "24", "solid", "arrow-down-circle.svg", SOLID_SVG)
    return root
