"""End-to-end generation tests."""

import logging
from pathlib import Path

import pytest

from tests.conftest import NOT_SVG, write_svg

from iconkit import main as main_module
from iconkit.config import Settings
from iconkit.main import generate


def _settings(svg_root: Path, out: Path, strategy: str = "structured") -> Settings:
    return Settings(iconkit_svg_root=svg_root, iconkit_output_dir=out, iconkit_strategy=strategy)


def test_generate_structured(svg_tree: Path, tmp_path: Path):
    out = tmp_path / "dist"
    result = generate(_settings(svg_tree, out))

    assert result.icons == ["AcademicCap", "ArrowDownCircle", "Plus"]
    assert result.skipped == []
    assert result.collisions == []
    barrel = (out / "index.js").read_text(encoding="utf-8").splitlines()
    assert barrel[1] == "export { AcademicCap } from './icons/AcademicCap.js';"


def test_generate_raw(svg_tree: Path, tmp_path: Path):
    out = tmp_path / "dist"
    generate(_settings(svg_tree, out, "raw"))
    plus = (out / "icons" / "Plus.js").read_text(encoding="utf-8")
    assert 'stroke=\\"currentColor\\"' in plus


def test_generate_without_mini_directory(tmp_path: Path):
    root = tmp_path / "heroicons"
    write_svg(root, "24", "outline", "plus.svg", '<svg viewBox="0 0 24 24"><path d="M1 1"/></svg>')
    write_svg(root, "16", "solid", "plus.svg", '<svg viewBox="0 0 16 16"><path d="M1 1"/></svg>')
    out = tmp_path / "dist"
    result = generate(_settings(root, out))

    assert result.icons == ["Plus"]
    assert '"mini"' not in (out / "icons" / "Plus.js").read_text(encoding="utf-8")


def test_generate_skips_unparsable(tmp_path: Path):
    root = tmp_path / "heroicons"
    broken = write_svg(root, "24", "outline", "broken.svg", NOT_SVG)
    result = generate(_settings(root, tmp_path / "dist"))
    assert result.icons == []
    assert result.skipped == [broken]
    assert (tmp_path / "dist" / "index.js").read_text(encoding="utf-8") == (
        "export { default as Icon } from './Icon.svelte';\n"
    )


def test_main_success(svg_tree: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(main_module, "settings", _settings(svg_tree, tmp_path / "dist"))
    assert main_module.main() == 0
    assert (tmp_path / "dist" / "Icon.svelte").exists()


def test_main_unknown_strategy_fails(svg_tree: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(main_module, "settings", _settings(svg_tree, tmp_path / "dist", "bitmap"))
    assert main_module.main() == 1


def test_main_write_failure_fails(svg_tree: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    blocker = tmp_path / "dist"
    blocker.write_text("not a directory")
    monkeypatch.setattr(main_module, "settings", _settings(svg_tree, blocker))
    assert main_module.main() == 1


def test_main_logging_follows_current_settings(svg_tree: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    cfg = _settings(svg_tree, tmp_path / "dist")
    cfg.iconkit_log_level = "debug"
    monkeypatch.setattr(main_module, "settings", cfg)
    calls = []
    monkeypatch.setattr(main_module.logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    assert main_module.main() == 0
    assert calls[0]["level"] == logging.DEBUG
