"""Generator entry point."""

from __future__ import annotations

import logging
import sys
import time

from dotenv import load_dotenv

from iconkit.config import Settings, settings
from iconkit.emit import emit_artifacts
from iconkit.engine import discover_icons, get_registry
from iconkit.models.icon import GenerationResult

load_dotenv()

logger = logging.getLogger(__name__)


def configure_logging(cfg: Settings | None = None) -> None:
    cfg = cfg or settings
    logging.basicConfig(
        level=getattr(logging, cfg.iconkit_log_level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def generate(cfg: Settings | None = None) -> GenerationResult:
    """Run one full generation pass with the given settings."""
    cfg = cfg or settings
    start = time.perf_counter()
    spec = get_registry().get(cfg.iconkit_strategy)

    result = GenerationResult()
    icons = discover_icons(cfg.iconkit_svg_root, spec.fn, result)
    result.icons = sorted(icons)
    result.written = emit_artifacts(icons, cfg.iconkit_output_dir, spec.name)

    elapsed = (time.perf_counter() - start) * 1000
    logger.info(
        "Generated %d icons (%s strategy, %d skipped, %d collisions) in %.0fms",
        len(result.icons),
        spec.name,
        len(result.skipped),
        len(result.collisions),
        elapsed,
    )
    return result


def generate_icons() -> None:
    """Generate every artifact from the configured input tree."""
    generate(settings)


def main() -> int:
    configure_logging()
    try:
        generate_icons()
    except Exception:
        logger.exception("Icon generation failed")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
