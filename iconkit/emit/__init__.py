"""Output artifact generation."""

from iconkit.emit.emitter import emit_artifacts

__all__ = ["emit_artifacts"]
