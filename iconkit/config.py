"""Generator configuration from environment variables."""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    iconkit_svg_root: Path = Path("./node_modules/heroicons")
    iconkit_output_dir: Path = Path("./dist")
    iconkit_log_level: str = "info"

    # Extraction strategy: "structured" or "raw"
    iconkit_strategy: str = "structured"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @property
    def icons_dir(self) -> Path:
        return self.iconkit_output_dir / "icons"


settings = Settings()
