"""Configuration loading from the environment."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_prefix": "LOGGING_UTILITY_"}

    log_path: Path = Field(
        default=Path("logs/application.log"),
        description="Path to the append-only log file.",
    )
    indent: int | None = Field(
        default=2,
        description="JSON indentation per record; None writes one line per record.",
    )


def get_settings() -> Settings:
    """Create and validate settings. Fails fast on invalid state."""
    return Settings()
