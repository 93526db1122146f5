"""Application configuration loaded via Pydantic settings."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SKILL_APPLICATION_ID = "amzn1.ask.skill.b5d35f54-1ef3-4d0a-8f2a-63c21ac5d7a2"


class Settings(BaseSettings):
    """Typed configuration sourced from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Application ids accepted by the skill endpoint. Empty disables the check.
    SKILL_APPLICATION_IDS: list[str] = Field(
        default_factory=lambda: [DEFAULT_SKILL_APPLICATION_ID]
    )
    WALL_LOG_LEVEL: str = Field(default="info")
    WALL_LOG_DIR: Optional[Path] = Field(default=None)
    QUOTE_RANDOM_SEED: Optional[int] = Field(default=None)
    HEALTHCHECK_API_TOKEN: Optional[str] = Field(default=None)
    ENABLE_ADMIN_AUTH: bool = Field(default=True)


settings = Settings()
config = settings  # Alias used by route modules


__all__ = ["DEFAULT_SKILL_APPLICATION_ID", "Settings", "settings", "config"]
