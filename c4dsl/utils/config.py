"""Application configuration."""
from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings loaded from .env and C4DSL_* environment variables."""

    model_config = SettingsConfigDict(env_prefix="C4DSL_", env_file=".env", env_file_encoding="utf-8", extra="ignore")

    indent_width: int = Field(default=4, ge=1)
    default_workspace_name: str = "Name"
    default_workspace_description: str = "Description"
    max_identifier_suffix: int = Field(default=100_000, ge=1)
    log_level: str = "WARNING"


settings = Settings()
