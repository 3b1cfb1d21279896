# docquery/core/config.py
"""
Central configuration for the query template engine.

Environment variables (``DOCQUERY_`` prefix) override defaults.
"""
from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven settings with sensible defaults."""

    model_config = SettingsConfigDict(
        env_prefix="DOCQUERY_", env_file=".env", extra="ignore"
    )

    app_env: str = "dev"
    log_level: str = "INFO"

    missing_placeholder: Literal["raise", "skip"] = Field(
        default="raise",
        description="Behaviour when a binding has no placeholder left in its template",
    )
    query_log_max_length: int = Field(
        default=80,
        ge=0,
        description="Resolved queries longer than this are truncated in debug logs",
    )


settings = Settings()
