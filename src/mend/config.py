"""Configuration management for mend."""

from __future__ import annotations

from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from mend.vocabulary import DEFAULT_HELP_TIMEOUT_SECONDS


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="MEND_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Rule selection
    rules: list[str] = Field(default_factory=list, description="Rules to use; empty means every enabled rule")
    exclude_rules: list[str] = Field(default_factory=list, description="Rules to leave out")
    priority: dict[str, int] = Field(default_factory=dict, description="Per-rule priority overrides")

    # Pipeline
    shell: str | None = Field(default=None, description="Shell name; detected from $SHELL when unset")
    max_workers: int = Field(default=1, ge=1, description="Threads used to evaluate rules")

    # Help output lookups
    help_timeout_seconds: float = Field(default=DEFAULT_HELP_TIMEOUT_SECONDS, gt=0)
    cache_help_output: bool = Field(default=False, description="Reuse help output within one process")

    # Logging
    log_level: str = Field(default="WARNING", description="Log level")


def load_settings(**overrides: Any) -> Settings:
    """Load settings from env/.env, with explicit keyword overrides on top."""

    settings = Settings()
    updates = {key: value for key, value in overrides.items() if value is not None}
    if updates:
        settings = Settings(**{**settings.model_dump(), **updates})
    return settings
