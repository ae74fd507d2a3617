"""Environment-based settings configuration.

This module handles only simple environment variables (strings, paths).
Structured application configuration lives in config.yaml, see
``runtime.config``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class EnvironmentSettings(BaseSettings):
    """Settings that come from environment variables."""

    environment: Literal["development", "production", "test"] = Field(
        default="development", validation_alias="APP_ENVIRONMENT"
    )
    log_level: str | None = Field(default=None, validation_alias="LOG_LEVEL")
    config_file: Path = Field(
        default=Path("config.yaml"), validation_alias="ADDRESSBOOK_CONFIG_FILE"
    )
    data_file: Path | None = Field(default=None, validation_alias="ADDRESSBOOK_DATA_FILE")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )
