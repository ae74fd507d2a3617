"""Pydantic models for parsing the config.yaml configuration file.

This module contains Pydantic models that correspond to the structure of config.yaml.
These models handle validation and type conversion of the YAML configuration data.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field


class LoggingConfig(BaseModel):
    """Logging configuration model."""

    level: str = Field(default="INFO", description="Logging level")
    format: Literal["json", "plain"] = Field(default="plain", description="Log file format")
    file: str | None = Field(
        default="logs/addressbook.log",
        description="Log file path; no file is written when empty",
    )
    max_size_mb: int = Field(default=10, description="Maximum log file size in MB")
    backup_count: int = Field(
        default=5, description="Number of backup log files to keep"
    )


class StorageConfig(BaseModel):
    """Data file configuration model."""

    address_book_file_path: Path = Field(
        default=Path("data/addressbook.json"),
        description="Location of the address book JSON file",
    )


class AppConfig(BaseModel):
    """Application configuration model."""

    environment: Literal["development", "production", "test"] = Field(
        default="development", description="Application environment"
    )
    name: str = Field(default="Address Book", description="Application name")


class ConfigData(BaseModel):
    """Root configuration model, the ``config`` section of config.yaml."""

    app: AppConfig = Field(default_factory=AppConfig, description="Application settings")
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )
    storage: StorageConfig = Field(
        default_factory=StorageConfig, description="Storage configuration"
    )
