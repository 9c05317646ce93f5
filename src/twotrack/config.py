"""
Configuration — typed, validated settings for the logging hooks.

Uses pydantic-settings to:
  - Load from environment variables (TWOTRACK_LOG_LEVEL, TWOTRACK_RENDERER, ...)
  - Fall back to a .env file in the working directory
  - Validate values when the settings object is built

The result algebra itself needs no configuration. These settings only
drive configure_logging() in twotrack.log.
"""

from __future__ import annotations

import logging
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """
    Logging settings for structlog.

    Load order (highest priority first):
      1. Explicit keyword arguments
      2. Environment variables prefixed with TWOTRACK_
      3. .env file
      4. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="TWOTRACK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="INFO", description="Minimum stdlib level name to emit")
    renderer: Literal["console", "json"] = Field(
        default="console",
        description="console for humans, json for log shippers",
    )
    timestamps: bool = Field(default=True, description="Add an ISO timestamp to every event")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Accept any stdlib level name, case-insensitively."""
        level = value.strip().upper()
        if not isinstance(logging.getLevelNamesMapping().get(level), int):
            raise ValueError(f"Unknown log level: {value!r}")
        return level

    def level_number(self) -> int:
        """The stdlib numeric level for log_level."""
        return logging.getLevelNamesMapping()[self.log_level]
