"""
Configuration management for ShiftHub.

This module provides environment-based configuration using Pydantic BaseSettings,
so the shifts API location, transport limits and leaderboard size can be changed
per deployment without touching the aggregation code.
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine project root for resolving .env by default
PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_ENV_FILE = PROJECT_ROOT / ".env"
ENV_FILE_OVERRIDE = os.getenv("SHIFT_HUB_ENV_FILE")
if ENV_FILE_OVERRIDE:
    env_file_candidate = Path(ENV_FILE_OVERRIDE).expanduser()
    if not env_file_candidate.is_absolute():
        env_file_candidate = PROJECT_ROOT / env_file_candidate
    SETTINGS_ENV_FILE = env_file_candidate
else:
    SETTINGS_ENV_FILE = DEFAULT_ENV_FILE


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Environment variables are automatically loaded with the SHIFT_HUB_ prefix.
    For example, SHIFT_HUB_API_BASE_URL will override the api_base_url setting.

    Unprefixed fields:
    - ENVIRONMENT: Deployment environment (dev, staging, prod)
    - LOG_LEVEL: Logging level (uppercase)
    """

    ENVIRONMENT: Literal["dev", "staging", "prod"] = Field(
        default="dev",
        validation_alias="ENVIRONMENT",
        description="Deployment environment",
    )
    LOG_LEVEL: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Logging level (uppercase)",
    )

    app_name: str = Field(default="ShiftHub", description="Application name")

    # Shifts API - the remote source of workplace and shift collections
    api_base_url: str = Field(
        default="http://localhost:3000",
        description="Base URL of the API serving workplaces and shifts",
    )
    workplaces_endpoint: str = Field(
        default="/workplaces", description="Path of the workplaces collection"
    )
    shifts_endpoint: str = Field(
        default="/shifts", description="Path of the shifts collection"
    )
    api_timeout: float = Field(
        default=30, gt=0, description="Per-request timeout in seconds"
    )
    api_retry_max: int = Field(
        default=0,
        ge=0,
        description="Retry attempts for server errors and connection failures",
    )

    # Leaderboard
    top_workplaces_limit: int = Field(
        default=3, ge=1, description="Number of workplaces in the leaderboard"
    )

    @field_validator("api_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Drop trailing slashes so endpoint paths can be appended directly."""
        cleaned = v.strip().rstrip("/")
        if not cleaned:
            raise ValueError("api_base_url cannot be empty")
        return cleaned

    @field_validator("workplaces_endpoint", "shifts_endpoint")
    @classmethod
    def ensure_leading_slash(cls, v: str) -> str:
        cleaned = v.strip()
        if not cleaned:
            raise ValueError("endpoint path cannot be empty")
        return cleaned if cleaned.startswith("/") else f"/{cleaned}"

    model_config = SettingsConfigDict(
        env_prefix="SHIFT_HUB_",
        env_file=str(SETTINGS_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses LRU cache to ensure settings are loaded once and reused across
    the application lifecycle.

    Returns:
        Settings instance with loaded configuration
    """
    return Settings()
