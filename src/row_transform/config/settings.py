"""
Configuration management for row-transform.

Environment-based configuration using Pydantic BaseSettings. Values are read
from the process environment and an optional ``.env`` file at the project
root (override with ``RT_ENV_FILE``).
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
ENV_FILE_OVERRIDE = os.getenv("RT_ENV_FILE")
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

    Environment variables are loaded with the RT_ prefix, e.g.
    RT_DEFAULT_TIMEZONE overrides ``default_timezone``.

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

    default_timezone: str = Field(
        default="UTC",
        description="Zone used by date transformations without zone/timezone",
    )
    templates_dir: str = Field(
        default="./config/templates",
        description="Directory holding named export templates (<name>.yml)",
    )

    @field_validator("default_timezone")
    @classmethod
    def _non_empty_zone(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("default_timezone cannot be empty")
        return value.strip()

    model_config = SettingsConfigDict(
        env_prefix="RT_",
        env_file=str(SETTINGS_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings instance with loaded configuration
    """
    return Settings()
