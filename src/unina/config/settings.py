"""
Configuration management for unina.

This module provides environment-based configuration using Pydantic BaseSettings.
Every field can be overridden with an ``UNINA_``-prefixed environment variable or
an entry in the ``.env`` file at the project root (``UNINA_ENV_FILE`` points
elsewhere).
"""

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Literal

import structlog
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = structlog.get_logger(__name__)

# Determine project root for resolving .env by default
PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_ENV_FILE = PROJECT_ROOT / ".env"
ENV_FILE_OVERRIDE = os.getenv("UNINA_ENV_FILE")
if ENV_FILE_OVERRIDE:
    env_file_candidate = Path(ENV_FILE_OVERRIDE).expanduser()
    if not env_file_candidate.is_absolute():
        env_file_candidate = PROJECT_ROOT / env_file_candidate
    SETTINGS_ENV_FILE = env_file_candidate
else:
    SETTINGS_ENV_FILE = DEFAULT_ENV_FILE

# Database compiled by ``python -m unina.cli build`` when no path is configured
DEFAULT_DATABASE_PATH = Path(__file__).resolve().parents[1] / "data" / "database.json"


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Environment variables are loaded with the UNINA_ prefix. For example,
    UNINA_DATABASE_PATH overrides ``database_path`` and UNINA_LOG_LEVEL
    overrides ``log_level``.
    """

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: Literal["json", "console"] = Field(
        default="json", description="Renderer used for structured log lines"
    )
    log_to_file: bool = Field(
        default=False, description="Also write logs to a daily rotating file"
    )
    log_file_dir: str = Field(
        default="logs", description="Directory for rotating log files"
    )

    # Name database
    database_path: str = Field(
        default=str(DEFAULT_DATABASE_PATH),
        description="Path to the compiled name-range database (.json, .yml or .yaml)",
    )
    ucd_dir: str = Field(
        default="ucd",
        description=(
            "Directory holding UnicodeData.txt, NameAliases.txt and "
            "NamedSequences.txt for the build command"
        ),
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level_name = v.strip().upper()
        if not isinstance(logging.getLevelName(level_name), int):
            raise ValueError(f"Unknown log level: {v}")
        return level_name

    model_config = SettingsConfigDict(
        env_prefix="UNINA_",
        env_file=str(SETTINGS_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Settings are loaded once and reused for the lifetime of the process. Tests
    that patch the environment should call ``get_settings.cache_clear()``.

    Returns:
        Settings instance with loaded configuration
    """
    settings = Settings()
    logger.debug(
        "configuration.loaded",
        database_path=settings.database_path,
        log_level=settings.log_level,
    )
    return settings
