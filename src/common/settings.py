"""
Application settings loaded from environment variables.
It centralizes the process-wide identity and log level shared by the dashboard and the list-view engine.
Screen-level tuning such as page sizes lives in the dashboard config instead.
"""

from __future__ import annotations

import os
from functools import lru_cache
from typing import Final

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

REQUIRED_ENV_VARS: Final[tuple[str, ...]] = (
    "PROJECT_NAME",
    "ENV",
    "LOG_LEVEL",
)

_LOG_LEVELS: Final[frozenset[str]] = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class Settings(BaseModel):
    """Typed runtime configuration."""

    model_config = ConfigDict(extra="ignore")

    PROJECT_NAME: str
    ENV: str
    LOG_LEVEL: str

    @field_validator("LOG_LEVEL")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}")
        return level


def load_settings(*, load_env: bool = True) -> Settings:
    """Load and validate environment settings from `.env` and process environment."""

    if load_env:
        load_dotenv()

    missing = [key for key in REQUIRED_ENV_VARS if not os.getenv(key)]
    if missing:
        missing_values = ", ".join(sorted(missing))
        raise RuntimeError(
            f"Missing required environment variables: {missing_values}. "
            "Populate these values in `.env` before starting the dashboard."
        )

    try:
        return Settings.model_validate(dict(os.environ))
    except ValidationError as exc:
        raise RuntimeError(f"Invalid environment configuration: {exc}") from exc


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached accessor for application settings."""

    return load_settings()
