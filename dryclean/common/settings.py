"""
Application settings loaded from environment variables.
It centralizes process-wide concerns like the runtime environment and logging destinations.
Every value has a fixed default so the site starts with an empty environment.
"""

from __future__ import annotations

import os
from functools import lru_cache
from typing import Final

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

DEFAULT_ENV: Final[str] = "development"


class Settings(BaseModel):
    """Typed runtime configuration."""

    model_config = ConfigDict(extra="ignore")

    PROJECT_NAME: str = "touch-of-elegance"
    ENV: str = DEFAULT_ENV
    LOG_LEVEL: str = "info"
    LOG_DIR: str = "logs"

    @field_validator("ENV", "LOG_LEVEL")
    @classmethod
    def normalize_lower(cls, value: str) -> str:
        return value.strip().lower()

    @property
    def is_development(self) -> bool:
        return self.ENV == "development"

    @property
    def is_production(self) -> bool:
        return self.ENV == "production"


def resolve_environment() -> str:
    """Return the runtime environment name, accepting `NODE_ENV` as a fallback."""

    return os.getenv("ENV") or os.getenv("NODE_ENV") or DEFAULT_ENV


def load_settings(*, load_env: bool = True) -> Settings:
    """Load and validate settings from `.env` and process environment."""

    if load_env:
        load_dotenv()

    values: dict[str, object] = {"ENV": resolve_environment()}
    for key in ("PROJECT_NAME", "LOG_LEVEL", "LOG_DIR"):
        raw = os.getenv(key)
        if raw is not None and raw.strip():
            values[key] = raw.strip()

    try:
        return Settings.model_validate(values)
    except ValidationError as exc:
        raise RuntimeError(f"Invalid environment configuration: {exc}") from exc


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached accessor for application settings."""

    return load_settings()
