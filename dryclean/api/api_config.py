# This file defines runtime settings for the HTTP layer in one place.
# It exists so binding, CORS, static assets, and rate limits can be configured without code edits.
# The config loader reads environment variables and applies fixed defaults for local development.
# A non-numeric PORT falls back to the default instead of failing startup.

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

from dryclean.common.settings import resolve_environment

DEFAULT_PORT = 3000
DEFAULT_PUBLIC_DIR = Path(__file__).resolve().parent.parent / "public"


class ApiConfig(BaseModel):
    """Typed API runtime configuration."""

    model_config = ConfigDict(extra="ignore")

    api_name: str = "Touch of Elegance API"
    app_version: str = "1.0.0"
    api_prefix: str = "/api"
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    environment: str = "development"
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])
    public_dir: Path = DEFAULT_PUBLIC_DIR
    rate_limit_window_seconds: int = 15 * 60
    rate_limit_max_requests: int = 100
    contact_rate_limit_window_seconds: int = 60 * 60
    contact_rate_limit_max_requests: int = 5
    gzip_minimum_size: int = 1000
    shutdown_grace_seconds: int = 10

    @field_validator("api_prefix")
    @classmethod
    def validate_api_prefix(cls, value: str) -> str:
        cleaned = value.rstrip("/")
        if not cleaned.startswith("/"):
            raise ValueError("api_prefix must look like '/api'.")
        return cleaned

    @field_validator("environment")
    @classmethod
    def normalize_environment(cls, value: str) -> str:
        return value.strip().lower()

    @field_validator(
        "rate_limit_window_seconds",
        "rate_limit_max_requests",
        "contact_rate_limit_window_seconds",
        "contact_rate_limit_max_requests",
        "shutdown_grace_seconds",
    )
    @classmethod
    def validate_positive_ints(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("Value must be greater than 0.")
        return value

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    def api_path(self, suffix: str = "") -> str:
        return f"{self.api_prefix}{suffix}"


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return int(raw)


def _env_port(name: str, default: int) -> int:
    raw = (os.getenv(name) or "").strip()
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def _env_list(name: str, default: list[str] | None = None) -> list[str]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return list(default or [])
    return [item.strip() for item in raw.split(",") if item.strip()]


def load_api_config(*, load_env: bool = True) -> ApiConfig:
    """Load API configuration from `.env` and process environment."""

    if load_env:
        load_dotenv()

    config_values: dict[str, object] = {
        "api_name": os.getenv("API_NAME", "Touch of Elegance API"),
        "app_version": os.getenv("APP_VERSION", "1.0.0"),
        "api_prefix": os.getenv("API_PREFIX", "/api"),
        "host": os.getenv("HOST") or "0.0.0.0",
        "port": _env_port("PORT", DEFAULT_PORT),
        "environment": resolve_environment(),
        "cors_origins": _env_list("CORS_ORIGIN", ["*"]),
        "public_dir": os.getenv("PUBLIC_DIR") or DEFAULT_PUBLIC_DIR,
        "rate_limit_window_seconds": _env_int("RATE_LIMIT_WINDOW_SECONDS", 15 * 60),
        "rate_limit_max_requests": _env_int("RATE_LIMIT_MAX", 100),
        "contact_rate_limit_window_seconds": _env_int("CONTACT_RATE_LIMIT_WINDOW_SECONDS", 60 * 60),
        "contact_rate_limit_max_requests": _env_int("CONTACT_RATE_LIMIT_MAX", 5),
        "gzip_minimum_size": _env_int("GZIP_MINIMUM_SIZE", 1000),
        "shutdown_grace_seconds": _env_int("SHUTDOWN_GRACE_SECONDS", 10),
    }

    return ApiConfig.model_validate(config_values)


@lru_cache(maxsize=1)
def get_api_config() -> ApiConfig:
    """Cached accessor for API config."""

    return load_api_config()
