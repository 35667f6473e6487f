# This file provides shared helpers for API endpoint tests.
# Each client wraps a freshly built app, so stores and rate-limit counters never leak between tests.

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from fastapi.testclient import TestClient

from dryclean.api.api_config import ApiConfig
from dryclean.api.app import create_app

VALID_CONTACT: dict[str, str] = {
    "name": "John Doe",
    "email": "john@example.com",
    "phone": "555-1234",
    "message": "I need information about dry cleaning services",
}


def build_test_config(**overrides: Any) -> ApiConfig:
    """Create deterministic API config for tests."""

    values: dict[str, Any] = {
        "api_name": "Touch of Elegance API",
        "app_version": "1.0.0",
        "api_prefix": "/api",
        "host": "127.0.0.1",
        "port": 3000,
        "environment": "test",
        "cors_origins": ["*"],
    }
    values.update(overrides)
    return ApiConfig(**values)


@contextmanager
def api_test_client(
    *,
    config: ApiConfig | None = None,
    raise_server_exceptions: bool = True,
) -> Iterator[TestClient]:
    """Yield a TestClient over a new app instance."""

    app = create_app(config or build_test_config())
    with TestClient(app, raise_server_exceptions=raise_server_exceptions) as client:
        yield client
