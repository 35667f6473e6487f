"""
Shared test configuration.
It puts the repository root on `sys.path` and pins a neutral environment for every test.
These tests are executed by `pytest` locally and in CI and should remain deterministic.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

ISOLATED_ENV_VARS = (
    "NODE_ENV",
    "HOST",
    "PORT",
    "CORS_ORIGIN",
    "API_PREFIX",
    "PUBLIC_DIR",
    "RATE_LIMIT_MAX",
    "RATE_LIMIT_WINDOW_SECONDS",
    "CONTACT_RATE_LIMIT_MAX",
    "CONTACT_RATE_LIMIT_WINDOW_SECONDS",
)


@pytest.fixture(autouse=True)
def base_test_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test as `ENV=test` with no stray server overrides."""

    monkeypatch.setenv("ENV", "test")
    monkeypatch.setenv("LOG_LEVEL", "info")
    for key in ISOLATED_ENV_VARS:
        monkeypatch.delenv(key, raising=False)
