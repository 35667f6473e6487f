# This file defines the liveness endpoint used by load balancers and uptime checks.
# Uptime is measured from app construction, not from process start.

from __future__ import annotations

import time
from datetime import UTC, datetime

from fastapi import APIRouter, Request

from dryclean.api.schemas.site_schemas import HealthResponse

router = APIRouter(tags=["health"])


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@router.get("/health", response_model=HealthResponse)
def health(request: Request) -> dict[str, object]:
    started = getattr(request.app.state, "started_monotonic", time.monotonic())
    return {
        "status": "healthy",
        "timestamp": _utc_now(),
        "uptime": max(0.0, time.monotonic() - started),
    }
