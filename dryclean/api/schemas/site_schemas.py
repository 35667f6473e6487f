# This file defines response schemas for the health, API info, and contact endpoints.
# It keeps operational and acknowledgement contracts explicit for the site's front-end scripts.

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

from dryclean.api.schemas.common import SuccessEnvelope


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    uptime: float


class ApiEndpoints(BaseModel):
    services: str
    contact: str
    customers: str
    health: str


class ApiInfoResponse(BaseModel):
    message: str
    version: str
    endpoints: ApiEndpoints


class ContactAcknowledgement(SuccessEnvelope):
    message: str
