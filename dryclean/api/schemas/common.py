# This file defines shared schema pieces reused by multiple API endpoints.
# It exists so the success envelope and both error payloads stay consistent.
# These classes are also used by tests to validate response shape stability.

from __future__ import annotations

from pydantic import BaseModel


class SuccessEnvelope(BaseModel):
    success: bool = True


class LocalErrorResponse(BaseModel):
    success: bool = False
    error: str


class TerminalErrorDetail(BaseModel):
    message: str
    status: int
    stack: str | None = None


class TerminalErrorResponse(BaseModel):
    error: TerminalErrorDetail


class NotFoundResponse(BaseModel):
    error: str = "Not Found"
