# This file implements the body-parsing stage of the request pipeline.
# JSON and URL-encoded form bodies are decoded once and stored on `request.state.payload`.
# A malformed body short-circuits with a 400 in the terminal error format before any route runs.

from __future__ import annotations

import json
from typing import Any
from urllib.parse import parse_qsl

from fastapi import Request, Response
from starlette.middleware.base import RequestResponseEndpoint

from dryclean.api.error_handlers import BadRequestError, terminal_error_response

BODY_METHODS = frozenset({"POST", "PUT", "PATCH", "DELETE"})
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def media_type(content_type: str | None) -> str:
    return (content_type or "").split(";", 1)[0].strip().lower()


def is_json_media_type(value: str) -> bool:
    return value == "application/json" or value.endswith("+json")


def parse_body(content_type: str | None, raw: bytes) -> dict[str, Any]:
    """Decode a request body into a field mapping, or raise `BadRequestError`."""

    kind = media_type(content_type)
    if not raw or not (is_json_media_type(kind) or kind == FORM_CONTENT_TYPE):
        return {}

    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise BadRequestError("Request body is not valid UTF-8") from exc

    if kind == FORM_CONTENT_TYPE:
        return dict(parse_qsl(text, keep_blank_values=True))

    try:
        parsed = json.loads(text)
    except json.JSONDecodeError as exc:
        raise BadRequestError(f"Malformed JSON body: {exc.msg}") from exc
    if not isinstance(parsed, dict):
        raise BadRequestError("Request body must be a JSON object")
    return parsed


async def body_parsing_middleware(request: Request, call_next: RequestResponseEndpoint) -> Response:
    request.state.payload = {}
    if request.method in BODY_METHODS:
        raw = await request.body()
        try:
            request.state.payload = parse_body(request.headers.get("content-type"), raw)
        except BadRequestError as exc:
            return terminal_error_response(
                request,
                exc,
                status_code=exc.status_code,
                message=exc.message,
            )
    return await call_next(request)
