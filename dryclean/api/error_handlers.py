# This file defines the error taxonomy and the exception handlers that render it.
# Handler-level errors (invalid input, unknown ids) keep the `{success: false, error}` shape clients already parse.
# Anything else reaching the app boundary gets the terminal `{error: {message, status}}` body.
# Stack traces are only included while running in development.

from __future__ import annotations

import logging
import traceback
from collections.abc import Mapping
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from dryclean.api.schemas.common import NotFoundResponse

LOGGER = logging.getLogger("api.errors")


class APIError(Exception):
    """Error produced and rendered by the owning handler."""

    status_code = 500

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)


class InvalidInputError(APIError):
    status_code = 400


class NotFoundError(APIError):
    status_code = 404


class InternalError(APIError):
    status_code = 500


class PipelineError(Exception):
    """Error that short-circuits the request pipeline to the terminal handler."""

    status_code = 500

    def __init__(self, message: str, *, headers: Mapping[str, str] | None = None) -> None:
        self.message = message
        self.headers = dict(headers or {})
        super().__init__(message)


class BadRequestError(PipelineError):
    status_code = 400


class RateLimitedError(PipelineError):
    status_code = 429


def local_error_body(message: str) -> dict[str, Any]:
    return {"success": False, "error": message}


def terminal_error_body(
    *,
    message: str,
    status_code: int,
    exc: BaseException | None = None,
    include_stack: bool = False,
) -> dict[str, Any]:
    error: dict[str, Any] = {"message": message, "status": status_code}
    if include_stack and exc is not None:
        error["stack"] = "".join(traceback.format_exception(exc))
    return {"error": error}


def _include_stack(request: Request) -> bool:
    config = getattr(request.app.state, "config", None)
    return bool(config is not None and config.is_development)


def terminal_error_response(
    request: Request,
    exc: BaseException,
    *,
    status_code: int,
    message: str,
    headers: Mapping[str, str] | None = None,
) -> JSONResponse:
    """Log an error and render it in the terminal error format."""

    LOGGER.error(
        "Error occurred: %s %s -> %s %s",
        request.method,
        request.url.path,
        status_code,
        message,
        exc_info=(type(exc), exc, exc.__traceback__),
    )
    return JSONResponse(
        status_code=status_code,
        content=terminal_error_body(
            message=message,
            status_code=status_code,
            exc=exc,
            include_stack=_include_stack(request),
        ),
        headers=dict(headers or {}),
    )


def unhandled_error_response(request: Request, exc: Exception) -> JSONResponse:
    """Render an exception no handler claimed as a terminal 500."""

    return terminal_error_response(
        request,
        exc,
        status_code=getattr(exc, "status_code", 500),
        message=str(exc) or "Internal Server Error",
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register global exception handlers."""

    @app.exception_handler(APIError)
    async def api_error_handler(_: Request, exc: APIError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content=local_error_body(exc.message))

    @app.exception_handler(PipelineError)
    async def pipeline_error_handler(request: Request, exc: PipelineError) -> JSONResponse:
        return terminal_error_response(
            request,
            exc,
            status_code=exc.status_code,
            message=exc.message,
            headers=exc.headers,
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return terminal_error_response(
            request,
            exc,
            status_code=400,
            message="Invalid request parameters.",
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        if exc.status_code in (404, 405):
            return JSONResponse(status_code=404, content=NotFoundResponse().model_dump())
        return terminal_error_response(
            request,
            exc,
            status_code=exc.status_code,
            message=str(exc.detail),
            headers=exc.headers,
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        return unhandled_error_response(request, exc)
