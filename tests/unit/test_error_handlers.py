"""
Unit tests for the error taxonomy and error bodies.
It asserts expected behavior and guards against regressions in the corresponding component.
These tests are executed by `pytest` locally and in CI and should remain deterministic.
"""

from dryclean.api.error_handlers import (
    APIError,
    BadRequestError,
    InvalidInputError,
    NotFoundError,
    RateLimitedError,
    local_error_body,
    terminal_error_body,
)


def test_status_codes_per_error_kind() -> None:
    assert InvalidInputError("x").status_code == 400
    assert NotFoundError("x").status_code == 404
    assert APIError("x").status_code == 500
    assert APIError("x", status_code=418).status_code == 418
    assert BadRequestError("x").status_code == 400
    assert RateLimitedError("x", headers={"Retry-After": "5"}).headers == {"Retry-After": "5"}


def test_local_error_body() -> None:
    assert local_error_body("Service not found") == {"success": False, "error": "Service not found"}


def test_terminal_error_body_without_stack() -> None:
    body = terminal_error_body(message="boom", status_code=500, exc=RuntimeError("boom"))

    assert body == {"error": {"message": "boom", "status": 500}}


def test_terminal_error_body_with_stack() -> None:
    try:
        raise RuntimeError("boom")
    except RuntimeError as exc:
        body = terminal_error_body(message="boom", status_code=500, exc=exc, include_stack=True)

    assert body["error"]["status"] == 500
    assert "Traceback" in body["error"]["stack"]
    assert "RuntimeError: boom" in body["error"]["stack"]
