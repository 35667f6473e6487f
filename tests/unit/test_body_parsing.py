"""
Unit tests for request body parsing.
It asserts expected behavior and guards against regressions in the corresponding component.
These tests are executed by `pytest` locally and in CI and should remain deterministic.
"""

import pytest

from dryclean.api.body_parsing import media_type, parse_body
from dryclean.api.error_handlers import BadRequestError


def test_media_type_strips_parameters() -> None:
    assert media_type("Application/JSON; charset=utf-8") == "application/json"
    assert media_type(None) == ""


def test_json_object_is_parsed() -> None:
    assert parse_body("application/json; charset=utf-8", b'{"name": "Jane", "age": 3}') == {
        "name": "Jane",
        "age": 3,
    }


def test_vendor_json_is_parsed() -> None:
    assert parse_body("application/vnd.api+json", b'{"a": 1}') == {"a": 1}


def test_form_body_is_parsed() -> None:
    parsed = parse_body("application/x-www-form-urlencoded", b"name=Jane+Doe&email=jane%40example.com&phone=")

    assert parsed == {"name": "Jane Doe", "email": "jane@example.com", "phone": ""}


@pytest.mark.parametrize(("content_type", "raw"), [("application/json", b""), ("text/plain", b"hello"), (None, b"{")])
def test_empty_or_unsupported_bodies_yield_empty_payload(content_type: str | None, raw: bytes) -> None:
    assert parse_body(content_type, raw) == {}


def test_malformed_json_raises_bad_request() -> None:
    with pytest.raises(BadRequestError, match="Malformed JSON body") as exc_info:
        parse_body("application/json", b'{"invalid json}')

    assert exc_info.value.status_code == 400


@pytest.mark.parametrize("raw", [b"[1, 2]", b'"text"', b"null"])
def test_non_object_json_raises_bad_request(raw: bytes) -> None:
    with pytest.raises(BadRequestError, match="must be a JSON object"):
        parse_body("application/json", raw)


def test_invalid_utf8_raises_bad_request() -> None:
    with pytest.raises(BadRequestError, match="UTF-8"):
        parse_body("application/json", b"\xff\xfe{")
