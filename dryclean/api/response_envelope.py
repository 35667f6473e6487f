# This file builds the success envelope shared by the catalog, customer, and contact endpoints.
# The helpers return plain dictionaries that the Pydantic response models validate at runtime.

from __future__ import annotations

from typing import Any


def build_data_envelope(data: Any, *, message: str | None = None) -> dict[str, Any]:
    """Build a `{success, data}` envelope, with an optional message."""

    payload: dict[str, Any] = {"success": True}
    if message is not None:
        payload["message"] = message
    payload["data"] = data
    return payload


def build_message_envelope(message: str) -> dict[str, Any]:
    """Build a `{success, message}` envelope for acknowledgements."""

    return {"success": True, "message": message}
