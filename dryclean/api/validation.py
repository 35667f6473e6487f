# This file holds the pure field checks used by request handlers.
# It exists so presence, blankness, and email shape rules are defined once and tested directly.
# The email pattern is deliberately loose: one `@`, a dotted domain, and no whitespace.

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from typing import Any

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
IDENTIFIER_PATTERN = re.compile(r"^[0-9]+$")


def is_blank(value: Any) -> bool:
    """True when the value is missing, not text, or only whitespace."""

    return not isinstance(value, str) or value.strip() == ""


def is_present(value: Any) -> bool:
    """True when the value is supplied and non-empty; whitespace counts as content."""

    if value is None or isinstance(value, bool):
        return value is True
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        return value != ""
    return True


def first_blank_field(payload: Mapping[str, Any], fields: Iterable[str]) -> str | None:
    for field in fields:
        if is_blank(payload.get(field)):
            return field
    return None


def missing_fields(payload: Mapping[str, Any], fields: Iterable[str]) -> list[str]:
    return [field for field in fields if not is_present(payload.get(field))]


def is_valid_email(value: Any) -> bool:
    if not is_present(value):
        return False
    return EMAIL_PATTERN.fullmatch(str(value)) is not None


def parse_identifier(raw: Any) -> int | None:
    """Parse a path identifier made only of decimal digits."""

    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str) and IDENTIFIER_PATTERN.fullmatch(raw):
        return int(raw)
    return None


def optional_text(value: Any) -> str | None:
    if value is None or value == "":
        return None
    return str(value)
