# This file implements contact-form handling for the site.
# Submissions are validated and written to the log; nothing is stored and no email is sent.
# Unexpected failures are converted to a handler-level 500 instead of reaching the terminal handler.

from __future__ import annotations

import logging
from typing import Any

from dryclean.api.error_handlers import APIError, InternalError, InvalidInputError
from dryclean.api.validation import is_valid_email, missing_fields, optional_text

LOGGER = logging.getLogger("api.contact")

REQUIRED_CONTACT_FIELDS: tuple[str, ...] = ("name", "email", "message")
ACKNOWLEDGEMENT = "Your message has been received. We will contact you soon!"


class ContactService:
    """Validate and acknowledge contact-form submissions."""

    def __init__(self, *, logger: logging.Logger | None = None) -> None:
        self.logger = logger or LOGGER

    def submit(self, *, name: Any, email: Any, message: Any, phone: Any = None) -> str:
        try:
            missing = missing_fields(
                {"name": name, "email": email, "message": message},
                REQUIRED_CONTACT_FIELDS,
            )
            if missing:
                raise InvalidInputError("Name, email, and message are required")
            if not is_valid_email(email):
                raise InvalidInputError("Invalid email address")

            self.logger.info(
                "Contact form submission: %s",
                {"name": name, "email": email, "phone": optional_text(phone)},
            )
            return ACKNOWLEDGEMENT
        except APIError:
            raise
        except Exception as exc:
            LOGGER.exception("Error processing contact form")
            raise InternalError("Failed to process contact form") from exc
