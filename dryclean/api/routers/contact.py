# This file defines the contact-form submission endpoint.
# The stricter contact rate limit is applied by the pipeline before this handler runs.

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Depends

from dryclean.api.dependencies import get_contact_service, get_request_payload
from dryclean.api.response_envelope import build_message_envelope
from dryclean.api.schemas.common import LocalErrorResponse, TerminalErrorResponse
from dryclean.api.schemas.site_schemas import ContactAcknowledgement
from dryclean.api.services.contact_service import ContactService

router = APIRouter(prefix="/contact", tags=["contact"])
ContactDep = Annotated[ContactService, Depends(get_contact_service)]
PayloadDep = Annotated[dict[str, Any], Depends(get_request_payload)]


@router.post(
    "",
    response_model=ContactAcknowledgement,
    responses={
        400: {"model": LocalErrorResponse},
        429: {"model": TerminalErrorResponse},
        500: {"model": LocalErrorResponse},
    },
)
def submit_contact(service: ContactDep, payload: PayloadDep) -> dict[str, object]:
    acknowledgement = service.submit(
        name=payload.get("name"),
        email=payload.get("email"),
        phone=payload.get("phone"),
        message=payload.get("message"),
    )
    return build_message_envelope(acknowledgement)
