# This file defines the customer registry endpoints.
# Creation reads the already-parsed request payload so JSON and form posts behave the same.

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Depends

from dryclean.api.dependencies import get_customer_registry, get_request_payload
from dryclean.api.response_envelope import build_data_envelope
from dryclean.api.schemas.common import LocalErrorResponse
from dryclean.api.schemas.customer_schemas import (
    CustomerCreatedResponse,
    CustomerListResponse,
    CustomerResponse,
)
from dryclean.api.services.customer_service import CustomerRegistry

router = APIRouter(prefix="/customers", tags=["customers"])
RegistryDep = Annotated[CustomerRegistry, Depends(get_customer_registry)]
PayloadDep = Annotated[dict[str, Any], Depends(get_request_payload)]


@router.get("", response_model=CustomerListResponse)
def list_customers(registry: RegistryDep) -> dict[str, object]:
    return build_data_envelope(registry.list_all())


@router.get(
    "/{customer_id}",
    response_model=CustomerResponse,
    responses={404: {"model": LocalErrorResponse}},
)
def get_customer(customer_id: str, registry: RegistryDep) -> dict[str, object]:
    return build_data_envelope(registry.get_by_id(customer_id))


@router.post(
    "",
    status_code=201,
    response_model=CustomerCreatedResponse,
    responses={400: {"model": LocalErrorResponse}},
)
def create_customer(registry: RegistryDep, payload: PayloadDep) -> dict[str, object]:
    record = registry.create(
        first_name=payload.get("firstName"),
        last_name=payload.get("lastName"),
        phone_number=payload.get("phoneNumber"),
    )
    return build_data_envelope(record, message="Customer created successfully")
