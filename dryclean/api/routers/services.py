# This file defines the read-only service catalog endpoints.
# The id is taken as text so non-numeric ids resolve to a 404 rather than a validation error.

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from dryclean.api.dependencies import get_service_catalog
from dryclean.api.response_envelope import build_data_envelope
from dryclean.api.schemas.catalog_schemas import ServiceListResponse, ServiceResponse
from dryclean.api.schemas.common import LocalErrorResponse
from dryclean.api.services.catalog_service import ServiceCatalog

router = APIRouter(prefix="/services", tags=["services"])
CatalogDep = Annotated[ServiceCatalog, Depends(get_service_catalog)]


@router.get("", response_model=ServiceListResponse)
def list_services(catalog: CatalogDep) -> dict[str, object]:
    return build_data_envelope(catalog.list_all())


@router.get(
    "/{service_id}",
    response_model=ServiceResponse,
    responses={404: {"model": LocalErrorResponse}},
)
def get_service(service_id: str, catalog: CatalogDep) -> dict[str, object]:
    return build_data_envelope(catalog.get_by_id(service_id))
