# This file provides dependency accessors for FastAPI routes.
# The stores are created once by `create_app` and owned by `app.state`; routes reach them only through here.
# Tests get isolated stores simply by building a fresh app.

from __future__ import annotations

from typing import Any

from fastapi import Request

from dryclean.api.api_config import ApiConfig
from dryclean.api.services.catalog_service import ServiceCatalog
from dryclean.api.services.contact_service import ContactService
from dryclean.api.services.customer_service import CustomerRegistry


def get_config(request: Request) -> ApiConfig:
    return request.app.state.config


def get_service_catalog(request: Request) -> ServiceCatalog:
    return request.app.state.service_catalog


def get_customer_registry(request: Request) -> CustomerRegistry:
    return request.app.state.customer_registry


def get_contact_service(request: Request) -> ContactService:
    return request.app.state.contact_service


def get_request_payload(request: Request) -> dict[str, Any]:
    return getattr(request.state, "payload", None) or {}
