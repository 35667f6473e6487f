# This file implements the read-only service catalog shown on the marketing pages.
# It exists so routers can list and look up services without embedding seed data.
# The six records are seeded once per catalog instance and never change afterwards.
# Unknown or non-numeric identifiers are reported as not found rather than malformed.

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from dryclean.api.error_handlers import NotFoundError
from dryclean.api.schemas.catalog_schemas import ServiceRecord
from dryclean.api.validation import parse_identifier

LOGGER = logging.getLogger("api.catalog")

SERVICE_SEED: tuple[dict[str, Any], ...] = (
    {
        "id": 1,
        "name": "Dry Cleaning",
        "description": (
            "Professional dry cleaning for all types of garments including suits, dresses, "
            "and delicate fabrics."
        ),
        "category": "cleaning",
    },
    {
        "id": 2,
        "name": "Laundry Service",
        "description": "Wash, dry, and fold services for your everyday clothing and household items.",
        "category": "cleaning",
    },
    {
        "id": 3,
        "name": "Alterations",
        "description": "Expert tailoring and alterations to ensure the perfect fit for your garments.",
        "category": "tailoring",
    },
    {
        "id": 4,
        "name": "Wedding Gown Care",
        "description": "Specialized cleaning and preservation for wedding dresses and formal wear.",
        "category": "specialty",
    },
    {
        "id": 5,
        "name": "Leather & Suede",
        "description": (
            "Professional cleaning and care for leather jackets, suede garments, and accessories."
        ),
        "category": "specialty",
    },
    {
        "id": 6,
        "name": "Household Items",
        "description": (
            "Cleaning services for curtains, bedding, tablecloths, and other household textiles."
        ),
        "category": "cleaning",
    },
)


class ServiceCatalog:
    """Fixed, ordered table of the services offered."""

    def __init__(self, seed: Iterable[dict[str, Any]] = SERVICE_SEED) -> None:
        self._records: tuple[ServiceRecord, ...] = tuple(
            ServiceRecord.model_validate(row) for row in seed
        )
        ids = [record.id for record in self._records]
        if len(ids) != len(set(ids)):
            raise ValueError("Service ids must be unique.")
        self._by_id: dict[int, ServiceRecord] = {record.id: record for record in self._records}

    def list_all(self) -> list[ServiceRecord]:
        LOGGER.info("Fetching all services")
        return list(self._records)

    def get_by_id(self, raw_id: Any) -> ServiceRecord:
        LOGGER.info("Fetching service with id: %s", raw_id)
        service_id = parse_identifier(raw_id)
        record = self._by_id.get(service_id) if service_id is not None else None
        if record is None:
            raise NotFoundError("Service not found")
        return record

    def __len__(self) -> int:
        return len(self._records)
