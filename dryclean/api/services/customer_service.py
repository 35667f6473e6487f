# This file implements the in-memory customer registry.
# It exists so customer records have one owner that assigns ids and preserves insertion order.
# Records are append-only and live only as long as the process; ids are never reused.
# Id assignment and append share a lock because sync handlers run on a worker thread pool.

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any

from dryclean.api.error_handlers import InvalidInputError, NotFoundError
from dryclean.api.schemas.customer_schemas import CustomerRecord
from dryclean.api.validation import first_blank_field, parse_identifier

LOGGER = logging.getLogger("api.customers")

# Checked in this order; the first blank field is reported.
REQUIRED_FIELD_MESSAGES: dict[str, str] = {
    "first_name": "First name is required",
    "last_name": "Last name is required",
    "phone_number": "Phone number is required",
}


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


class CustomerRegistry:
    """Append-only customer table with an auto-incrementing identifier."""

    def __init__(self, *, clock: Callable[[], datetime] = _utc_now) -> None:
        self._clock = clock
        self._records: list[CustomerRecord] = []
        self._by_id: dict[int, CustomerRecord] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def list_all(self) -> list[CustomerRecord]:
        LOGGER.info("Fetching all customers")
        with self._lock:
            return list(self._records)

    def get_by_id(self, raw_id: Any) -> CustomerRecord:
        LOGGER.info("Fetching customer with id: %s", raw_id)
        customer_id = parse_identifier(raw_id)
        with self._lock:
            record = self._by_id.get(customer_id) if customer_id is not None else None
        if record is None:
            raise NotFoundError("Customer not found")
        return record

    def create(self, *, first_name: Any, last_name: Any, phone_number: Any) -> CustomerRecord:
        values = {
            "first_name": first_name,
            "last_name": last_name,
            "phone_number": phone_number,
        }
        blank_field = first_blank_field(values, REQUIRED_FIELD_MESSAGES)
        if blank_field is not None:
            raise InvalidInputError(REQUIRED_FIELD_MESSAGES[blank_field])

        with self._lock:
            record = CustomerRecord(
                id=self._next_id,
                first_name=first_name.strip(),
                last_name=last_name.strip(),
                phone_number=phone_number.strip(),
                created_at=self._clock(),
            )
            self._next_id += 1
            self._records.append(record)
            self._by_id[record.id] = record

        LOGGER.info(
            "Customer created: id=%s first_name=%s last_name=%s",
            record.id,
            record.first_name,
            record.last_name,
        )
        return record

    def __len__(self) -> int:
        return len(self._records)
