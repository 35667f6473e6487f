"""
Unit tests for the customer registry.
It asserts expected behavior and guards against regressions in the corresponding component.
These tests are executed by `pytest` locally and in CI and should remain deterministic.
"""

from concurrent.futures import ThreadPoolExecutor
from datetime import UTC, datetime

import pytest

from dryclean.api.error_handlers import InvalidInputError, NotFoundError
from dryclean.api.services.customer_service import CustomerRegistry

FIXED_NOW = datetime(2024, 5, 1, 12, 30, tzinfo=UTC)


def _registry() -> CustomerRegistry:
    return CustomerRegistry(clock=lambda: FIXED_NOW)


def test_create_assigns_sequential_ids_and_timestamp() -> None:
    registry = _registry()

    first = registry.create(first_name="Jane", last_name="Smith", phone_number="555-0101")
    second = registry.create(first_name="John", last_name="Doe", phone_number="555-0102")

    assert (first.id, second.id) == (1, 2)
    assert first.created_at == FIXED_NOW
    assert registry.list_all() == [first, second]
    assert len(registry) == 2


def test_create_trims_fields() -> None:
    record = _registry().create(first_name=" Jane ", last_name="Smith  ", phone_number="\t555")

    assert (record.first_name, record.last_name, record.phone_number) == ("Jane", "Smith", "555")


def test_serialized_record_uses_camel_case() -> None:
    record = _registry().create(first_name="Jane", last_name="Smith", phone_number="555")

    assert set(record.model_dump(by_alias=True)) == {
        "id",
        "firstName",
        "lastName",
        "phoneNumber",
        "createdAt",
    }


@pytest.mark.parametrize(
    ("values", "message"),
    [
        ({"first_name": None, "last_name": None, "phone_number": None}, "First name is required"),
        ({"first_name": "Jane", "last_name": " ", "phone_number": None}, "Last name is required"),
        ({"first_name": "Jane", "last_name": "Smith", "phone_number": "   "}, "Phone number is required"),
    ],
)
def test_create_rejects_first_blank_field(values: dict[str, object], message: str) -> None:
    registry = _registry()

    with pytest.raises(InvalidInputError, match=message):
        registry.create(**values)

    assert registry.list_all() == []


def test_get_by_id_returns_created_record() -> None:
    registry = _registry()
    created = registry.create(first_name="Jane", last_name="Smith", phone_number="555")

    assert registry.get_by_id("1") is created
    assert registry.get_by_id(1) is created


@pytest.mark.parametrize("raw_id", ["2", "x", None])
def test_get_by_id_unknown_raises_not_found(raw_id: object) -> None:
    registry = _registry()
    registry.create(first_name="Jane", last_name="Smith", phone_number="555")

    with pytest.raises(NotFoundError, match="Customer not found"):
        registry.get_by_id(raw_id)


def test_concurrent_creates_get_unique_ids() -> None:
    registry = _registry()

    def create(index: int) -> int:
        return registry.create(first_name=f"N{index}", last_name="Doe", phone_number="555").id

    with ThreadPoolExecutor(max_workers=8) as pool:
        ids = list(pool.map(create, range(200)))

    assert sorted(ids) == list(range(1, 201))
    assert [record.id for record in registry.list_all()] == list(range(1, 201))
