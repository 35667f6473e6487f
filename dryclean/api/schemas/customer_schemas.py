# This file defines the customer record and the customer endpoint envelopes.
# Field names are snake_case in Python and camelCase on the wire.

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from dryclean.api.schemas.common import SuccessEnvelope


class CustomerRecord(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: int = Field(gt=0)
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    phone_number: str = Field(min_length=1)
    created_at: datetime


class CustomerListResponse(SuccessEnvelope):
    data: list[CustomerRecord]


class CustomerResponse(SuccessEnvelope):
    data: CustomerRecord


class CustomerCreatedResponse(SuccessEnvelope):
    message: str
    data: CustomerRecord
