# This file defines the service catalog record and its response envelopes.
# Records are frozen because the catalog is seeded once and never mutated.

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from dryclean.api.schemas.common import SuccessEnvelope

ServiceCategory = Literal["cleaning", "tailoring", "specialty"]


class ServiceRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int = Field(gt=0)
    name: str = Field(min_length=1)
    description: str = Field(min_length=1)
    category: ServiceCategory


class ServiceListResponse(SuccessEnvelope):
    data: list[ServiceRecord]


class ServiceResponse(SuccessEnvelope):
    data: ServiceRecord
