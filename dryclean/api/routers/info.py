# This file defines the API index endpoint, which advertises the name, version, and main routes.

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from dryclean.api.api_config import ApiConfig
from dryclean.api.dependencies import get_config
from dryclean.api.schemas.site_schemas import ApiInfoResponse

router = APIRouter(tags=["info"])
ConfigDep = Annotated[ApiConfig, Depends(get_config)]


@router.get("", response_model=ApiInfoResponse)
def api_info(config: ConfigDep) -> dict[str, object]:
    return {
        "message": config.api_name,
        "version": config.app_version,
        "endpoints": {
            "services": config.api_path("/services"),
            "contact": config.api_path("/contact"),
            "customers": config.api_path("/customers"),
            "health": "/health",
        },
    }
