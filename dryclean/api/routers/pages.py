# This file serves the HTML pages of the marketing site.
# Other assets (css, js, images) are served by the static mount registered in `create_app`.

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import FileResponse

from dryclean.api.api_config import ApiConfig
from dryclean.api.dependencies import get_config

router = APIRouter(tags=["pages"], include_in_schema=False)
ConfigDep = Annotated[ApiConfig, Depends(get_config)]


def _page(config: ApiConfig, file_name: str) -> FileResponse:
    path = config.public_dir / file_name
    if not path.is_file():
        raise HTTPException(status_code=404)
    return FileResponse(path, media_type="text/html")


@router.api_route("/", methods=["GET", "HEAD"])
def landing_page(config: ConfigDep) -> FileResponse:
    return _page(config, "index.html")


@router.api_route("/customers", methods=["GET", "HEAD"])
def customers_page(config: ConfigDep) -> FileResponse:
    return _page(config, "customers.html")
