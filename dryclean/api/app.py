# This file builds the FastAPI application and registers the request pipeline and routers.
# It exists so startup behavior, middleware order, and error handling are configured in one place.
# The app owns its stores on `app.state`: the service catalog, customer registry, and rate limiters.
# Keeping bootstrap logic centralized makes deployment and testing more predictable.

from __future__ import annotations

import logging
import time
import uuid

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.staticfiles import StaticFiles
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Gauge, Histogram, generate_latest
from starlette.middleware.base import RequestResponseEndpoint

from dryclean.api.api_config import ApiConfig, get_api_config
from dryclean.api.body_parsing import body_parsing_middleware
from dryclean.api.error_handlers import register_error_handlers, unhandled_error_response
from dryclean.api.rate_limit import (
    CONTACT_LIMIT_MESSAGE,
    GENERAL_LIMIT_MESSAGE,
    RateLimitRule,
    SlidingWindowRateLimiter,
    build_rate_limit_middleware,
)
from dryclean.api.routers.contact import router as contact_router
from dryclean.api.routers.customers import router as customers_router
from dryclean.api.routers.health import router as health_router
from dryclean.api.routers.info import router as info_router
from dryclean.api.routers.pages import router as pages_router
from dryclean.api.routers.services import router as services_router
from dryclean.api.security_headers import security_headers_middleware
from dryclean.api.services.catalog_service import ServiceCatalog
from dryclean.api.services.contact_service import ContactService
from dryclean.api.services.customer_service import CustomerRegistry
from dryclean.common.logging import configure_logging

LOGGER = logging.getLogger("api.requests")

SITE_HTTP_REQUESTS_TOTAL = Counter(
    "site_http_requests_total",
    "Total number of HTTP requests processed by the site backend.",
    ["method", "path", "status_code"],
)
SITE_HTTP_REQUEST_DURATION_SECONDS = Histogram(
    "site_http_request_duration_seconds",
    "Site request duration in seconds.",
    ["method", "path"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1, 2.5, 5, 10),
)
SITE_HTTP_INFLIGHT_REQUESTS = Gauge(
    "site_http_inflight_requests",
    "Number of site requests currently being processed.",
    ["method"],
)

UNMATCHED_PATH_LABEL = "unmatched"
STATIC_PATH_LABEL = "static"


def route_path_label(request: Request, status_code: int) -> str:
    """Label metrics by route template so path parameters never create new series."""

    route = request.scope.get("route")
    route_path = getattr(route, "path", None)
    if route_path:
        return route_path
    return STATIC_PATH_LABEL if status_code < 400 else UNMATCHED_PATH_LABEL


async def request_context_middleware(request: Request, call_next: RequestResponseEndpoint) -> Response:
    request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
    request.state.request_id = request_id

    method_label = request.method
    started = time.perf_counter()
    status_code = 500
    SITE_HTTP_INFLIGHT_REQUESTS.labels(method=method_label).inc()
    try:
        try:
            response: Response = await call_next(request)
        except Exception as exc:
            # Rendered here so the outer stages still decorate the 500.
            response = unhandled_error_response(request, exc)
        status_code = response.status_code
        duration_ms = (time.perf_counter() - started) * 1000.0

        response.headers["x-request-id"] = request_id
        response.headers["x-response-time-ms"] = f"{duration_ms:.2f}"
        LOGGER.info(
            "%s %s %s %.2fms request_id=%s",
            method_label,
            request.url.path,
            status_code,
            duration_ms,
            request_id,
        )
        return response
    finally:
        duration_s = time.perf_counter() - started
        path_label = route_path_label(request, status_code)
        SITE_HTTP_REQUESTS_TOTAL.labels(
            method=method_label,
            path=path_label,
            status_code=str(status_code),
        ).inc()
        SITE_HTTP_REQUEST_DURATION_SECONDS.labels(
            method=method_label,
            path=path_label,
        ).observe(duration_s)
        SITE_HTTP_INFLIGHT_REQUESTS.labels(method=method_label).dec()


def build_rate_limit_rules(config: ApiConfig) -> list[RateLimitRule]:
    """Contact limiter first, then the general limiter for everything under the API prefix."""

    contact_limiter = SlidingWindowRateLimiter(
        window_seconds=config.contact_rate_limit_window_seconds,
        max_requests=config.contact_rate_limit_max_requests,
        message=CONTACT_LIMIT_MESSAGE,
    )
    general_limiter = SlidingWindowRateLimiter(
        window_seconds=config.rate_limit_window_seconds,
        max_requests=config.rate_limit_max_requests,
        message=GENERAL_LIMIT_MESSAGE,
    )
    return [
        RateLimitRule(
            limiter=contact_limiter,
            path_prefix=config.api_path("/contact"),
            methods=frozenset({"POST"}),
            exact_path=True,
        ),
        RateLimitRule(limiter=general_limiter, path_prefix=config.api_prefix),
    ]


def create_app(config: ApiConfig | None = None) -> FastAPI:
    """Create configured FastAPI application instance."""

    configure_logging()
    config = config or get_api_config()

    app = FastAPI(
        title=config.api_name,
        description=(
            "Backend for the Touch of Elegance dry-cleaning site: service catalog, "
            "contact form, and an in-memory customer registry."
        ),
        version=config.app_version,
        openapi_tags=[
            {"name": "health", "description": "Service liveness."},
            {"name": "info", "description": "API name, version, and main endpoints."},
            {"name": "services", "description": "Read-only catalog of services offered."},
            {"name": "customers", "description": "In-memory customer registry."},
            {"name": "contact", "description": "Contact-form submissions."},
        ],
    )

    rate_limit_rules = build_rate_limit_rules(config)

    app.state.config = config
    app.state.started_monotonic = time.monotonic()
    app.state.service_catalog = ServiceCatalog()
    app.state.customer_registry = CustomerRegistry()
    app.state.contact_service = ContactService()
    app.state.contact_limiter = rate_limit_rules[0].limiter
    app.state.general_limiter = rate_limit_rules[1].limiter

    # Registered innermost first: each call wraps everything added before it.
    app.middleware("http")(build_rate_limit_middleware(rate_limit_rules))
    app.middleware("http")(body_parsing_middleware)
    app.middleware("http")(request_context_middleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=config.gzip_minimum_size)
    app.middleware("http")(security_headers_middleware)

    @app.get("/metrics", include_in_schema=False)
    def metrics() -> Response:
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    register_error_handlers(app)

    app.include_router(health_router)
    app.include_router(info_router, prefix=config.api_prefix)
    app.include_router(services_router, prefix=config.api_prefix)
    app.include_router(contact_router, prefix=config.api_prefix)
    app.include_router(customers_router, prefix=config.api_prefix)
    app.include_router(pages_router)
    app.mount("/", StaticFiles(directory=config.public_dir), name="static")

    LOGGER.info("Application created environment=%s api_prefix=%s", config.environment, config.api_prefix)
    return app


app = create_app()
