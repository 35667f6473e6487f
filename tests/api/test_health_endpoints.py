# This file tests the health, API index, and metrics endpoints.
# These contracts are used by uptime checks and by the site's own scripts.

from __future__ import annotations

from datetime import datetime

from tests.api.support import api_test_client, build_test_config


def test_health_endpoint_returns_expected_fields() -> None:
    with api_test_client() as client:
        response = client.get("/health")

    assert response.status_code == 200
    payload = response.json()
    assert payload["status"] == "healthy"
    assert isinstance(payload["uptime"], float)
    assert payload["uptime"] >= 0
    assert datetime.fromisoformat(payload["timestamp"]).tzinfo is not None


def test_health_is_not_rate_limited() -> None:
    config = build_test_config(rate_limit_max_requests=1)
    with api_test_client(config=config) as client:
        statuses = [client.get("/health").status_code for _ in range(3)]

    assert statuses == [200, 200, 200]


def test_api_info_lists_endpoints() -> None:
    with api_test_client() as client:
        response = client.get("/api")

    assert response.status_code == 200
    payload = response.json()
    assert payload["message"] == "Touch of Elegance API"
    assert payload["version"] == "1.0.0"
    assert payload["endpoints"] == {
        "services": "/api/services",
        "contact": "/api/contact",
        "customers": "/api/customers",
        "health": "/health",
    }


def test_api_info_follows_configured_prefix() -> None:
    with api_test_client(config=build_test_config(api_prefix="/site-api")) as client:
        response = client.get("/site-api")
        services = client.get("/site-api/services")

    assert response.json()["endpoints"]["services"] == "/site-api/services"
    assert services.status_code == 200


def test_metrics_endpoint_exposes_request_counters() -> None:
    with api_test_client() as client:
        client.get("/api/services")
        response = client.get("/metrics")

    assert response.status_code == 200
    assert "site_http_requests_total" in response.text
