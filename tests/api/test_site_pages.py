# This file tests the HTML pages and static assets served next to the API.

from __future__ import annotations

from pathlib import Path

from tests.api.support import api_test_client, build_test_config


def test_landing_page_is_served() -> None:
    with api_test_client() as client:
        response = client.get("/")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "A Touch of Elegance" in response.text
    assert "/js/main.js" in response.text


def test_customers_page_is_served() -> None:
    with api_test_client() as client:
        response = client.get("/customers")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "customerForm" in response.text


def test_stylesheet_is_served() -> None:
    with api_test_client() as client:
        response = client.get("/css/styles.css")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/css")


def test_scripts_are_served() -> None:
    with api_test_client() as client:
        main_js = client.get("/js/main.js")
        customers_js = client.get("/js/customers.js")

    assert main_js.status_code == 200
    assert "javascript" in main_js.headers["content-type"]
    assert "customerForm" in customers_js.text


def test_missing_asset_is_not_found() -> None:
    with api_test_client() as client:
        response = client.get("/css/missing.css")

    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}


def test_missing_page_file_is_not_found(tmp_path: Path) -> None:
    with api_test_client(config=build_test_config(public_dir=tmp_path)) as client:
        response = client.get("/")

    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}


def test_pages_answer_head_requests() -> None:
    with api_test_client() as client:
        landing = client.head("/")
        customers = client.head("/customers")

    assert landing.status_code == 200
    assert landing.headers["content-type"].startswith("text/html")
    assert landing.content == b""
    assert customers.status_code == 200
