"""Integrationstests fuer die FastAPI-Endpunkte."""

from __future__ import annotations

from decimal import Decimal
import json

from fastapi.testclient import TestClient
import pytest

import config
from analysis.errors import RetrievalFailure
from api.main import app
from sources.catalog_client import parse_catalog


@pytest.fixture
def fetched_urls(monkeypatch: pytest.MonkeyPatch, raw_catalog) -> list[str]:
    calls: list[str] = []
    catalog = parse_catalog(json.dumps(raw_catalog))

    async def fake_fetch(url: str):
        calls.append(url)
        return catalog

    monkeypatch.setattr("api.main.fetch_catalog", fake_fetch)
    monkeypatch.setattr("orchestrator.pipeline.fetch_catalog", fake_fetch)
    return calls


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


def test_health(client: TestClient) -> None:
    assert client.get("/health").json() == {"status": "ok"}


def test_min_and_max_price_per_litre(client: TestClient, fetched_urls: list[str]) -> None:
    response = client.get("/productdata/article/min-and-max-price-per-litre")

    assert response.status_code == 200
    body = response.json()
    assert [item["articleId"] for item in body["minPrice"]] == [2001]
    assert [item["articleId"] for item in body["maxPrice"]] == [1002]
    assert body["maxPrice"][0]["productBrandName"] == "Krombacher"
    assert fetched_urls == [config.PRODUCT_DATA_URL]


def test_articles_by_price_uses_query_parameters(client: TestClient, fetched_urls: list[str]) -> None:
    response = client.get(
        "/productdata/article/price",
        params={"url": "https://catalog.example.com/data.json", "price": "19.99"},
    )

    assert response.status_code == 200
    assert [item["articleId"] for item in response.json()] == [1002]
    assert response.json()[0]["price"] == 19.99
    assert fetched_urls == ["https://catalog.example.com/data.json"]


def test_articles_by_price_defaults_to_configured_price(client: TestClient, fetched_urls: list[str]) -> None:
    response = client.get("/productdata/article/price")

    assert config.DEFAULT_PRICE == Decimal("17.99")
    assert [item["articleId"] for item in response.json()] == [1001]


def test_articles_by_price_without_match(client: TestClient, fetched_urls: list[str]) -> None:
    response = client.get("/productdata/article/price", params={"price": "0.99"})

    assert response.status_code == 200
    assert response.json() == []


def test_articles_with_most_bottles(client: TestClient, fetched_urls: list[str]) -> None:
    response = client.get("/productdata/article/most-bottles")

    assert response.status_code == 200
    assert [item["articleId"] for item in response.json()] == [1002]


def test_summary_fetches_catalog_once(client: TestClient, fetched_urls: list[str]) -> None:
    response = client.get("/productdata/article/summary", params={"price": "6.49"})

    assert response.status_code == 200
    body = response.json()
    assert set(body) == {"minAndMaxPricesPerLitre", "byPrice", "mostBottles"}
    assert [item["articleId"] for item in body["minAndMaxPricesPerLitre"]["minPrice"]] == [2001]
    assert [item["articleId"] for item in body["byPrice"]] == [2001]
    assert [item["articleId"] for item in body["mostBottles"]] == [1002]
    assert len(fetched_urls) == 1


def test_catalog_audit(client: TestClient, fetched_urls: list[str]) -> None:
    response = client.get("/productdata/catalog/audit")

    assert response.status_code == 200
    assert response.json() == {
        "productCount": 2,
        "articleCount": 3,
        "allPricesInEuroPerLitre": True,
        "issues": [],
        "valid": True,
    }


def test_catalog_audit_reports_issues_in_camel_case(
    client: TestClient, monkeypatch: pytest.MonkeyPatch, raw_catalog
) -> None:
    raw_catalog[1]["articles"][0]["shortDescription"] = "Kasten"
    catalog = parse_catalog(json.dumps(raw_catalog))

    async def fake_fetch(url: str):
        return catalog

    monkeypatch.setattr("api.main.fetch_catalog", fake_fetch)

    body = client.get("/productdata/catalog/audit").json()

    assert body["valid"] is False
    assert body["issues"] == [
        {"productId": 42, "articleId": 2001, "field": "shortDescription", "value": "Kasten"}
    ]


def test_retrieval_failure_is_reported_uniformly(client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    async def failing_fetch(url: str):
        raise RetrievalFailure()

    monkeypatch.setattr("api.main.fetch_catalog", failing_fetch)
    monkeypatch.setattr("orchestrator.pipeline.fetch_catalog", failing_fetch)

    for path in (
        "/productdata/article/min-and-max-price-per-litre",
        "/productdata/article/price",
        "/productdata/article/most-bottles",
        "/productdata/article/summary",
    ):
        response = client.get(path)
        assert response.status_code == 502
        assert response.json() == {"detail": "Invalid JSON or timeout."}


def test_malformed_price_text_fails_request(client: TestClient, monkeypatch: pytest.MonkeyPatch, raw_catalog) -> None:
    raw_catalog[1]["articles"][0]["pricePerUnitText"] = "N/A"
    catalog = parse_catalog(json.dumps(raw_catalog))

    async def fake_fetch(url: str):
        return catalog

    monkeypatch.setattr("api.main.fetch_catalog", fake_fetch)

    response = client.get("/productdata/article/min-and-max-price-per-litre")

    assert response.status_code == 502
    assert "N/A" in response.json()["detail"]


def test_empty_catalog_is_not_found(client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    async def empty_fetch(url: str):
        return []

    monkeypatch.setattr("api.main.fetch_catalog", empty_fetch)

    assert client.get("/productdata/article/most-bottles").status_code == 404
    assert client.get("/productdata/article/price").json() == []


def test_invalid_url_is_rejected(client: TestClient, fetched_urls: list[str]) -> None:
    response = client.get("/productdata/article/most-bottles", params={"url": "ftp://example.com/x"})

    assert response.status_code == 400
    assert fetched_urls == []
