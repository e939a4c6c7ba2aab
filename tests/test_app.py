"""
Tests for application wiring: health check, OpenAPI documentation, settings.
"""

from app.config import Environment, Settings
from main import app
from test_fixtures import client


def _schema_properties(openapi: dict, name: str) -> dict:
    # input and output variants may be split into "<name>-Input" / "<name>-Output"
    schemas = openapi["components"]["schemas"]
    key = next(k for k in schemas if k == name or k.startswith(f"{name}-"))
    return schemas[key]["properties"]


def test_health_check():
    r = client.get("/health-check")

    assert r.status_code == 200
    assert r.json()["status"] == "ok"
    assert r.json()["service"] == "Brewery"


def test_openapi_documents_constraints():
    r = client.get("/openapi.json")

    assert r.status_code == 200
    beer = _schema_properties(r.json(), "BeerDto")
    assert beer["beerName"]["constraints"] == "Must not be blank"
    assert beer["upc"]["constraints"] == "Must not be null. Must be positive"
    assert beer["uuid"]["readOnly"] is True
    customer = _schema_properties(r.json(), "CustomerDto")
    assert customer["name"]["constraints"] == "Must not be blank"


def test_openapi_lists_beer_routes():
    paths = app.openapi()["paths"]

    assert "/api/v1/beer/" in paths
    assert set(paths["/api/v1/beer/{beer_id}"]) == {"get", "put", "delete"}


def test_lifespan_loads_sample_data():
    from fastapi.testclient import TestClient
    from api.dependencies import beer_repository

    with TestClient(app) as started:
        assert started.get("/health-check").status_code == 200
        assert beer_repository.count() >= 1


def test_settings_environment_normalized(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "PRODUCTION")
    monkeypatch.setenv("API_PREFIX", "/api/v2")

    settings = Settings()

    assert settings.environment is Environment.PRODUCTION
    assert settings.is_production()
    assert settings.api_prefix == "/api/v2"
