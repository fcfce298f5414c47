import pytest

from app.core.config import Settings
from app.core.database import build_engine, normalize_url


def test_healthz(client):
    response = client.get("/health/z")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_doc_without_auth(client):
    """Le document OpenAPI est public"""
    response = client.get("/doc")
    assert response.status_code == 200
    data = response.json()
    assert data["info"]["title"] == "AI Task Generator API"
    assert "/api/tasks/bulk" in data["paths"]
    assert "/api/generate" in data["paths"]


def test_unknown_route_returns_error_field(client):
    response = client.get("/api/nope")
    assert response.status_code == 404
    assert "error" in response.json()


def test_cors_preflight(client):
    response = client.options(
        "/api/tasks",
        headers={
            "Origin": "http://localhost:5173",
            "Access-Control-Request-Method": "PUT",
            "Access-Control-Request-Headers": "Authorization",
        },
    )
    assert response.status_code == 200
    assert "PUT" in response.headers["access-control-allow-methods"]


# ============ config ============

def test_missing_required_settings(monkeypatch):
    config = Settings()
    monkeypatch.setattr(config, "DATABASE_URL", None)
    monkeypatch.setattr(config, "GEMINI_API_KEY", "")
    assert config.missing_required() == ["DATABASE_URL", "GEMINI_API_KEY"]
    with pytest.raises(RuntimeError, match="DATABASE_URL, GEMINI_API_KEY"):
        config.check_required()


def test_required_settings_present():
    # conftest renseigne les deux variables
    Settings().check_required()


def test_build_engine_requires_url():
    with pytest.raises(RuntimeError, match="DATABASE_URL is not defined"):
        build_engine(None)


def test_normalize_postgres_url():
    assert normalize_url("postgresql://u:p@host/db") == "postgresql+psycopg://u:p@host/db"
    assert normalize_url("sqlite:///./test.db") == "sqlite:///./test.db"
