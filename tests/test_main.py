import logging

from fastapi.testclient import TestClient

from gamebuddy.config import settings
from gamebuddy.database.supabase_client import SupabaseClient
from gamebuddy.main import app


def test_health():
    with TestClient(app) as client:
        response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_security_headers():
    with TestClient(app) as client:
        response = client.get("/")
    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"


def test_ready_requires_supabase_settings(monkeypatch):
    monkeypatch.setattr(settings, "supabase_url", "")
    with TestClient(app) as client:
        assert client.get("/ready").status_code == 503

    monkeypatch.setattr(settings, "supabase_url", "https://project.supabase.co")
    monkeypatch.setattr(settings, "supabase_key", "anon-key")
    with TestClient(app) as client:
        response = client.get("/ready")
    assert response.status_code == 200
    assert response.json() == {"status": "ready"}


def test_match_reset_defaults_follow_environment(monkeypatch):
    monkeypatch.setattr(settings, "allow_match_reset", None)
    monkeypatch.setattr(settings, "environment", "production")
    assert settings.match_reset_enabled is False
    monkeypatch.setattr(settings, "environment", "development")
    assert settings.match_reset_enabled is True
    monkeypatch.setattr(settings, "allow_match_reset", True)
    monkeypatch.setattr(settings, "environment", "production")
    assert settings.match_reset_enabled is True


def test_cors_origins_list(monkeypatch):
    monkeypatch.setattr(settings, "cors_origins", "https://a.example, https://b.example,")
    assert settings.get_cors_origins_list() == ["https://a.example", "https://b.example"]


def test_lifespan_logs_startup_and_drops_cached_clients(monkeypatch, caplog):
    monkeypatch.setattr(settings, "allow_match_reset", True)
    caplog.set_level(logging.INFO, logger="gamebuddy.main")

    with TestClient(app):
        assert "Application startup" in caplog.text
        assert "Match reset endpoint is enabled" in caplog.text
        SupabaseClient._client = object()

    assert "Application shutdown" in caplog.text
    assert SupabaseClient._client is None
    assert app.router.on_startup == []
    assert app.router.on_shutdown == []
