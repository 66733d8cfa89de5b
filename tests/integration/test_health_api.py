"""Integration tests for the health endpoints."""

import pytest

from resumatch.api.deps import get_llm_client
from resumatch.core.config import Settings
from resumatch.main import create_app

pytestmark = pytest.mark.integration


async def test_status_200(client):
    resp = await client.get("/api/status")

    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


async def test_health_with_llm_client(client, settings):
    resp = await client.get("/api/health")

    assert resp.status_code == 200
    assert resp.json() == {
        "status": "healthy",
        "llm_configured": True,
        "model": settings.gemini_model,
        "version": settings.app_version,
    }


async def test_health_without_llm_client(app, client):
    app.dependency_overrides[get_llm_client] = lambda: None

    resp = await client.get("/api/health")

    body = resp.json()
    assert body["status"] == "degraded"
    assert body["llm_configured"] is False


def test_missing_api_key_does_not_halt_startup(caplog):
    with caplog.at_level("ERROR"):
        app = create_app(Settings(_env_file=None, gemini_api_key=""))

    assert app.state.llm_client is None
    assert "GEMINI_API_KEY is not set" in caplog.text


def test_settings_are_held_on_app_state():
    settings = Settings(_env_file=None, gemini_api_key="", gemini_model="gemini-x")
    app = create_app(settings)

    assert app.state.settings is settings
