from __future__ import annotations

import pytest
from httpx import AsyncClient, ASGITransport

from fieldcard.config import Settings
from fieldcard.llm.providers.base import BackendError, BaseBackend
from fieldcard.orch.pipeline import build_fallback
from fieldcard.service.app import create_app

SETTINGS = Settings(backend="ollama", base_url="http://ollama", model="llama3:8b", api_key_env=None)


class DummyBackend(BaseBackend):
    name = "dummy"
    model = "dummy-model"

    def __init__(self, response: str = "", error: Exception | None = None):
        self.response = response
        self.error = error

    async def complete(self, prompt: str) -> str:
        if self.error is not None:
            raise self.error
        return self.response


def _client(backend: BaseBackend) -> AsyncClient:
    app = create_app(SETTINGS, backend=backend)
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


@pytest.mark.asyncio
async def test_health_reports_backend():
    async with _client(DummyBackend()) as ac:
        res = await ac.get("/health")
    assert res.status_code == 200
    assert res.json() == {"ok": True, "backend": "dummy", "model": "dummy-model"}


@pytest.mark.asyncio
async def test_jobcard_success():
    backend = DummyBackend('{"task_name": "Reset Breaker", "steps": ["Open panel", "Flip switch"]}')
    async with _client(backend) as ac:
        res = await ac.post("/jobcard", json={"title": "Breaker Reset", "url": "https://x", "text": "..."})
    assert res.status_code == 200
    body = res.json()
    assert set(body) == {"job_card"}
    assert body["job_card"]["task_name"] == "Reset Breaker"
    assert body["job_card"]["steps"] == ["Open panel", "Flip switch"]


@pytest.mark.asyncio
async def test_jobcard_backend_failure_is_200_with_warning():
    backend = DummyBackend(error=BackendError("Ollama error 500: boom"))
    async with _client(backend) as ac:
        res = await ac.post("/jobcard", json={"title": "Breaker Reset", "url": "https://x", "text": "..."})
    assert res.status_code == 200
    body = res.json()
    assert body["job_card"] == build_fallback("Breaker Reset", "https://x")
    assert body["warning"] == "Used fallback (local model call failed): Ollama error 500: boom"


@pytest.mark.asyncio
async def test_unexpected_error_still_returns_fallback():
    backend = DummyBackend(error=RuntimeError("bug"))
    async with _client(backend) as ac:
        res = await ac.post("/jobcard", json={"title": "T"})
    assert res.status_code == 200
    body = res.json()
    assert body["job_card"]["task_name"] == "T"
    assert "bug" in body["warning"]


@pytest.mark.asyncio
async def test_empty_body_fields_are_allowed():
    async with _client(DummyBackend("nothing useful")) as ac:
        res = await ac.post("/jobcard", json={})
    assert res.status_code == 200
    assert res.json()["job_card"]["source_title"] == "Unknown Source"


@pytest.mark.asyncio
async def test_user_video_link_overrides_card():
    backend = DummyBackend('{"youtube_link": "https://www.youtube.com/watch?v=model"}')
    async with _client(backend) as ac:
        res = await ac.post("/jobcard", json={"title": "T", "youtube_link": "  https://youtu.be/mine  "})
        blank = await ac.post("/jobcard", json={"title": "T", "youtube_link": "   "})
    assert res.json()["job_card"]["youtube_link"] == "https://youtu.be/mine"
    assert blank.json()["job_card"]["youtube_link"] == "https://www.youtube.com/watch?v=model"


@pytest.mark.asyncio
async def test_cors_allows_extension_origin():
    async with _client(DummyBackend()) as ac:
        res = await ac.options(
            "/jobcard",
            headers={
                "Origin": "chrome-extension://abcdef",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "content-type",
            },
        )
    assert res.status_code == 200
    assert res.headers["access-control-allow-origin"] in ("*", "chrome-extension://abcdef")
