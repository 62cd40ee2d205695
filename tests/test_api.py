import asyncio
import logging

import httpx
import pytest
from fastapi.testclient import TestClient

import main
from config import Settings
from main import app, get_http_client, get_settings
from conftest import gemini_reply

@pytest.fixture
def api(test_settings):
    """TestClient wired to a single mocked upstream client for the whole test."""
    clients = []

    def _make(handler):
        upstream = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        clients.append(upstream)
        app.dependency_overrides[get_http_client] = lambda: upstream
        app.dependency_overrides[get_settings] = lambda: test_settings
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()
    for upstream in clients:
        asyncio.run(upstream.aclose())

def test_root():
    c = TestClient(app)
    r = c.get("/")
    assert r.status_code == 200 and r.json()["status"] == "running"

def test_generate(api):
    c = api(lambda request: httpx.Response(200, json=gemini_reply("Sounds good!")))
    r = c.post("/api/email/generate", json={"emailContent": "Lunch tomorrow?", "tone": "casual"})
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/plain")
    assert r.text == "Sounds good!"

def test_generate_upstream_down_still_200(api):
    c = api(lambda request: httpx.Response(503))
    r = c.post("/api/email/generate", json={"emailContent": "Hello", "tone": None})
    assert r.status_code == 200
    assert r.text == "Error Communicating With AI Service: HTTP 503"

def test_generate_requires_email_content(api):
    c = api(lambda request: httpx.Response(200, json={}))
    r = c.post("/api/email/generate", json={"tone": "formal"})
    assert r.status_code == 422

def test_lifespan_shares_one_client(monkeypatch, caplog):
    built = []

    class MockedAsyncClient(httpx.AsyncClient):
        def __init__(self, **kwargs):
            handler = lambda request: httpx.Response(200, json=gemini_reply("Noted."))
            super().__init__(transport=httpx.MockTransport(handler), **kwargs)
            built.append(self)

    monkeypatch.setattr(httpx, "AsyncClient", MockedAsyncClient)
    monkeypatch.setattr(main, "settings", Settings(GEMINI_API_KEY=None))

    with caplog.at_level(logging.WARNING, logger="main"):
        with TestClient(app) as c:
            shared = app.state.http_client
            for _ in range(2):
                r = c.post("/api/email/generate", json={"emailContent": "FYI"})
                assert r.text == "Noted."
            assert app.state.http_client is shared
            assert not shared.is_closed

    assert built == [shared]
    assert shared.is_closed
    assert "GEMINI_API_KEY is not set" in caplog.text
