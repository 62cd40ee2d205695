import httpx
import pytest

from config import Settings

@pytest.fixture
def test_settings():
    return Settings(GEMINI_API_URL="https://gemini.test/v1beta/models/m:generateContent", GEMINI_API_KEY="secret")

@pytest.fixture
def mock_client():
    """Build an AsyncClient whose requests go to `handler` instead of the network."""
    def _make(handler):
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return _make

def gemini_reply(text):
    return {"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}}]}
