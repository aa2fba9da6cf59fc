import json

import httpx
import pytest
from fastapi.testclient import TestClient

from placement_bot.config import Settings, get_settings
from placement_bot.main import app
from placement_bot.services.openrouter import get_http_client


COMPLETION_BODY = {
    "id": "gen-123",
    "model": "meta-llama/llama-3.3-70b-instruct:free",
    "choices": [
        {
            "index": 0,
            "message": {"role": "assistant", "content": "Yes, with a CGPA above 7 you can apply."},
            "finish_reason": "stop",
        }
    ],
    "usage": {"prompt_tokens": 120, "completion_tokens": 14, "total_tokens": 134},
}


class FakeOpenRouter:
    """Stand-in for the OpenRouter API that records every outbound request."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.handler = lambda request: httpx.Response(200, json=COMPLETION_BODY)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    @property
    def last_payload(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def test_settings():
    """Settings isolated from the environment and any local .env."""
    return Settings(
        _env_file=None,
        openrouter_api_key="test-key",
        openrouter_base_url="https://openrouter.test/api/v1",
        openrouter_model="test/model",
        site_url="http://localhost:3000",
        app_title="Placement Bot",
        llm_temperature=0.7,
        llm_max_tokens=1000,
        llm_top_p=0.95,
    )


@pytest.fixture
def fake_openrouter():
    return FakeOpenRouter()


@pytest.fixture
def test_client(test_settings, fake_openrouter):
    """FastAPI test client with settings and upstream overridden."""

    async def _http_client():
        async with httpx.AsyncClient(transport=httpx.MockTransport(fake_openrouter)) as client:
            yield client

    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_http_client] = _http_client
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()
