import asyncio
import json

import httpx
import pytest
from fastapi.testclient import TestClient

from codereview.api import app, get_review_service
from codereview.client import OllamaChatClient
from codereview.config import Settings
from codereview.service import ReviewService


class FakeOllama:
    """Stands in for the Ollama server behind an httpx.MockTransport."""

    def __init__(self):
        self.requests = []
        self.status_code = 200
        self.body = {"message": {"role": "assistant", "content": "BUGS:\n- None\n\nSECURITY:\n- None"}}
        self.raw_body = None
        self.delay = 0
        self.error = None

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append({"url": str(request.url), "json": json.loads(request.content)})
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error:
            raise self.error
        if self.raw_body is not None:
            return httpx.Response(self.status_code, content=self.raw_body)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last_payload(self):
        return self.requests[-1]["json"]


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def fake_ollama():
    return FakeOllama()


@pytest.fixture
def chat_client(fake_ollama):
    return OllamaChatClient(
        base_url="http://ollama.test",
        timeout=5,
        transport=httpx.MockTransport(fake_ollama),
    )


@pytest.fixture
def review_service(chat_client, settings):
    return ReviewService(chat_client, settings)


@pytest.fixture
def client(review_service):
    app.dependency_overrides[get_review_service] = lambda: review_service
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def base_payload():
    return {
        "code": "def f():\n pass",
        "language": "python",
    }
