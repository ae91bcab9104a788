"""
Pytest configuration and fixtures
"""

import json
from typing import Callable

import httpx
import pytest

from core.config import ConfigLoader
from core.resources import set_resource_map


class MockBuildBearAPI:
    """Routes every httpx.AsyncClient created by the tools to an in-process handler."""

    def __init__(self):
        self.calls: list[httpx.Request] = []
        self.client_kwargs: list[dict] = []
        self._handler: Callable[[httpx.Request], httpx.Response] = lambda request: httpx.Response(200, json={})

    def respond(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self._handler = handler

    def respond_json(self, payload, status_code: int = 200) -> None:
        self.respond(lambda request: httpx.Response(status_code, json=payload))

    def respond_text(self, text: str, status_code: int = 200) -> None:
        self.respond(lambda request: httpx.Response(status_code, text=text))

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        return self._handler(request)

    @property
    def last_request(self) -> httpx.Request:
        assert self.calls, "no request was made"
        return self.calls[-1]

    def last_json_body(self):
        return json.loads(self.last_request.content)


@pytest.fixture(autouse=True)
def buildbear_env(monkeypatch):
    """Fresh config and a fake API key for every test."""
    monkeypatch.setenv("BUILDBEAR_API_KEY", "test-key")
    monkeypatch.delenv("BUILDBEAR_API_URL", raising=False)
    monkeypatch.delenv("BUILDBEAR_MCP_CONFIG", raising=False)
    ConfigLoader.reset()
    yield
    ConfigLoader.reset()
    set_resource_map({})


@pytest.fixture
def mock_api(monkeypatch) -> MockBuildBearAPI:
    api = MockBuildBearAPI()
    real_client = httpx.AsyncClient

    def _client(*args, **kwargs):
        api.client_kwargs.append(kwargs)
        return real_client(*args, transport=httpx.MockTransport(api.handle), **kwargs)

    monkeypatch.setattr(httpx, "AsyncClient", _client)
    return api
