"""Shared fixtures: settings and a scriptable fake upstream HTTP service."""

from typing import Any, Optional

import httpx
import pytest

from travel_core.config import Settings


class FakeUpstream:
    """Routes requests by URL path to canned (status, json) responses."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._routes: dict[str, tuple[int, Any]] = {}
        self._failures: dict[str, Exception] = {}
        self.client = httpx.AsyncClient(transport=httpx.MockTransport(self._handle))

    def route(self, path: str, status: int = 200, json: Any = None) -> None:
        self._routes[path] = (status, json if json is not None else {})

    def fail(self, path: str, exc: Optional[Exception] = None) -> None:
        self._failures[path] = exc or httpx.ConnectError("connection refused")

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path in self._failures:
            raise self._failures[request.url.path]
        status, body = self._routes.get(request.url.path, (404, {"message": "not routed"}))
        return httpx.Response(status, json=body)


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def settings() -> Settings:
    return Settings(openweather_api_key="test-key")


@pytest.fixture
def keyless_settings() -> Settings:
    return Settings()
