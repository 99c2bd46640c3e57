"""Shared fixtures: a fake JSON API behind ``httpx.MockTransport``."""

import json
from typing import Any

import httpx
import pytest

from tern.connector import Connector
from tern.routing.route import RouteDescriptor
from tern.routing.router import Router


class FakeAPI:
    """Records every request and answers with queued responses.

    With nothing queued, answers ``200 []``.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._responses: list[httpx.Response] = []

    def reply(self, payload: Any = None, *, status: int = 200, text: str | None = None) -> None:
        if text is not None:
            self._responses.append(httpx.Response(status, text=text))
        else:
            self._responses.append(httpx.Response(status, json=payload))

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._responses:
            return self._responses.pop(0)
        return httpx.Response(200, json=[])

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_body(self) -> dict[str, Any]:
        content = self.last.content
        return json.loads(content) if content else {}

    def last_query(self) -> dict[str, str]:
        return dict(self.last.url.params)


@pytest.fixture
def api() -> FakeAPI:
    return FakeAPI()


@pytest.fixture
def router() -> Router:
    """Routes for ``User`` with no method set (everything POSTs)."""
    return Router(
        "http://api.test/",
        [
            RouteDescriptor("User", "all", "/users"),
            RouteDescriptor("User", "first", "/users/first"),
            RouteDescriptor("User", "last", "/users/last"),
            RouteDescriptor("User", "count", "/users/count"),
            RouteDescriptor("User", "create", "/users/create"),
            RouteDescriptor("User", "update", "/users/{id}/update"),
            RouteDescriptor("User", "delete", "/users/{id}/delete"),
        ],
    )


@pytest.fixture
async def http_client(api):
    async with httpx.AsyncClient(transport=httpx.MockTransport(api)) as client:
        yield client


@pytest.fixture
def connector(router, http_client) -> Connector:
    return Connector(router, client=http_client)
