"""Shared fixtures: a temp session file and a scripted fake of the admin API."""

import json
from typing import Any, Callable, Union

import httpx
import pytest
import pytest_asyncio

from moto_admin.client import AsyncMotoAdmin
from moto_admin.config import Settings
from moto_admin.signals import SignalBus
from moto_admin.storage import SessionStore

BASE_URL = "http://admin.test/api"

Reply = Union[httpx.Response, Callable[[httpx.Request], Any]]


class FakeApi:
    """Routes (method, path) to canned responses and records every request."""

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], Reply] = {}
        self.requests: list[httpx.Request] = []

    def on(self, method: str, path: str, status: int = 200, json_body: Any = None, content: bytes = None) -> None:
        if content is not None:
            self.routes[(method, path)] = httpx.Response(status, content=content)
        else:
            self.routes[(method, path)] = httpx.Response(status, json=json_body)

    def route(self, method: str, path: str, reply: Callable[[httpx.Request], Any]) -> None:
        self.routes[(method, path)] = reply

    def calls(self, method: str, path: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.method == method and self._path(r) == path]

    @staticmethod
    def _path(request: httpx.Request) -> str:
        path = request.url.path
        return path[len("/api"):] if path.startswith("/api") else path

    def handler(self, request: httpx.Request) -> Any:
        self.requests.append(request)
        reply = self.routes.get((request.method, self._path(request)))
        if reply is None:
            return httpx.Response(404, json={"error": "Not found"})
        if isinstance(reply, httpx.Response):
            # Responses are single-use once read; hand out a copy.
            return httpx.Response(reply.status_code, content=reply.content, headers=reply.headers)
        return reply(request)


def body_json(request: httpx.Request) -> Any:
    return json.loads(request.content)


@pytest.fixture
def store(tmp_path):
    return SessionStore(tmp_path / "session.json")


@pytest.fixture
def signals():
    return SignalBus()


@pytest.fixture
def api():
    return FakeApi()


@pytest.fixture
def settings(tmp_path):
    return Settings(
        api_base_url=BASE_URL,
        storage_path=tmp_path / "session.json",
        storage_poll_interval=0.01,
    )


@pytest_asyncio.fixture
async def client(settings, store, api):
    c = AsyncMotoAdmin(settings=settings, store=store, transport=httpx.MockTransport(api.handler))
    yield c
    await c.close()
