import asyncio
from typing import Optional, Union

import httpx
import pytest
import pytest_asyncio

from travelcraft.client import AuthManager, SessionManager


class FakeClock:
    def __init__(self, now: float = 1_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeServer:
    """
    Canned auth API behind an httpx.MockTransport.

    Every request is recorded as (method, path) with the /api prefix removed.
    """

    def __init__(self):
        self.requests = []
        self.routes = {}
        self.reply("GET", "/auth/heartbeat", 200, {"authenticated": True})
        self.reply("POST", "/auth/cleanup-session", 200, {"message": "Session cleaned up"})
        self.reply("POST", "/auth/logout", 200, {"message": "Logged out successfully"})

    def reply(
        self,
        method: str,
        path: str,
        status: int = 200,
        body: Union[dict, str, None] = None,
        offline: bool = False,
        gate: Optional[asyncio.Event] = None,
    ) -> None:
        self.routes[(method, path)] = (status, body, offline, gate)

    def count(self, method: str, path: str) -> int:
        return self.requests.count((method, path))

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path[len("/api"):]
        self.requests.append((request.method, path))
        route = self.routes.get((request.method, path))
        if route is None:
            return httpx.Response(404, json={"error": {"code": "NOT_FOUND", "message": "Not Found"}})

        status, body, offline, gate = route
        if gate is not None:
            await gate.wait()
        if offline:
            raise httpx.ConnectError("connection refused", request=request)
        if isinstance(body, str):
            return httpx.Response(status, text=body, headers={"content-type": "text/html"})
        return httpx.Response(status, json=body if body is not None else {})


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def server():
    return FakeServer()


@pytest_asyncio.fixture
async def http(server):
    async with httpx.AsyncClient(
        transport=httpx.MockTransport(server), base_url="http://test/api"
    ) as client:
        yield client


@pytest_asyncio.fixture
async def session_manager(http, clock):
    manager = SessionManager(http, clock=clock)
    yield manager
    await manager.unmount()


@pytest.fixture
def auth_manager(http, session_manager):
    return AuthManager(http, session_manager)


@pytest.fixture
def user_payload():
    return {"id": "5f0c7c8e-0000-4000-8000-000000000001", "name": "Ana Traveller", "email": "a@b.com"}
