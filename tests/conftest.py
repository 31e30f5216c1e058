"""Shared pytest fixtures.

Environment variables are set before any app import so that the cached
settings never see a real Trefle token. Trefle itself is replaced with an
``httpx.MockTransport``, so no test touches the network.
"""

import logging
import os
from typing import Callable, List

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

os.environ["TREFLE_API_TOKEN"] = "test-token"
os.environ["TREFLE_API_URL"] = "https://trefle.test/api/v1"
os.environ["LOG_LEVEL"] = "WARNING"

from core.config import Settings  # noqa: E402
from core.logging import setup_logging  # noqa: E402
from plants.client import TrefleClient  # noqa: E402
from plants.dependencies import get_plant_service  # noqa: E402
from plants.service import PlantService  # noqa: E402


class FakeTrefle:
    """Records upstream requests and answers them with ``responder``."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.responder: Callable[[httpx.Request], httpx.Response] = (
            lambda request: httpx.Response(200, json={"data": [], "meta": {"total": 0}})
        )

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responder(request)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def test_settings():
    return Settings(
        trefle_api_token="test-token",
        trefle_api_url="https://trefle.test/api/v1/",
        trefle_timeout=5,
    )


@pytest.fixture
def fake_trefle():
    return FakeTrefle()


@pytest.fixture
def trefle_client(test_settings, fake_trefle):
    return TrefleClient(test_settings, transport=httpx.MockTransport(fake_trefle))


@pytest.fixture
def plant_service(trefle_client):
    return PlantService(trefle_client)


@pytest_asyncio.fixture
async def test_client(plant_service):
    """
    HTTPX AsyncClient wired to the FastAPI app, with the plant service
    pointed at the fake Trefle.
    """
    from main import app

    app.dependency_overrides[get_plant_service] = lambda: plant_service
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def info_logs(caplog):
    """Configure logging as in production (INFO) and capture every record."""
    setup_logging(Settings(trefle_api_token="test-token", log_level="INFO"))
    caplog.set_level(logging.INFO)
    yield caplog
    setup_logging(Settings(trefle_api_token="test-token", log_level="WARNING"))


@pytest_asyncio.fixture
async def make_client():
    """
    Build an AsyncClient around the app with a given plant service.

    Unexpected exceptions are not re-raised into the test, so 500 responses
    can be inspected the way a real caller would see them.
    """
    from main import app

    clients = []

    async def _make(service):
        app.dependency_overrides[get_plant_service] = lambda: service
        transport = ASGITransport(app=app, raise_app_exceptions=False)
        client = AsyncClient(transport=transport, base_url="http://test")
        clients.append(client)
        return client

    yield _make
    for client in clients:
        await client.aclose()
    app.dependency_overrides.clear()
