"""Shared test fixtures — settings, fake HTTP transport + API test client."""

from collections.abc import AsyncGenerator, Callable

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from app.core.config import Settings
from app.main import app


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, fetch_max_lines=50)


@pytest.fixture
def make_fetch_client() -> Callable[[Callable[[httpx.Request], httpx.Response]], httpx.AsyncClient]:
    """Build an httpx client whose requests are answered by ``handler``."""

    def _make(handler):
        return httpx.AsyncClient(
            transport=httpx.MockTransport(handler), follow_redirects=True,
        )

    return _make


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """HTTPX async test client bound to the FastAPI app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
