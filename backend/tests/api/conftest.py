"""API test infrastructure: async httpx client over the ASGI app."""

from __future__ import annotations

from collections.abc import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from tests.benchmark import ATLANTA_INPUTS


@pytest_asyncio.fixture
async def app():
    from solpos_api.main import create_app

    yield create_app()


@pytest_asyncio.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def atlanta_payload() -> dict:
    """Request body for the NREL Atlanta benchmark."""
    return dict(ATLANTA_INPUTS)
