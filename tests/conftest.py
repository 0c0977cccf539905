"""
Shared test fixtures.

The ASGI app is driven in-process through httpx's ``ASGITransport``, so no
socket is opened and nothing listens on port 8080 during the suite.
"""

from typing import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from src.api.app import create_app
from src.api.dependencies import get_settings
from src.config import Settings


@pytest_asyncio.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """AsyncClient against an app with default settings."""
    app = create_app()
    app.dependency_overrides[get_settings] = lambda: Settings()

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def strict_client() -> AsyncGenerator[AsyncClient, None]:
    """AsyncClient with coordinate range enforcement switched on."""
    app = create_app()
    app.dependency_overrides[get_settings] = lambda: Settings(
        enforce_coordinate_ranges=True
    )

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
