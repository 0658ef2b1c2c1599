"""Pytest configuration and fixtures."""

from collections.abc import AsyncIterator

import pytest
from httpx import ASGITransport, AsyncClient

from boardroom.main import app
from boardroom.storage import MemoryStorage


@pytest.fixture
def storage() -> MemoryStorage:
    """Create an empty in-memory storage."""
    return MemoryStorage()


@pytest.fixture
async def client(storage: MemoryStorage) -> AsyncIterator[AsyncClient]:
    """Create async test client for FastAPI app backed by fresh storage."""
    app.state.storage = storage

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    # Clean up app state
    del app.state.storage
