"""
Chirpy Backend — Test Configuration (conftest.py)
===================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── hit_counter: Fresh RequestCounter per test
    ├── static_dir: Temporary /app/ root containing index.html
    ├── chirpy_app: create_app() wired to the two fixtures above
    ├── test_client: HTTPX AsyncClient talking to chirpy_app
    └── mock_db_session: Mock async database session (no real DB needed)
"""

import os
from unittest.mock import AsyncMock, MagicMock

# Settings are read at import time, so the environment is set before any
# chirpy import. aiosqlite keeps the engine importable without PostgreSQL.
os.environ["DB_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["PLATFORM"] = "dev"

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from chirpy.main import create_app
from chirpy.services.hit_counter import RequestCounter

INDEX_HTML = "<html><body><h1>Welcome to Chirpy</h1></body></html>"


@pytest.fixture
def hit_counter():
    """A fresh counter so no test sees another test's hits."""
    return RequestCounter()


@pytest.fixture
def static_dir(tmp_path):
    """Temporary static root with an index page and one asset."""
    root = tmp_path / "static"
    root.mkdir()
    (root / "index.html").write_text(INDEX_HTML)
    (root / "logo.txt").write_text("chirp")
    return root


@pytest.fixture
def chirpy_app(hit_counter, static_dir):
    return create_app(hit_counter=hit_counter, static_root=str(static_dir))


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        mock_db_session.flush.side_effect = IntegrityError("INSERT", {}, Exception())
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest_asyncio.fixture
async def test_client(chirpy_app):
    """
    HTTPX AsyncClient routed straight into the ASGI app (no server, no lifespan).

    Usage:
        async def test_healthz(test_client):
            response = await test_client.get("/api/healthz")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=chirpy_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
