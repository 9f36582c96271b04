"""
Zomato Backend — Test Configuration (conftest.py)
===================================================

What:  Shared pytest fixtures for the entire test suite.
Why:   Tests must never need a real MongoDB or bind the production port.

Fixture Hierarchy:
    Function-scoped:
    ├── mock_mongo_client: Patched AsyncMongoClient (no network)
    ├── connector: Fresh DatabaseConnector, not the app singleton
    └── test_client: HTTPX AsyncClient wired to the FastAPI app (no lifespan)
"""

import os

# Override settings for testing BEFORE any app imports
# Port 1 is never a MongoDB server; connection attempts fail fast
os.environ["MONGO_URL"] = "mongodb://127.0.0.1:1/zomato_test"
os.environ["MONGO_CONNECT_TIMEOUT_MS"] = "200"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ.pop("ENABLE_DOCS", None)

from unittest.mock import AsyncMock, MagicMock, patch  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from app.database import DatabaseConnector  # noqa: E402

UNREACHABLE_MONGO_URL = os.environ["MONGO_URL"]


@pytest.fixture
def mock_mongo_client():
    """
    Patches AsyncMongoClient inside app.database.

    What:    Yields the mocked client *instance* the connector will build.
    How:     admin.command (the ping) and close are AsyncMocks; tests set
             side_effect on admin.command to simulate failures.

    Usage:
        async def test_x(mock_mongo_client, connector):
            mock_mongo_client.admin.command.side_effect = ServerSelectionTimeoutError("down")
            await connector.connect()
    """
    with patch("app.database.AsyncMongoClient") as client_cls:
        client = MagicMock()
        client.admin.command = AsyncMock(return_value={"ok": 1.0})
        client.close = AsyncMock()
        database = MagicMock()
        database.name = "zomato_test"
        client.get_default_database.return_value = database
        client_cls.return_value = client
        client.cls = client_cls
        yield client


@pytest.fixture
def connector():
    """A fresh connector pointed at an unreachable endpoint."""
    return DatabaseConnector(url=UNREACHABLE_MONGO_URL, timeout_ms=200)


@pytest_asyncio.fixture
async def test_client():
    """
    Provides an async HTTP test client for endpoint testing.

    ASGITransport does not run the lifespan, so the database connector is
    never started by these requests.
    """
    from app.main import app
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
