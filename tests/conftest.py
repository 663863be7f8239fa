"""Pytest configuration and fixtures."""

import os

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

# Set test environment variables before imports
os.environ["DATABASE_PATH"] = ":memory:"
os.environ["PUBLIC_URL"] = "http://localhost:9000"


@pytest_asyncio.fixture
async def test_db():
    """Create a test database."""
    from session_auth.database import get_database, close_database
    import session_auth.database as db_module

    # Reset the global connection
    db_module._db_connection = None

    # Create in-memory database
    db = await get_database()

    yield db

    await close_database()
    db_module._db_connection = None


@pytest.fixture
def client():
    """Create a test client for the FastAPI app on a fresh database."""
    import session_auth.database as db_module
    from session_auth.main import app

    db_module._db_connection = None

    with TestClient(app) as c:
        yield c

    db_module._db_connection = None


@pytest.fixture
def credentials():
    """Credentials from the documented register/login example."""
    return {"username": "sue", "password": "1234"}
