"""
Employee API: Test Configuration (conftest.py)
=================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── mock_db_session: AsyncMock standing in for AsyncSession (unit tests)
    ├── app_settings:    Settings pointing at a fresh SQLite file in tmp_path
    ├── test_app:        FastAPI app built from app_settings, table created
    ├── db_session:      Real AsyncSession on the test_app engine
    ├── test_client:     HTTPX AsyncClient talking to test_app over ASGI
    └── employee_data:   A valid create/update body
"""

import os
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Override settings BEFORE any employee_api imports so the module-level app
# never points at a real PostgreSQL server
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./test.db"
os.environ["DB_CREATE_TABLES"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"

from employee_api.config import Settings  # noqa: E402
from employee_api.database import create_tables, dispose_engine  # noqa: E402
from employee_api.main import create_app  # noqa: E402


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_get(mock_db_session):
            mock_db_session.execute.return_value.scalars.return_value.first.return_value = row
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def app_settings(tmp_path):
    """Settings for an isolated SQLite database file per test."""
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'employees.db'}",
        db_create_tables=False,
        log_level="WARNING",
    )


@pytest_asyncio.fixture
async def test_app(app_settings):
    """
    FastAPI app with the employees table already created.

    ASGITransport does not run the lifespan, so the table is created here
    and the engine disposed afterwards.
    """
    app = create_app(app_settings)
    await create_tables(app.state.engine)
    yield app
    await dispose_engine(app.state.engine)


@pytest_asyncio.fixture
async def db_session(test_app):
    """A real AsyncSession against the test database."""
    async with test_app.state.session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def test_client(test_app):
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def employee_data():
    return {"name": "Ana", "email": "a@x.com", "position": "Eng"}
