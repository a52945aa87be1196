"""
Resource API - Test Configuration (conftest.py)
=================================================

What:  Shared pytest fixtures for the entire test suite.
How:   Environment is set BEFORE the package is imported (Settings requires
       PORT at import time). API tests run against a file-backed SQLite
       database through httpx's ASGITransport, with a recording notifier in
       place of the Discord webhook.

Fixture Hierarchy (all function-scoped):
    ├── mock_db_session: AsyncMock session for service unit tests
    ├── database:        Database on a fresh SQLite file, tables created
    ├── seeded_database: database + users 1, 7, 9 and resource 5
    ├── notifier:        RecordingNotifier (no network)
    ├── app:             create_app() with the above on app.state
    └── test_client:     httpx.AsyncClient over ASGITransport(app)
"""

import os

os.environ["PORT"] = "4000"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./test.db"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ.pop("DISCORD_ID", None)
os.environ.pop("DISCORD_TOKEN", None)

from typing import List, Optional, Tuple  # noqa: E402
from unittest.mock import AsyncMock, MagicMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from resource_api.database import Database  # noqa: E402
from resource_api.models import Resource, User  # noqa: E402


class RecordingNotifier:
    """Stands in for ResourceNotifier; records calls instead of posting."""

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self.calls: List[Tuple[Optional[str], Optional[str]]] = []

    async def notify_resource_created(self, name, description) -> bool:
        self.calls.append((name, description))
        return True

    async def aclose(self) -> None:
        pass


@pytest.fixture
def mock_db_session():
    """
    Mock async database session.

    Usage:
        mock_db_session.execute.return_value.scalar_one_or_none.return_value = row
        result = await resource_service.get_resource(mock_db_session, 1)
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
async def database(tmp_path):
    """A Database on a throwaway SQLite file with every table created."""
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'resources.db'}")
    await db.create_all()
    yield db
    await db.dispose()


@pytest_asyncio.fixture
async def seeded_database(database):
    """Users 1, 7 and 9; resource 5 owned by user 1."""
    async with database.session() as session:
        session.add_all([
            User(user_id=1, name="Ada", is_faculty=True),
            User(user_id=7, name="Grace", is_faculty=False),
            User(user_id=9, name="Linus", is_faculty=False),
        ])
        await session.flush()
        session.add(
            Resource(
                resource_id=5,
                resource_url="https://example.com/async",
                author_name="Ada",
                resource_name="Async IO explained",
                resource_description="A walkthrough of event loops",
                tags=["python", "async"],
                content_type="article",
                selene_week="3",
                usage_status="used",
                recommendation_reason="clear examples",
                user_id=1,
            )
        )
    return database


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def app(seeded_database, notifier):
    """
    A fresh app instance wired to the test database and notifier.

    ASGITransport does not run the lifespan, so the context objects the
    lifespan would build are installed on app.state directly.
    """
    from resource_api.main import create_app

    application = create_app()
    application.state.database = seeded_database
    application.state.notifier = notifier
    return application


@pytest_asyncio.fixture
async def test_client(app):
    """
    HTTPX AsyncClient for endpoint tests.

    Usage:
        async def test_root(test_client):
            response = await test_client.get("/")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
