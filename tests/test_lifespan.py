"""
Resource API - Startup & Shutdown Tests
=========================================

What:  The lifespan handler in isolation (no HTTP traffic).

What we test:
    ✅ A reachable database and no webhook: state installed, notifier disabled
    ✅ An unreachable database aborts startup before app.state is filled
    ✅ The engine is disposed when the startup check fails
"""

import pytest
from sqlalchemy.exc import OperationalError

from resource_api import main
from resource_api.config import settings
from resource_api.database import Database
from resource_api.main import create_app, lifespan


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    # setup_logging() replaces the root handlers, which pytest's capture relies on
    monkeypatch.setattr(main, "setup_logging", lambda: None)


class TestStartup:

    @pytest.mark.asyncio
    async def test_reachable_database_installs_state(self, monkeypatch, tmp_path):
        monkeypatch.setattr(settings, "database_url", f"sqlite+aiosqlite:///{tmp_path / 'up.db'}")
        monkeypatch.setattr(settings, "discord_id", None)
        app = create_app()

        async with lifespan(app):
            assert isinstance(app.state.database, Database)
            assert app.state.notifier.enabled is False

    @pytest.mark.asyncio
    async def test_unreachable_database_aborts_startup(self, monkeypatch, tmp_path):
        unreachable = tmp_path / "no-such-dir" / "down.db"
        monkeypatch.setattr(settings, "database_url", f"sqlite+aiosqlite:///{unreachable}")
        app = create_app()

        with pytest.raises(OperationalError):
            async with lifespan(app):
                pytest.fail("lifespan must not yield when the database is unreachable")

        assert not hasattr(app.state, "database")
        assert not hasattr(app.state, "notifier")

    @pytest.mark.asyncio
    async def test_failed_check_disposes_engine(self, monkeypatch, tmp_path):
        monkeypatch.setattr(settings, "database_url", f"sqlite+aiosqlite:///{tmp_path / 'x.db'}")
        disposed = []

        async def refuse(self):
            raise ConnectionRefusedError("connection refused")

        async def record_dispose(self):
            disposed.append(self.url)

        monkeypatch.setattr(Database, "verify_connection", refuse)
        monkeypatch.setattr(Database, "dispose", record_dispose)
        app = create_app()

        with pytest.raises(ConnectionRefusedError):
            async with lifespan(app):
                pass

        assert len(disposed) == 1
        assert not hasattr(app.state, "database")
