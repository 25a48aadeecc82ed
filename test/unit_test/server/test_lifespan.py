"""
Unit tests for FastAPI application lifespan management.

Tests verify that startup configures logging and monitoring, prepares the
database, and that a database failure does not prevent the app from starting.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi import FastAPI

from tempo_gig_manager.core.database import session as db_session
from tempo_gig_manager.server.core.config import settings
from tempo_gig_manager.server.main import lifespan

pytestmark = pytest.mark.asyncio

MAIN = "tempo_gig_manager.server.main"


class TestLifespanStartup:
    async def test_startup_sequence(self):
        app = FastAPI()
        with patch(f"{MAIN}.setup_logging") as mock_setup, patch(
            f"{MAIN}.initialize_logfire"
        ) as mock_logfire, patch(f"{MAIN}.init_db", new_callable=AsyncMock) as mock_init:
            async with lifespan(app):
                mock_setup.assert_called_once()
                mock_logfire.assert_called_once_with(app)
                mock_init.assert_awaited_once()

    async def test_database_failure_is_logged(self):
        with patch(f"{MAIN}.setup_logging"), patch(f"{MAIN}.initialize_logfire"), patch(
            f"{MAIN}.init_db", new_callable=AsyncMock, side_effect=RuntimeError("connection refused")
        ), patch(f"{MAIN}.logger") as mock_logger:
            async with lifespan(FastAPI()):
                pass

        assert "connection refused" in mock_logger.error.call_args[0][0]

    @pytest.mark.parametrize("token_secret,warned", [(None, True), ("signing-key", False)])
    async def test_warns_without_token_secret(self, monkeypatch, token_secret, warned):
        monkeypatch.setattr(settings, "admin_token_secret", token_secret)
        with patch(f"{MAIN}.setup_logging"), patch(f"{MAIN}.initialize_logfire"), patch(
            f"{MAIN}.init_db", new_callable=AsyncMock
        ), patch(f"{MAIN}.logger") as mock_logger:
            async with lifespan(FastAPI()):
                pass

        warnings = [call.args[0] for call in mock_logger.warning.call_args_list]
        assert any("ADMIN_TOKEN_SECRET" in message for message in warnings) is warned


class TestInitDb:
    async def test_skips_without_auto_create(self, monkeypatch):
        monkeypatch.setattr(db_session.settings, "auto_create_tables", False)
        with patch.object(db_session, "create_all", new_callable=AsyncMock) as mock_create:
            await db_session.init_db()
        mock_create.assert_not_awaited()

    async def test_creates_tables_when_enabled(self, monkeypatch):
        monkeypatch.setattr(db_session.settings, "auto_create_tables", True)
        with patch.object(db_session, "create_all", new_callable=AsyncMock) as mock_create:
            await db_session.init_db()
        mock_create.assert_awaited_once_with(db_session.engine)


class TestGetSession:
    async def test_yields_session_from_factory(self, monkeypatch):
        fake_session = MagicMock()
        factory = MagicMock()
        factory.return_value.__aenter__ = AsyncMock(return_value=fake_session)
        factory.return_value.__aexit__ = AsyncMock(return_value=False)
        monkeypatch.setattr(db_session, "async_session_maker", factory)

        sessions = [s async for s in db_session.get_session()]

        assert sessions == [fake_session]
