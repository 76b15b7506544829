"""Unit tests for LogoutUserHandler."""

from unittest.mock import AsyncMock, Mock

import pytest

from src.application.commands.auth_commands import LogoutUser
from src.application.commands.handlers.logout_user_handler import LogoutUserHandler
from src.core.result import Success


@pytest.mark.unit
class TestLogoutUserHandler:
    """Logout always succeeds."""

    async def test_logout_destroys_session(self):
        session_store = AsyncMock()
        handler = LogoutUserHandler(session_store=session_store, logger=Mock())

        result = await handler.handle(LogoutUser(session_token="abc"))

        assert isinstance(result, Success)
        session_store.destroy.assert_awaited_once_with("abc")

    @pytest.mark.parametrize("token", [None, ""])
    async def test_logout_without_session_is_success(self, token):
        session_store = AsyncMock()
        handler = LogoutUserHandler(session_store=session_store, logger=Mock())

        result = await handler.handle(LogoutUser(session_token=token))

        assert isinstance(result, Success)
        session_store.destroy.assert_not_awaited()
