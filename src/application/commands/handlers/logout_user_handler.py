"""Logout handler.

Destroys the caller's session. Always succeeds: an absent, unknown or
already-destroyed session is not an error, and the presentation layer
clears the session cookie regardless.
"""

from src.application.commands.auth_commands import LogoutUser
from src.core.errors import DomainError
from src.core.result import Result, Success
from src.domain.protocols import LoggerProtocol, SessionStoreProtocol


class LogoutUserHandler:
    """Handler for LogoutUser command."""

    def __init__(
        self, session_store: SessionStoreProtocol, logger: LoggerProtocol
    ) -> None:
        self._session_store = session_store
        self._logger = logger

    async def handle(self, cmd: LogoutUser) -> Result[None, DomainError]:
        """Handle logout command.

        Returns:
            Success(None), always.
        """
        if cmd.session_token:
            await self._session_store.destroy(cmd.session_token)
        self._logger.info("logout_completed", had_session=bool(cmd.session_token))
        return Success(value=None)
