"""Authentication handler dependency factories.

Request-scoped handler instances for login and logout. Dependencies are
resolved through FastAPI ``Depends`` so tests can override any of them via
``app.dependency_overrides``.
"""

from typing import TYPE_CHECKING

from fastapi import Depends

from src.core.config import settings
from src.core.container.infrastructure import get_logger, get_password_service
from src.core.container.repositories import (
    get_credential_repository,
    get_session_store,
)
from src.domain.protocols import (
    CredentialRepository,
    LoggerProtocol,
    PasswordHashingProtocol,
    SessionStoreProtocol,
)

if TYPE_CHECKING:
    from src.application.commands.handlers import (
        LoginUserHandler,
        LogoutUserHandler,
    )


def get_login_handler(
    credential_repo: CredentialRepository = Depends(get_credential_repository),
    password_service: PasswordHashingProtocol = Depends(get_password_service),
    session_store: SessionStoreProtocol = Depends(get_session_store),
    logger: LoggerProtocol = Depends(get_logger),
) -> "LoginUserHandler":
    """Get LoginUser command handler (request-scoped).

    Usage:
        @router.post("/login")
        async def login(handler: LoginUserHandler = Depends(get_login_handler)):
            result = await handler.handle(command)
    """
    from src.application.commands.handlers import LoginUserHandler

    return LoginUserHandler(
        credential_repo=credential_repo,
        password_service=password_service,
        session_store=session_store,
        logger=logger,
        session_max_age=settings.session_ttl_seconds,
    )


def get_logout_handler(
    session_store: SessionStoreProtocol = Depends(get_session_store),
    logger: LoggerProtocol = Depends(get_logger),
) -> "LogoutUserHandler":
    """Get LogoutUser command handler (request-scoped)."""
    from src.application.commands.handlers import LogoutUserHandler

    return LogoutUserHandler(session_store=session_store, logger=logger)
