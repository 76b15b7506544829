"""Authentication router.

Endpoints:
    POST /api/login   - Verify credentials, set session cookie, clear trial
    POST /api/logout  - Destroy session, clear session cookie
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from src.application.commands.auth_commands import LoginUser, LogoutUser
from src.application.commands.handlers import LoginUserHandler, LogoutUserHandler
from src.core.container import (
    get_cookie_carrier,
    get_login_handler,
    get_logout_handler,
)
from src.core.result import Failure, Success
from src.presentation.api.v1.cookies import CookieCarrier
from src.presentation.api.v1.errors import ErrorResponseBuilder
from src.schemas.auth_schemas import (
    ErrorResponse,
    LoginRequest,
    LoginResponse,
    LogoutResponse,
)

router = APIRouter(tags=["Auth"])


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={
        400: {"description": "Missing fields or malformed body", "model": ErrorResponse},
        401: {"description": "Invalid credentials", "model": ErrorResponse},
        403: {"description": "Account expired", "model": ErrorResponse},
    },
    summary="Login",
    description="Verify username/password and start a 30-day session.",
)
async def login(
    data: LoginRequest,
    handler: LoginUserHandler = Depends(get_login_handler),
    cookies: CookieCarrier = Depends(get_cookie_carrier),
) -> JSONResponse:
    """Create a session.

    On success sets the session cookie and clears the trial cookie (two
    separate Set-Cookie headers).
    """
    result = await handler.handle(
        LoginUser(username=data.username, password=data.password)
    )

    match result:
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)
        case Success(value=login_result):
            response = JSONResponse(
                status_code=status.HTTP_200_OK,
                content=LoginResponse(username=login_result.username).model_dump(),
            )
            cookies.set_session(
                response, login_result.session_token, login_result.max_age
            )
            cookies.clear_trial(response)
            return response


@router.post(
    "/logout",
    response_model=LogoutResponse,
    summary="Logout",
    description="Destroy the current session. Always succeeds.",
)
async def logout(
    request: Request,
    handler: LogoutUserHandler = Depends(get_logout_handler),
    cookies: CookieCarrier = Depends(get_cookie_carrier),
) -> JSONResponse:
    """Destroy the session named by the session cookie, if any."""
    await handler.handle(LogoutUser(session_token=cookies.session_token(request)))
    response = JSONResponse(content=LogoutResponse().model_dump())
    cookies.clear_session(response)
    return response
