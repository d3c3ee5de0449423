"""Authentication routes.

Passwordless login: ``/login`` emails a one-time code, ``/verify``
exchanges it for a session cookie.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, Response
from pydantic import BaseModel

from replicator.adapter.error import ProviderError
from replicator.application.usecase.auth import (
    BeginLoginRequest,
    BeginLoginResponse,
    BeginLoginUseCase,
    CompleteLoginRequest,
    CompleteLoginResponse,
    CompleteLoginUseCase,
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)
from replicator.config import Settings
from replicator.domain.error import DomainError
from replicator.interface.api.errors import to_http_exception
from replicator.interface.api.session import (
    clear_session_cookie,
    read_credential,
    set_session_cookie,
)
from replicator.util.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"], route_class=DishkaRoute)


class LogoutResponse(BaseModel):
    """Logout response."""

    success: bool
    message: str


@router.post("/login", response_model=BeginLoginResponse)
async def begin_login(
    body: BeginLoginRequest,
    begin_login_use_case: FromDishka[BeginLoginUseCase],
) -> BeginLoginResponse:
    """Email a one-time login code.

    Raises:
        HTTPException: 400 for an invalid email, 502 if the provider failed
    """
    try:
        return await begin_login_use_case.execute(body)
    except (DomainError, ProviderError) as e:
        raise to_http_exception(e)


@router.post("/verify", response_model=CompleteLoginResponse)
async def verify(
    body: CompleteLoginRequest,
    response: Response,
    complete_login_use_case: FromDishka[CompleteLoginUseCase],
    settings: FromDishka[Settings],
) -> CompleteLoginResponse:
    """Exchange a one-time code for a session.

    Sets cookie: session

    Raises:
        HTTPException: 400 for missing fields, 401 for a rejected code,
            502 if the provider failed
    """
    try:
        result = await complete_login_use_case.execute(body)
    except (DomainError, ProviderError) as e:
        raise to_http_exception(e)

    set_session_cookie(response, result.token, settings)
    logger.info(f"Session cookie set for user_id={result.user.id}")
    return result


@router.get(
    "/user",
    response_model=GetCurrentUserResponse,
    response_model_exclude={"reissued_token"},
)
async def get_current_user(
    request: Request,
    response: Response,
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    settings: FromDishka[Settings],
) -> GetCurrentUserResponse:
    """Return the signed-in user, or ``{"user": null}`` for anonymous callers.

    Safe to call without a session. Refreshes the cookie when the stored
    handle has changed since it was issued.
    """
    try:
        result = await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=read_credential(request, settings))
        )
    except DomainError as e:
        raise to_http_exception(e)

    if result.reissued_token:
        set_session_cookie(response, result.reissued_token, settings)
    return result


@router.post("/logout", response_model=LogoutResponse)
async def logout(
    response: Response,
    settings: FromDishka[Settings],
) -> LogoutResponse:
    """Logout by clearing the session cookie."""
    clear_session_cookie(response, settings)
    return LogoutResponse(success=True, message="Successfully logged out")
