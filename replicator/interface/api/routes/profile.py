"""Profile routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, Response
from pydantic import BaseModel

from replicator.application.usecase.user import (
    GetProfileRequest,
    GetProfileResponse,
    GetProfileUseCase,
    SuggestHandleRequest,
    SuggestHandleResponse,
    SuggestHandleUseCase,
    UpdateHandleRequest,
    UpdateHandleResponse,
    UpdateHandleUseCase,
)
from replicator.config import Settings
from replicator.domain.error import DomainError
from replicator.interface.api.errors import to_http_exception
from replicator.interface.api.session import read_credential, set_session_cookie

router = APIRouter(prefix="/api/profile", tags=["profile"], route_class=DishkaRoute)


class UpdateHandleAPIRequest(BaseModel):
    """API request for choosing a handle."""

    username: str | None = None


@router.get(
    "",
    response_model=GetProfileResponse,
    response_model_exclude={"reissued_token"},
)
async def get_profile(
    request: Request,
    response: Response,
    get_profile_use_case: FromDishka[GetProfileUseCase],
    settings: FromDishka[Settings],
) -> GetProfileResponse:
    """Return the caller's email, username and name.

    Raises:
        HTTPException: 401 if not signed in
    """
    try:
        result = await get_profile_use_case.execute(
            GetProfileRequest(token=read_credential(request, settings))
        )
    except DomainError as e:
        raise to_http_exception(e)

    if result.reissued_token:
        set_session_cookie(response, result.reissued_token, settings)
    return result


@router.put(
    "",
    response_model=UpdateHandleResponse,
    response_model_exclude={"token"},
)
async def update_profile(
    body: UpdateHandleAPIRequest,
    request: Request,
    response: Response,
    update_handle_use_case: FromDishka[UpdateHandleUseCase],
    settings: FromDishka[Settings],
) -> UpdateHandleResponse:
    """Choose a username. Always refreshes the session cookie.

    Raises:
        HTTPException: 400 for a malformed username, 401 if not signed in,
            409 if the username is taken
    """
    try:
        result = await update_handle_use_case.execute(
            UpdateHandleRequest(
                token=read_credential(request, settings),
                username=body.username,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)

    set_session_cookie(response, result.token, settings)
    return result


@router.get("/suggestion", response_model=SuggestHandleResponse)
async def suggest_handle(
    request: Request,
    suggest_handle_use_case: FromDishka[SuggestHandleUseCase],
    settings: FromDishka[Settings],
) -> SuggestHandleResponse:
    """Propose a generated username that is currently free.

    Raises:
        HTTPException: 401 if not signed in, 500 if generation is exhausted
    """
    try:
        return await suggest_handle_use_case.execute(
            SuggestHandleRequest(token=read_credential(request, settings))
        )
    except DomainError as e:
        raise to_http_exception(e)
