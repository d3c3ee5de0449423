"""Meme routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, Request, Response, status
from pydantic import BaseModel

from replicator.application.usecase.meme import (
    CreateMemeRequest,
    CreateMemeResponse,
    CreateMemeUseCase,
    ListMemesRequest,
    ListMemesResponse,
    ListMemesUseCase,
)
from replicator.config import Settings
from replicator.domain.error import DomainError
from replicator.domain.value import SortKey
from replicator.interface.api.errors import to_http_exception
from replicator.interface.api.session import read_credential, set_session_cookie

router = APIRouter(prefix="/api/memes", tags=["memes"], route_class=DishkaRoute)


class CreateMemeAPIRequest(BaseModel):
    """API request for creating a meme."""

    content: str | None = None


@router.get("", response_model=ListMemesResponse)
async def list_memes(
    list_memes_use_case: FromDishka[ListMemesUseCase],
    sort: SortKey = Query(default=SortKey.SCORE),
) -> ListMemesResponse:
    """List every meme with its interactions. No authentication required.

    Args:
        sort: ``score`` (default), ``age`` or ``interactions``; all descending
    """
    return await list_memes_use_case.execute(ListMemesRequest(sort=sort))


@router.post(
    "",
    response_model=CreateMemeResponse,
    response_model_exclude={"reissued_token"},
    status_code=status.HTTP_201_CREATED,
)
async def create_meme(
    body: CreateMemeAPIRequest,
    request: Request,
    response: Response,
    create_meme_use_case: FromDishka[CreateMemeUseCase],
    settings: FromDishka[Settings],
) -> CreateMemeResponse:
    """Post a meme at the baseline score.

    Raises:
        HTTPException: 400 for empty content, 401 if not signed in
    """
    try:
        result = await create_meme_use_case.execute(
            CreateMemeRequest(
                token=read_credential(request, settings), content=body.content
            )
        )
    except DomainError as e:
        raise to_http_exception(e)

    if result.reissued_token:
        set_session_cookie(response, result.reissued_token, settings)
    return result
