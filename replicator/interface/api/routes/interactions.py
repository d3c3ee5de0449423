"""Interaction routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, Response
from pydantic import BaseModel

from replicator.application.usecase.interaction import (
    CreateInteractionRequest,
    CreateInteractionResponse,
    CreateInteractionUseCase,
)
from replicator.config import Settings
from replicator.domain.error import DomainError
from replicator.interface.api.errors import to_http_exception
from replicator.interface.api.session import read_credential, set_session_cookie

router = APIRouter(
    prefix="/api/interactions", tags=["interactions"], route_class=DishkaRoute
)


class CreateInteractionAPIRequest(BaseModel):
    """API request for reacting to a meme."""

    meme_id: int | None = None
    type: str | None = None
    comment: str | None = ""


@router.post(
    "",
    response_model=CreateInteractionResponse,
    response_model_exclude={"reissued_token"},
)
async def create_interaction(
    body: CreateInteractionAPIRequest,
    request: Request,
    response: Response,
    create_interaction_use_case: FromDishka[CreateInteractionUseCase],
    settings: FromDishka[Settings],
) -> CreateInteractionResponse:
    """Refute, refine or praise a meme. Returns the meme's new score.

    Raises:
        HTTPException: 400 for an unknown type, 401 if not signed in,
            404 for an unknown meme, 409 for a repeated interaction
    """
    try:
        result = await create_interaction_use_case.execute(
            CreateInteractionRequest(
                token=read_credential(request, settings),
                meme_id=body.meme_id,
                type=body.type,
                comment=body.comment,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)

    if result.reissued_token:
        set_session_cookie(response, result.reissued_token, settings)
    return result
