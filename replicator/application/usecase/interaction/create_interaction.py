"""Create interaction use case."""

from datetime import datetime

from pydantic import BaseModel

from replicator.application.usecase.base import BaseUseCase
from replicator.domain.error import ValidationError
from replicator.domain.service import IdentityResolver, InteractionService
from replicator.domain.value import InteractionType, MemeId


class CreateInteractionRequest(BaseModel):
    """Create interaction request.

    ``type`` stays a plain string so unknown values surface as a domain
    validation error rather than a schema error.
    """

    token: str | None = None
    meme_id: int | None = None
    type: str | None = None
    comment: str | None = ""


class CreateInteractionResponse(BaseModel):
    """Create interaction response."""

    success: bool = True
    id: int
    meme_id: int
    type: InteractionType
    comment: str
    created_at: datetime
    score: int
    reissued_token: str | None = None


class CreateInteractionUseCase(BaseUseCase):
    """Use case for reacting to a meme."""

    def __init__(
        self,
        identity_resolver: IdentityResolver,
        interaction_service: InteractionService,
    ) -> None:
        """Initialize create interaction use case.

        Args:
            identity_resolver: Identity resolution service
            interaction_service: Interaction domain service
        """
        self.identity_resolver = identity_resolver
        self.interaction_service = interaction_service

    async def execute(
        self, request: CreateInteractionRequest
    ) -> CreateInteractionResponse:
        """Record the caller's interaction and return the new score.

        Raises:
            UnauthenticatedError: If the caller is anonymous
            ValidationError: If the meme id or type is missing
            InvalidInteractionTypeError: If the type is unknown
            NotFoundError: If the meme does not exist
            DuplicateInteractionError: If already recorded by this caller
        """
        resolution = await self.identity_resolver.require(request.token)
        if request.meme_id is None or not request.type:
            raise ValidationError("meme_id and type are required")

        recorded = await self.interaction_service.record(
            meme_id=MemeId(request.meme_id),
            user_id=resolution.user.stored_id,
            interaction_type=request.type,
            comment=request.comment,
        )
        interaction = recorded.interaction

        return CreateInteractionResponse(
            id=interaction.stored_id,
            meme_id=interaction.meme_id,
            type=interaction.type,
            comment=interaction.comment,
            created_at=interaction.created_at,
            score=recorded.score,
            reissued_token=resolution.reissued_token,
        )
