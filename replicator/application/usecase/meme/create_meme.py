"""Create meme use case."""

from datetime import datetime

from pydantic import BaseModel

from replicator.application.usecase.base import BaseUseCase
from replicator.domain.service import IdentityResolver, MemeService


class CreateMemeRequest(BaseModel):
    """Create meme request."""

    token: str | None = None
    content: str | None = None


class CreateMemeResponse(BaseModel):
    """Create meme response."""

    success: bool = True
    id: int
    author: str
    score: int
    created_at: datetime
    reissued_token: str | None = None


class CreateMemeUseCase(BaseUseCase):
    """Use case for posting a meme."""

    def __init__(
        self, identity_resolver: IdentityResolver, meme_service: MemeService
    ) -> None:
        """Initialize create meme use case.

        Args:
            identity_resolver: Identity resolution service
            meme_service: Meme domain service
        """
        self.identity_resolver = identity_resolver
        self.meme_service = meme_service

    async def execute(self, request: CreateMemeRequest) -> CreateMemeResponse:
        """Create a meme owned by the caller.

        Raises:
            UnauthenticatedError: If the caller is anonymous
            EmptyContentError: If the content is empty after trimming
        """
        resolution = await self.identity_resolver.require(request.token)
        meme = await self.meme_service.create(resolution.user, request.content or "")

        return CreateMemeResponse(
            id=meme.stored_id,
            author=meme.author,
            score=meme.score,
            created_at=meme.created_at,
            reissued_token=resolution.reissued_token,
        )
