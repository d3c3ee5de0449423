"""List memes use case."""

from datetime import datetime

from pydantic import BaseModel

from replicator.domain.service import MemeService
from replicator.domain.value import InteractionType, SortKey


class ListMemesRequest(BaseModel):
    """List memes request."""

    sort: SortKey = SortKey.SCORE


class InteractionView(BaseModel):
    """Interaction as shown under a meme."""

    id: int
    type: InteractionType
    comment: str
    created_at: datetime
    user_id: int | None
    username: str | None
    name: str | None


class MemeView(BaseModel):
    """Meme with its interactions.

    ``author`` is the label captured at creation; ``author_username`` and
    ``author_name`` follow the owner's profile.
    """

    id: int
    content: str
    author: str
    score: int
    created_at: datetime
    user_id: int | None
    author_username: str | None = None
    author_name: str | None = None
    interaction_count: int
    interactions: list[InteractionView]


class ListMemesResponse(BaseModel):
    """List memes response."""

    memes: list[MemeView]


class ListMemesUseCase:
    """Use case for browsing memes. Open to anonymous callers."""

    def __init__(self, meme_service: MemeService) -> None:
        """Initialize list memes use case.

        Args:
            meme_service: Meme domain service
        """
        self.meme_service = meme_service

    async def execute(self, request: ListMemesRequest) -> ListMemesResponse:
        """Execute list memes flow.

        Args:
            request: Sort key

        Returns:
            Every meme with interactions, newest interaction first
        """
        threads = await self.meme_service.list_with_interactions(request.sort)

        return ListMemesResponse(
            memes=[
                MemeView(
                    id=thread.meme.id,
                    content=thread.meme.content,
                    author=thread.meme.author,
                    score=thread.meme.score,
                    created_at=thread.meme.created_at,
                    user_id=thread.meme.user_id,
                    author_username=thread.author_handle,
                    author_name=thread.author_name,
                    interaction_count=thread.interaction_count,
                    interactions=[
                        InteractionView(
                            id=entry.interaction.id,
                            type=entry.interaction.type,
                            comment=entry.interaction.comment,
                            created_at=entry.interaction.created_at,
                            user_id=entry.interaction.user_id,
                            username=entry.handle,
                            name=entry.name,
                        )
                        for entry in thread.interactions
                    ],
                )
                for thread in threads
            ]
        )
