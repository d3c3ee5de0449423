"""Interaction domain service."""

from dataclasses import dataclass

import logfire

from replicator.domain.error import DuplicateInteractionError, NotFoundError
from replicator.domain.model import Interaction
from replicator.domain.repository import InteractionRepository, MemeRepository
from replicator.domain.value import InteractionType, MemeId, UserId

from .base import Service
from .score_service import ScoreService


@dataclass(frozen=True)
class RecordedInteraction:
    """A newly recorded interaction and the meme's score after applying it."""

    interaction: Interaction
    score: int


class InteractionService(Service):
    """Domain service for the interaction ledger."""

    def __init__(
        self,
        interaction_repository: InteractionRepository,
        meme_repository: MemeRepository,
        score_service: ScoreService,
    ) -> None:
        """Initialize interaction service.

        Args:
            interaction_repository: Interaction repository
            meme_repository: Meme repository
            score_service: Score domain service
        """
        self.interaction_repository = interaction_repository
        self.meme_repository = meme_repository
        self.score_service = score_service

    async def record(
        self,
        meme_id: MemeId,
        user_id: UserId,
        interaction_type: InteractionType | str,
        comment: str | None = None,
    ) -> RecordedInteraction:
        """Record an interaction and apply its score delta.

        The ledger row and the score change belong to the same unit of work;
        if the score change fails the caller's transaction is rolled back.

        Args:
            meme_id: Meme being reacted to
            user_id: Reacting user
            interaction_type: Interaction type or its wire value
            comment: Optional free-text comment

        Returns:
            The stored interaction and the new score

        Raises:
            InvalidInteractionTypeError: If the type is not refute/refine/praise
            NotFoundError: If the meme does not exist
            DuplicateInteractionError: If the user already left this type here
        """
        if not isinstance(interaction_type, InteractionType):
            interaction_type = InteractionType.parse(interaction_type)

        with logfire.span(
            "interaction_service.record",
            meme_id=meme_id,
            user_id=user_id,
            type=interaction_type.value,
        ):
            meme = await self.meme_repository.find_by_id(meme_id)
            if not meme:
                logfire.warn("Interaction on non-existent meme", meme_id=meme_id)
                raise NotFoundError("Meme", str(meme_id))

            interaction = Interaction(
                meme_id=meme_id,
                user_id=user_id,
                type=interaction_type,
                comment=(comment or "").strip(),
            )

            stored = await self.interaction_repository.add(interaction)
            if stored is None:
                logfire.warn(
                    "Duplicate interaction attempt",
                    meme_id=meme_id,
                    user_id=user_id,
                    type=interaction_type.value,
                )
                raise DuplicateInteractionError(
                    meme_id, user_id, interaction_type.value
                )

            score = await self.score_service.apply_delta(
                meme_id, interaction_type.delta
            )

            logfire.info(
                "Interaction recorded",
                meme_id=meme_id,
                user_id=user_id,
                type=interaction_type.value,
                score=score,
            )
            return RecordedInteraction(interaction=stored, score=score)
