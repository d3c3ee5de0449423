"""Score domain service."""

from dataclasses import dataclass

import logfire

from replicator.domain.error import NotFoundError
from replicator.domain.repository import InteractionRepository, MemeRepository
from replicator.domain.value import BASELINE_SCORE, MemeId

from .base import Service


@dataclass(frozen=True)
class ScoreAudit:
    """Stored score of a meme next to the score its ledger implies."""

    meme_id: MemeId
    stored: int
    expected: int

    @property
    def consistent(self) -> bool:
        return self.stored == self.expected


class ScoreService(Service):
    """Domain service that owns every change to a meme's score."""

    def __init__(
        self,
        meme_repository: MemeRepository,
        interaction_repository: InteractionRepository,
    ) -> None:
        """Initialize score service.

        Args:
            meme_repository: Meme repository
            interaction_repository: Interaction repository
        """
        self.meme_repository = meme_repository
        self.interaction_repository = interaction_repository

    async def apply_delta(self, meme_id: MemeId, delta: int) -> int:
        """Atomically shift a meme's score by a signed delta.

        There is no floor or ceiling; scores may go negative.

        Args:
            meme_id: Meme ID
            delta: Signed score change

        Returns:
            The new score

        Raises:
            NotFoundError: If the meme does not exist
        """
        with logfire.span(
            "score_service.apply_delta", meme_id=meme_id, delta=delta
        ):
            score = await self.meme_repository.apply_delta(meme_id, delta)
            if score is None:
                logfire.warn("Score change on non-existent meme", meme_id=meme_id)
                raise NotFoundError("Meme", str(meme_id))
            logfire.info("Score updated", meme_id=meme_id, delta=delta, score=score)
            return score

    async def audit(self, meme_id: MemeId) -> ScoreAudit:
        """Recompute a meme's score from its interaction ledger.

        Args:
            meme_id: Meme ID

        Returns:
            Stored and recomputed score

        Raises:
            NotFoundError: If the meme does not exist
        """
        with logfire.span("score_service.audit", meme_id=meme_id):
            meme = await self.meme_repository.find_by_id(meme_id)
            if not meme:
                raise NotFoundError("Meme", str(meme_id))

            interactions = await self.interaction_repository.find_by_meme(meme_id)
            expected = BASELINE_SCORE + sum(i.type.delta for i in interactions)

            audit = ScoreAudit(meme_id=meme_id, stored=meme.score, expected=expected)
            if not audit.consistent:
                logfire.error(
                    "Score drifted from ledger",
                    meme_id=meme_id,
                    stored=audit.stored,
                    expected=audit.expected,
                )
            return audit

    async def audit_all(self) -> list[ScoreAudit]:
        """Recompute every meme's score from the ledger in two queries.

        Returns:
            One audit per meme, in insertion order
        """
        with logfire.span("score_service.audit_all"):
            memes = await self.meme_repository.find_all()
            interactions = await self.interaction_repository.find_by_memes(
                [meme.id for meme in memes]
            )

            expected = {meme.id: BASELINE_SCORE for meme in memes}
            for interaction in interactions:
                expected[interaction.meme_id] += interaction.type.delta

            audits = [
                ScoreAudit(meme_id=meme.id, stored=meme.score, expected=expected[meme.id])
                for meme in memes
            ]
            drifted = [a.meme_id for a in audits if not a.consistent]
            if drifted:
                logfire.error("Scores drifted from ledger", meme_ids=drifted)
            return audits
