"""PostgreSQL implementation of Interaction repository."""

from typing import Optional, Sequence

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from replicator.domain.model import Interaction
from replicator.domain.repository import InteractionRepository
from replicator.domain.value import MemeId
from replicator.persistence.mappers import interaction_to_dict, row_to_interaction
from replicator.persistence.tables import interactions_table


class PostgresInteractionRepository(InteractionRepository):
    """PostgreSQL implementation of InteractionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def add(self, interaction: Interaction) -> Optional[Interaction]:
        """Insert unless the (meme, user, type) triple already exists.

        ON CONFLICT DO NOTHING leaves the transaction intact and returns no
        row for a duplicate.
        """
        stmt = (
            insert(interactions_table)
            .values(**interaction_to_dict(interaction))
            .on_conflict_do_nothing(constraint="uq_interactions_meme_user_type")
            .returning(interactions_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()
        return row_to_interaction(dict(row)) if row else None

    async def find_by_meme(self, meme_id: MemeId) -> list[Interaction]:
        """Find all interactions on a meme, newest first."""
        return await self.find_by_memes([meme_id])

    async def find_by_memes(self, meme_ids: Sequence[MemeId]) -> list[Interaction]:
        """Find interactions on several memes (batch query), newest first."""
        if not meme_ids:
            return []

        stmt = (
            select(interactions_table)
            .where(interactions_table.c.meme_id.in_(meme_ids))
            .order_by(
                interactions_table.c.created_at.desc(),
                interactions_table.c.id.desc(),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_interaction(dict(row)) for row in result.mappings().all()]
