"""PostgreSQL implementation of Meme repository."""

from typing import Optional

from sqlalchemy import func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from replicator.domain.model import Meme
from replicator.domain.repository import MemeRepository
from replicator.domain.value import MemeId
from replicator.persistence.mappers import meme_to_dict, row_to_meme
from replicator.persistence.tables import memes_table


class PostgresMemeRepository(MemeRepository):
    """PostgreSQL implementation of MemeRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def create(self, meme: Meme) -> Meme:
        """Insert a new meme."""
        stmt = insert(memes_table).values(**meme_to_dict(meme)).returning(memes_table)
        result = await self.session.execute(stmt)
        row = result.mappings().one()
        await self.session.flush()
        return row_to_meme(dict(row))

    async def find_by_id(self, meme_id: MemeId) -> Optional[Meme]:
        """Find a meme by ID."""
        stmt = select(memes_table).where(memes_table.c.id == meme_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_meme(dict(row)) if row else None

    async def find_all(self) -> list[Meme]:
        """Return every meme in insertion order."""
        stmt = select(memes_table).order_by(memes_table.c.id.asc())
        result = await self.session.execute(stmt)
        return [row_to_meme(dict(row)) for row in result.mappings().all()]

    async def apply_delta(self, meme_id: MemeId, delta: int) -> Optional[int]:
        """Atomically add a delta to the stored score."""
        stmt = (
            memes_table.update()
            .where(memes_table.c.id == meme_id)
            .values(score=memes_table.c.score + delta)
            .returning(memes_table.c.score)
        )
        result = await self.session.execute(stmt)
        score = result.scalar_one_or_none()
        await self.session.flush()
        return score

    async def count(self) -> int:
        """Count all memes."""
        result = await self.session.execute(
            select(func.count()).select_from(memes_table)
        )
        return int(result.scalar_one())
