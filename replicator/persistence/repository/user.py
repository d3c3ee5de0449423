"""PostgreSQL implementation of User repository."""

from typing import Optional, Sequence

from sqlalchemy import Update, exists, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from replicator.domain.model import User
from replicator.domain.repository import UserRepository
from replicator.domain.value import UserId
from replicator.domain.value.types import Handle
from replicator.persistence.mappers import row_to_user, user_to_dict
from replicator.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find several users at once (batch query)."""
        if not user_ids:
            return []

        stmt = select(users_table).where(users_table.c.id.in_(user_ids))
        result = await self.session.execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings().all()]

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email."""
        stmt = select(users_table).where(users_table.c.email == email)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_handle(self, handle: Handle) -> Optional[User]:
        """Find a user by their handle."""
        stmt = select(users_table).where(users_table.c.handle == handle.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def handle_exists(self, handle: Handle) -> bool:
        """Check whether any user owns a handle."""
        stmt = select(exists().where(users_table.c.handle == handle.root))
        result = await self.session.execute(stmt)
        return bool(result.scalar())

    async def create(self, user: User) -> User:
        """Insert a user, yielding to a concurrent insert for the same email."""
        stmt = (
            insert(users_table)
            .values(**user_to_dict(user))
            .on_conflict_do_nothing(constraint="uq_users_email")
            .returning(users_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()

        if row:
            return row_to_user(dict(row))

        existing = await self.find_by_email(user.email)
        if existing is None:
            # Conflicting row went away before it could be read
            return await self.create(user)
        return existing

    async def claim_handle(self, user_id: UserId, handle: Handle) -> Optional[User]:
        """Assign a handle inside a SAVEPOINT.

        A unique violation only rolls back the savepoint, so the request
        transaction stays usable.
        """
        stmt = (
            users_table.update()
            .where(users_table.c.id == user_id)
            .values(handle=handle.root)
            .returning(users_table)
        )
        return await self._claim(stmt)

    async def claim_missing_handle(
        self, user_id: UserId, handle: Handle
    ) -> Optional[User]:
        """Assign a handle only while the stored handle is still NULL."""
        stmt = (
            users_table.update()
            .where(users_table.c.id == user_id, users_table.c.handle.is_(None))
            .values(handle=handle.root)
            .returning(users_table)
        )
        return await self._claim(stmt)

    async def _claim(self, stmt: Update) -> Optional[User]:
        try:
            async with self.session.begin_nested():
                result = await self.session.execute(stmt)
                row = result.mappings().first()
        except IntegrityError:
            return None

        return row_to_user(dict(row)) if row else None

    async def update_name(self, user_id: UserId, name: str) -> Optional[User]:
        """Set a user's display name."""
        stmt = (
            users_table.update()
            .where(users_table.c.id == user_id)
            .values(name=name)
            .returning(users_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()
        return row_to_user(dict(row)) if row else None

    async def touch_last_login(self, user_id: UserId) -> Optional[User]:
        """Record a successful login."""
        stmt = (
            users_table.update()
            .where(users_table.c.id == user_id)
            .values(last_login_at=func.now())
            .returning(users_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()
        return row_to_user(dict(row)) if row else None

    async def count(self) -> int:
        """Count all users."""
        result = await self.session.execute(
            select(func.count()).select_from(users_table)
        )
        return int(result.scalar_one())
