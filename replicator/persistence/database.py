"""Async PostgreSQL engine and sessions.

One engine per process; one session (and transaction) per request.
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from replicator.config import Settings

APPLICATION_NAME = "meme-replicator"


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the asyncpg-backed engine.

    Args:
        settings: Application settings

    Returns:
        Async engine with a bounded, pre-pinged pool
    """
    return create_async_engine(
        settings.database.url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
        # Shows up in pg_stat_activity
        connect_args={"server_settings": {"application_name": APPLICATION_NAME}},
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the request session factory.

    Rows are mapped to immutable domain models straight after each
    statement, so nothing relies on ORM autoflush or refresh-on-commit.
    """
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)

