"""PostgreSQL repository implementations."""

from replicator.persistence.repository.interaction import (
    PostgresInteractionRepository,
)
from replicator.persistence.repository.meme import PostgresMemeRepository
from replicator.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresMemeRepository",
    "PostgresInteractionRepository",
]
