"""Meme repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from replicator.domain.model.meme import Meme
from replicator.domain.value import MemeId


class MemeRepository(ABC):
    """Repository for Meme entity.

    Defines the contract for meme persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def create(self, meme: Meme) -> Meme:
        """Insert a new meme.

        Args:
            meme: The meme to insert (id is ignored)

        Returns:
            The stored meme with its assigned id
        """
        pass

    @abstractmethod
    async def find_by_id(self, meme_id: MemeId) -> Optional[Meme]:
        """Find a meme by ID.

        Args:
            meme_id: The meme's unique identifier

        Returns:
            The meme if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> list[Meme]:
        """Return every meme in insertion order (id ascending)."""
        pass

    @abstractmethod
    async def apply_delta(self, meme_id: MemeId, delta: int) -> Optional[int]:
        """Atomically add a delta to a meme's score.

        The increment is relative to the stored value, never a
        read-modify-write from the caller.

        Args:
            meme_id: The meme's unique identifier
            delta: Signed score change

        Returns:
            The new score, or None if the meme does not exist
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all memes."""
        pass
