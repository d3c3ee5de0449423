"""Interaction repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from replicator.domain.model.interaction import Interaction
from replicator.domain.value import MemeId


class InteractionRepository(ABC):
    """Repository for Interaction entity.

    Defines the contract for the interaction ledger.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def add(self, interaction: Interaction) -> Optional[Interaction]:
        """Insert an interaction unless the (meme, user, type) triple exists.

        Check and insert happen as one conditional write against the unique
        constraint; there is no separate existence query.

        Args:
            interaction: The interaction to record (id is ignored)

        Returns:
            The stored interaction, or None if it was a duplicate
        """
        pass

    @abstractmethod
    async def find_by_meme(self, meme_id: MemeId) -> list[Interaction]:
        """Find all interactions on a meme, newest first.

        Args:
            meme_id: The meme's unique identifier

        Returns:
            Interactions on the meme
        """
        pass

    @abstractmethod
    async def find_by_memes(self, meme_ids: Sequence[MemeId]) -> list[Interaction]:
        """Find interactions on several memes (batch query), newest first.

        Args:
            meme_ids: Meme IDs to load interactions for

        Returns:
            Interactions on any of the memes
        """
        pass
