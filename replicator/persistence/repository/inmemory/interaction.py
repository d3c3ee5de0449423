"""In-memory interaction repository for testing."""

from datetime import datetime
from typing import Optional, Sequence

from replicator.domain.model.interaction import Interaction
from replicator.domain.repository.interaction import InteractionRepository
from replicator.domain.value import InteractionId, MemeId

from .store import InMemoryStore


class InMemoryInteractionRepository(InteractionRepository):
    """In-memory implementation of InteractionRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def add(self, interaction: Interaction) -> Optional[Interaction]:
        """Insert unless the (meme, user, type) triple already exists."""
        for existing in self._store.interactions:
            if (
                existing.meme_id == interaction.meme_id
                and existing.user_id == interaction.user_id
                and existing.type == interaction.type
            ):
                return None

        stored = interaction.model_copy(
            update={
                "id": InteractionId(self._store.next_id("interactions")),
                "created_at": datetime.now(),
            }
        )
        self._store.interactions.append(stored)
        return stored

    async def find_by_meme(self, meme_id: MemeId) -> list[Interaction]:
        """Find all interactions on a meme, newest first."""
        return await self.find_by_memes([meme_id])

    async def find_by_memes(self, meme_ids: Sequence[MemeId]) -> list[Interaction]:
        """Find interactions on several memes, newest first."""
        wanted = set(meme_ids)
        matches = [i for i in self._store.interactions if i.meme_id in wanted]
        return sorted(matches, key=lambda i: (i.created_at, i.id), reverse=True)
