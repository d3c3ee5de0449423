"""In-memory meme repository for testing."""

from datetime import datetime
from typing import Optional

from replicator.domain.model.meme import Meme
from replicator.domain.repository.meme import MemeRepository
from replicator.domain.value import MemeId

from .store import InMemoryStore


class InMemoryMemeRepository(MemeRepository):
    """In-memory implementation of MemeRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def create(self, meme: Meme) -> Meme:
        """Insert a new meme."""
        meme_id = MemeId(self._store.next_id("memes"))
        stored = meme.model_copy(update={"id": meme_id, "created_at": datetime.now()})
        self._store.memes[meme_id] = stored
        return stored

    async def find_by_id(self, meme_id: MemeId) -> Optional[Meme]:
        """Find a meme by ID."""
        return self._store.memes.get(meme_id)

    async def find_all(self) -> list[Meme]:
        """Return every meme in insertion order."""
        return [self._store.memes[key] for key in sorted(self._store.memes)]

    async def apply_delta(self, meme_id: MemeId, delta: int) -> Optional[int]:
        """Add a delta to the stored score."""
        meme = self._store.memes.get(meme_id)
        if meme is None:
            return None
        updated = meme.model_copy(update={"score": meme.score + delta})
        self._store.memes[meme_id] = updated
        return updated.score

    async def count(self) -> int:
        """Count all memes."""
        return len(self._store.memes)
