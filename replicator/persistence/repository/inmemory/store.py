"""Shared state behind the in-memory repositories."""

import itertools
from dataclasses import dataclass, field

from replicator.domain.model import Interaction, Meme, User


@dataclass
class InMemoryStore:
    """Tables for the in-memory repositories.

    One store is shared by every repository built from it, so writes made
    through one request are visible to the next. Repository methods never
    await between a check and a write, which makes each of them atomic
    under asyncio.
    """

    users: dict[int, User] = field(default_factory=dict)
    memes: dict[int, Meme] = field(default_factory=dict)
    interactions: list[Interaction] = field(default_factory=list)
    _ids: dict[str, "itertools.count[int]"] = field(default_factory=dict)

    def next_id(self, table: str) -> int:
        """Allocate the next identity value for a table, starting at 1."""
        counter = self._ids.setdefault(table, itertools.count(1))
        return next(counter)
