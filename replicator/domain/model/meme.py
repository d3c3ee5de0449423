"""Meme entity.

A meme is a short text idea whose score tracks the community's reactions.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from replicator.domain.error import UnsavedEntityError
from replicator.domain.model.common import DomainModel
from replicator.domain.value import BASELINE_SCORE, MemeId, UserId


class Meme(DomainModel):
    """Meme entity.

    Business rules:
    - Content is non-empty after trimming
    - Score equals the baseline plus the deltas of all recorded interactions
    - The author label is captured at creation and never re-derived
    - Owner may be missing on legacy rows
    """

    id: Optional[MemeId] = None  # Assigned by the store
    content: str = Field(min_length=1)
    user_id: Optional[UserId] = None
    author: str = "Anonymous"
    score: int = BASELINE_SCORE
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def stored_id(self) -> MemeId:
        """The store-assigned id, raising UnsavedEntityError before insert."""
        if self.id is None:
            raise UnsavedEntityError("Meme")
        return self.id
