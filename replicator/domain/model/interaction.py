"""Interaction entity.

Interactions are the append-only ledger behind a meme's score.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from replicator.domain.error import UnsavedEntityError
from replicator.domain.model.common import DomainModel
from replicator.domain.value import InteractionId, InteractionType, MemeId, UserId


class Interaction(DomainModel):
    """Interaction entity.

    Business rules:
    - One interaction per (meme, user, type), enforced by a unique constraint
    - Never edited or deleted once recorded
    """

    id: Optional[InteractionId] = None  # Assigned by the store
    meme_id: MemeId
    user_id: Optional[UserId] = None
    type: InteractionType
    comment: str = ""
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def stored_id(self) -> InteractionId:
        if self.id is None:
            raise UnsavedEntityError("Interaction")
        return self.id
