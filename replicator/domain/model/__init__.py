"""Domain model entities."""

from replicator.domain.model.interaction import Interaction
from replicator.domain.model.meme import Meme
from replicator.domain.model.user import User

__all__ = [
    "User",
    "Meme",
    "Interaction",
]
