"""Repository interfaces.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from replicator.domain.repository.interaction import InteractionRepository
from replicator.domain.repository.meme import MemeRepository
from replicator.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "MemeRepository",
    "InteractionRepository",
]
