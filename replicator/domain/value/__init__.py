"""Domain value objects."""

from replicator.domain.value.identifiers import InteractionId, MemeId, UserId
from replicator.domain.value.types import (
    BASELINE_SCORE,
    INTERACTION_DELTAS,
    Handle,
    InteractionType,
    SortKey,
    VerifiedProfile,
)

__all__ = [
    # Identifiers
    "UserId",
    "MemeId",
    "InteractionId",
    # Types
    "BASELINE_SCORE",
    "INTERACTION_DELTAS",
    "Handle",
    "InteractionType",
    "SortKey",
    "VerifiedProfile",
]
