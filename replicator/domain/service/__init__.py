"""Domain services."""

from .auth_service import AuthService, IdentityProvider
from .base import Service
from .handle_allocator import HandleAllocator
from .identity_resolver import IdentityResolver, Resolution
from .interaction_service import InteractionService, RecordedInteraction
from .meme_service import InteractionEntry, MemeService, MemeThread
from .score_service import ScoreAudit, ScoreService
from .session_service import SessionService
from .user_service import UserService

__all__ = [
    "AuthService",
    "HandleAllocator",
    "IdentityProvider",
    "IdentityResolver",
    "InteractionEntry",
    "InteractionService",
    "MemeService",
    "MemeThread",
    "RecordedInteraction",
    "Resolution",
    "ScoreAudit",
    "ScoreService",
    "Service",
    "SessionService",
    "UserService",
]
