"""In-memory repository implementations for testing."""

from .interaction import InMemoryInteractionRepository
from .meme import InMemoryMemeRepository
from .store import InMemoryStore
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryInteractionRepository",
    "InMemoryMemeRepository",
    "InMemoryStore",
    "InMemoryUserRepository",
]
