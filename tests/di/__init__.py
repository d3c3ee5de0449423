"""Mock providers for testing."""

from .auth0 import MockAuth0Provider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockAuth0Provider",
    "MockPersistenceProvider",
    "build_test_container",
]
