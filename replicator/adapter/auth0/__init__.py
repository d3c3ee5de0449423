"""Auth0 passwordless adapter."""

from .client import (
    Auth0PasswordlessClient,
    MockAuth0PasswordlessClient,
    RealAuth0PasswordlessClient,
)

__all__ = [
    "Auth0PasswordlessClient",
    "MockAuth0PasswordlessClient",
    "RealAuth0PasswordlessClient",
]
