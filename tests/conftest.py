"""Test configuration and fixtures."""

import logfire
import pytest

from replicator.config import AuthSettings

# Keep spans local; nothing is exported during tests
logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def auth_settings() -> AuthSettings:
    """Auth settings with a fixed test secret."""
    return AuthSettings(jwt_secret="test-secret", session_days=30)
