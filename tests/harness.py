"""Test harness for unit, integration and E2E tests.

Integration tests assume PostgreSQL is already running and migrated.
Settings are loaded from environment variables (configure via .env or export).
"""

from dishka import AsyncContainer
import pytest_asyncio

from replicator.adapter.auth0.client import MockAuth0PasswordlessClient
from replicator.application.usecase.auth import (
    CompleteLoginRequest,
    CompleteLoginResponse,
    CompleteLoginUseCase,
)
from replicator.domain.model import User
from replicator.domain.value import Handle, UserId
from replicator.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Yields request-scoped container for service access
    - Settings loaded from environment automatically

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked, no database needed
        unit_env = create_env_fixture()

        # Integration tests - real persistence, assumes postgres running
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_create_meme(integration_env):
            repo = await integration_env.get(MemeRepository)
            meme = await repo.create(Meme(content="..."))
            assert meme.id is not None
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        # Open request-scoped context
        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment


def make_user(
    user_id: int = 1,
    email: str = "ada@example.com",
    handle: str | None = "lucid-comet-417",
    name: str | None = "Ada",
) -> User:
    """Build a stored-looking user for tests that bypass the repository."""
    return User(
        id=UserId(user_id),
        email=email,
        handle=Handle(handle) if handle else None,
        name=name,
    )


async def sign_in(
    container: AsyncContainer, email: str = "ada@example.com"
) -> CompleteLoginResponse:
    """Log in through the mock identity provider and return the session."""
    use_case = await container.get(CompleteLoginUseCase)
    return await use_case.execute(
        CompleteLoginRequest(email=email, code=MockAuth0PasswordlessClient.MOCK_CODE)
    )
