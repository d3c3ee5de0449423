"""Unit tests for the profile use cases."""

import pytest
from dishka import AsyncContainer

from replicator.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
)
from replicator.application.usecase.user import (
    GetProfileRequest,
    GetProfileUseCase,
    SuggestHandleRequest,
    SuggestHandleUseCase,
    UpdateHandleRequest,
    UpdateHandleUseCase,
)
from replicator.domain.error import (
    HandleTakenError,
    InvalidHandleFormatError,
    UnauthenticatedError,
)
from replicator.domain.repository import UserRepository
from replicator.domain.service import SessionService
from replicator.domain.value import Handle
from tests.harness import create_env_fixture, sign_in

unit_env = create_env_fixture()


class TestUpdateHandleUseCase:
    """Tests for UpdateHandleUseCase."""

    @pytest.mark.asyncio
    async def test_update_returns_fresh_credential(self, unit_env: AsyncContainer):
        """Changing the handle returns a credential carrying it."""
        use_case = await unit_env.get(UpdateHandleUseCase)
        session_service = await unit_env.get(SessionService)
        session = await sign_in(unit_env)

        response = await use_case.execute(
            UpdateHandleRequest(token=session.token, username=" Meme-Lord ")
        )

        assert response.success
        assert response.profile.username == "meme-lord"
        payload = session_service.read(response.token)
        assert payload.handle == "meme-lord"
        assert payload.subject == "email|ada@example.com"

    @pytest.mark.asyncio
    async def test_unchanged_handle_still_issues_credential(
        self, unit_env: AsyncContainer
    ):
        """Submitting the current handle succeeds and returns a credential."""
        use_case = await unit_env.get(UpdateHandleUseCase)
        session = await sign_in(unit_env)

        response = await use_case.execute(
            UpdateHandleRequest(token=session.token, username=session.user.username)
        )

        assert response.profile.username == session.user.username
        assert response.token

    @pytest.mark.asyncio
    async def test_taken_handle_is_rejected(self, unit_env: AsyncContainer):
        """A handle owned by someone else is a conflict."""
        use_case = await unit_env.get(UpdateHandleUseCase)
        ada = await sign_in(unit_env, "ada@example.com")
        bob = await sign_in(unit_env, "bob@example.com")

        with pytest.raises(HandleTakenError):
            await use_case.execute(
                UpdateHandleRequest(token=bob.token, username=ada.user.username)
            )

    @pytest.mark.parametrize("username", [None, "", "x", "bad_handle"])
    @pytest.mark.asyncio
    async def test_malformed_handle_is_rejected(
        self, unit_env: AsyncContainer, username
    ):
        """Empty and malformed handles are validation errors."""
        use_case = await unit_env.get(UpdateHandleUseCase)
        session = await sign_in(unit_env)

        with pytest.raises(InvalidHandleFormatError):
            await use_case.execute(
                UpdateHandleRequest(token=session.token, username=username)
            )

    @pytest.mark.asyncio
    async def test_anonymous_caller_is_rejected(self, unit_env: AsyncContainer):
        """Changing a handle requires a signed-in user."""
        use_case = await unit_env.get(UpdateHandleUseCase)

        with pytest.raises(UnauthenticatedError):
            await use_case.execute(UpdateHandleRequest(token=None, username="ada"))

    @pytest.mark.asyncio
    async def test_old_credential_is_reissued_after_change(
        self, unit_env: AsyncContainer
    ):
        """A credential minted before a handle change resolves with a reissue."""
        update = await unit_env.get(UpdateHandleUseCase)
        current_user = await unit_env.get(GetCurrentUserUseCase)
        session = await sign_in(unit_env)
        await update.execute(
            UpdateHandleRequest(token=session.token, username="renamed")
        )

        response = await current_user.execute(
            GetCurrentUserRequest(token=session.token)
        )

        assert response.user.username == "renamed"
        assert response.reissued_token is not None


class TestProfileQueries:
    """Tests for GetProfileUseCase and SuggestHandleUseCase."""

    @pytest.mark.asyncio
    async def test_get_profile(self, unit_env: AsyncContainer):
        """The profile shows email, username and name."""
        use_case = await unit_env.get(GetProfileUseCase)
        session = await sign_in(unit_env)

        response = await use_case.execute(GetProfileRequest(token=session.token))

        assert response.profile.email == "ada@example.com"
        assert response.profile.username == session.user.username
        assert response.profile.name == "ada"

    @pytest.mark.asyncio
    async def test_get_profile_requires_sign_in(self, unit_env: AsyncContainer):
        """Anonymous callers have no profile."""
        use_case = await unit_env.get(GetProfileUseCase)

        with pytest.raises(UnauthenticatedError):
            await use_case.execute(GetProfileRequest(token=None))

    @pytest.mark.asyncio
    async def test_suggestion_is_free_and_valid(self, unit_env: AsyncContainer):
        """Suggested usernames are well-formed and unowned."""
        use_case = await unit_env.get(SuggestHandleUseCase)
        user_repo = await unit_env.get(UserRepository)
        session = await sign_in(unit_env)

        response = await use_case.execute(SuggestHandleRequest(token=session.token))

        handle = Handle.parse(response.username)
        assert not await user_repo.handle_exists(handle)
