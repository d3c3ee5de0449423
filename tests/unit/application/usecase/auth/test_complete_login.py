"""Unit tests for the login use cases."""

import pytest
from dishka import AsyncContainer

from replicator.application.usecase.auth import (
    BeginLoginRequest,
    BeginLoginUseCase,
    CompleteLoginRequest,
    CompleteLoginUseCase,
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
)
from replicator.domain.error import InvalidCodeError, ValidationError
from replicator.domain.repository import UserRepository
from replicator.domain.service import IdentityProvider, SessionService
from tests.harness import create_env_fixture, sign_in

unit_env = create_env_fixture()


class TestBeginLoginUseCase:
    """Tests for BeginLoginUseCase."""

    @pytest.mark.asyncio
    async def test_sends_code(self, unit_env: AsyncContainer):
        """A valid email triggers a verification code."""
        use_case = await unit_env.get(BeginLoginUseCase)
        identity_provider = await unit_env.get(IdentityProvider)

        response = await use_case.execute(BeginLoginRequest(email=" ada@example.com "))

        assert response.success
        assert identity_provider.sent == ["ada@example.com"]

    @pytest.mark.parametrize("email", ["", "   ", "not-an-email"])
    @pytest.mark.asyncio
    async def test_rejects_invalid_email(self, unit_env: AsyncContainer, email):
        """Emails without an @ are rejected before contacting the provider."""
        use_case = await unit_env.get(BeginLoginUseCase)
        identity_provider = await unit_env.get(IdentityProvider)

        with pytest.raises(ValidationError, match="Valid email required"):
            await use_case.execute(BeginLoginRequest(email=email))

        assert identity_provider.sent == []


class TestCompleteLoginUseCase:
    """Tests for CompleteLoginUseCase."""

    @pytest.mark.asyncio
    async def test_first_login_creates_user_and_session(
        self, unit_env: AsyncContainer
    ):
        """A correct code creates the account and issues a credential."""
        session_service = await unit_env.get(SessionService)

        response = await sign_in(unit_env, "ada@example.com")

        assert response.success
        assert response.user.email == "ada@example.com"
        assert response.user.name == "ada"
        assert response.user.username is not None
        payload = session_service.read(response.token)
        assert payload.user_id == response.user.id
        assert payload.handle == response.user.username
        assert payload.subject == "email|ada@example.com"

    @pytest.mark.asyncio
    async def test_second_login_reuses_account(self, unit_env: AsyncContainer):
        """Logging in again returns the same user and handle."""
        user_repo = await unit_env.get(UserRepository)

        first = await sign_in(unit_env, "ada@example.com")
        second = await sign_in(unit_env, "ADA@example.com")

        assert first.user.id == second.user.id
        assert first.user.username == second.user.username
        assert await user_repo.count() == 1

    @pytest.mark.asyncio
    async def test_wrong_code_is_rejected(self, unit_env: AsyncContainer):
        """An incorrect code creates nothing."""
        use_case = await unit_env.get(CompleteLoginUseCase)
        user_repo = await unit_env.get(UserRepository)

        with pytest.raises(InvalidCodeError):
            await use_case.execute(
                CompleteLoginRequest(email="ada@example.com", code="000000")
            )

        assert await user_repo.count() == 0

    @pytest.mark.parametrize(
        "email,code",
        [
            ("", "123456"),
            ("ada@example.com", ""),
            ("ada", "123456"),
            (None, "123456"),
            ("ada@example.com", None),
        ],
    )
    @pytest.mark.asyncio
    async def test_missing_fields_are_rejected(
        self, unit_env: AsyncContainer, email, code
    ):
        """Email and code are both required."""
        use_case = await unit_env.get(CompleteLoginUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(CompleteLoginRequest(email=email, code=code))


class TestGetCurrentUserUseCase:
    """Tests for GetCurrentUserUseCase."""

    @pytest.mark.asyncio
    async def test_anonymous_gets_null_user(self, unit_env: AsyncContainer):
        """No credential is not an error."""
        use_case = await unit_env.get(GetCurrentUserUseCase)

        response = await use_case.execute(GetCurrentUserRequest(token=None))

        assert response.user is None
        assert response.reissued_token is None

    @pytest.mark.asyncio
    async def test_signed_in_user_is_returned(self, unit_env: AsyncContainer):
        """A valid credential returns the user."""
        use_case = await unit_env.get(GetCurrentUserUseCase)
        session = await sign_in(unit_env)

        response = await use_case.execute(GetCurrentUserRequest(token=session.token))

        assert response.user == session.user
        assert response.reissued_token is None
