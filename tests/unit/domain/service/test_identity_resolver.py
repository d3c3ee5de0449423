"""Unit tests for IdentityResolver."""

import asyncio
import random

import pytest
from dishka import AsyncContainer

from replicator.domain.error import UnauthenticatedError
from replicator.domain.model import User
from replicator.domain.repository import UserRepository
from replicator.domain.service import (
    HandleAllocator,
    IdentityResolver,
    SessionService,
    UserService,
)
from replicator.domain.value import Handle, UserId
from replicator.persistence.repository.inmemory import (
    InMemoryStore,
    InMemoryUserRepository,
)
from tests.harness import create_env_fixture, make_user

unit_env = create_env_fixture()


class YieldingUserRepository(InMemoryUserRepository):
    """Yields to the event loop on reads, like a real database round trip."""

    async def find_by_id(self, user_id):
        await asyncio.sleep(0)
        return await super().find_by_id(user_id)

    async def handle_exists(self, handle):
        await asyncio.sleep(0)
        return await super().handle_exists(handle)


class TestResolve:
    """Tests for resolving credentials to users."""

    @pytest.mark.asyncio
    async def test_missing_credential_is_anonymous(self, unit_env: AsyncContainer):
        """No credential resolves to None."""
        resolver = await unit_env.get(IdentityResolver)

        assert await resolver.resolve(None) is None

    @pytest.mark.asyncio
    async def test_invalid_credential_is_anonymous(self, unit_env: AsyncContainer):
        """A broken credential resolves to None instead of raising."""
        resolver = await unit_env.get(IdentityResolver)

        assert await resolver.resolve("garbage") is None

    @pytest.mark.asyncio
    async def test_unknown_user_is_anonymous(self, unit_env: AsyncContainer):
        """A valid credential for a user that no longer exists resolves to None."""
        resolver = await unit_env.get(IdentityResolver)
        session_service = await unit_env.get(SessionService)
        token = session_service.issue(make_user(user_id=404))

        assert await resolver.resolve(token) is None

    @pytest.mark.asyncio
    async def test_current_credential_is_not_reissued(self, unit_env: AsyncContainer):
        """A credential carrying the current handle resolves without reissue."""
        resolver = await unit_env.get(IdentityResolver)
        session_service = await unit_env.get(SessionService)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.create(User(email="ada@example.com", name="Ada"))
        user = await user_repo.claim_handle(user.id, Handle("ada"))

        resolution = await resolver.resolve(session_service.issue(user))

        assert resolution is not None
        assert resolution.user.id == user.id
        assert resolution.reissued_token is None

    @pytest.mark.asyncio
    async def test_stale_handle_triggers_reissue(self, unit_env: AsyncContainer):
        """When the stored handle differs from the credential, a new one is minted."""
        resolver = await unit_env.get(IdentityResolver)
        session_service = await unit_env.get(SessionService)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.create(User(email="ada@example.com"))
        stale = await user_repo.claim_handle(user.id, Handle("old-name"))
        token = session_service.issue(stale, subject="email|ada@example.com")
        await user_repo.claim_handle(user.id, Handle("new-name"))

        resolution = await resolver.resolve(token)

        assert resolution is not None
        assert resolution.user.handle == Handle("new-name")
        assert resolution.reissued_token is not None
        fresh = session_service.read(resolution.reissued_token)
        assert fresh.handle == "new-name"
        assert fresh.subject == "email|ada@example.com"

    @pytest.mark.asyncio
    async def test_user_without_handle_gets_one(self, unit_env: AsyncContainer):
        """Resolving a handle-less user assigns a handle and reissues."""
        resolver = await unit_env.get(IdentityResolver)
        session_service = await unit_env.get(SessionService)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.create(User(email="legacy@example.com"))

        resolution = await resolver.resolve(session_service.issue(user))

        assert resolution is not None
        assert resolution.user.handle is not None
        stored = await user_repo.find_by_id(UserId(user.id))
        assert stored.handle == resolution.user.handle
        assert resolution.reissued_token is not None

    @pytest.mark.asyncio
    async def test_backfilled_handle_is_stable(self, unit_env: AsyncContainer):
        """Resolving the same credential again returns the handle assigned first."""
        resolver = await unit_env.get(IdentityResolver)
        session_service = await unit_env.get(SessionService)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.create(User(email="legacy@example.com"))
        token = session_service.issue(user)

        first = await resolver.resolve(token)
        second = await resolver.resolve(token)
        refreshed = await resolver.resolve(first.reissued_token)

        assert second.user.handle == first.user.handle
        assert refreshed.user.handle == first.user.handle
        assert refreshed.reissued_token is None

    @pytest.mark.asyncio
    async def test_concurrent_backfill_agrees_on_one_handle(
        self, unit_env: AsyncContainer
    ):
        """Two requests backfilling the same user both see the stored handle."""
        session_service = await unit_env.get(SessionService)
        store = await unit_env.get(InMemoryStore)
        user_repo = YieldingUserRepository(store)
        user = await user_repo.create(User(email="legacy@example.com"))
        token = session_service.issue(user)

        def build_resolver(seed: int) -> IdentityResolver:
            allocator = HandleAllocator(user_repo, rng=random.Random(seed))
            return IdentityResolver(
                session_service, user_repo, UserService(user_repo, allocator)
            )

        first, second = await asyncio.gather(
            build_resolver(1).resolve(token), build_resolver(2).resolve(token)
        )

        stored = await user_repo.find_by_id(user.id)
        assert first.user.handle == stored.handle
        assert second.user.handle == stored.handle
        assert session_service.read(first.reissued_token).handle == str(stored.handle)
        assert session_service.read(second.reissued_token).handle == str(stored.handle)


class TestRequire:
    """Tests for require."""

    @pytest.mark.asyncio
    async def test_require_rejects_anonymous(self, unit_env: AsyncContainer):
        """require raises when nobody is signed in."""
        resolver = await unit_env.get(IdentityResolver)

        with pytest.raises(UnauthenticatedError):
            await resolver.require(None)
