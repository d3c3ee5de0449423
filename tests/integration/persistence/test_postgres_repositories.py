"""Integration tests for the PostgreSQL repositories.

Requires a migrated database at DATABASE__URL. Data written here is
committed, so every test works with fresh, unique rows.
"""

from uuid import uuid4

import pytest

from replicator.domain.model import Interaction, Meme, User
from replicator.domain.repository import (
    InteractionRepository,
    MemeRepository,
    UserRepository,
)
from replicator.domain.value import Handle, InteractionType
from tests.harness import create_env_fixture

# Integration test fixture - real persistence
integration_env = create_env_fixture(unmock={"persistence"})

pytestmark = pytest.mark.integration


def _unique(prefix: str) -> str:
    return f"{prefix}-{uuid4().hex[:8]}"


class TestUserRepositoryIntegration:
    """Integration tests for PostgresUserRepository."""

    @pytest.mark.asyncio
    async def test_create_is_idempotent_per_email(self, integration_env):
        """A second insert for the same email returns the first row."""
        user_repo = await integration_env.get(UserRepository)
        email = f"{_unique('user')}@example.com"

        first = await user_repo.create(User(email=email, name="First"))
        second = await user_repo.create(User(email=email, name="Second"))

        assert first.id is not None
        assert second.id == first.id
        assert second.name == "First"

    @pytest.mark.asyncio
    async def test_claim_handle_conflict_keeps_session_usable(self, integration_env):
        """Losing a handle claim returns None and the session keeps working."""
        user_repo = await integration_env.get(UserRepository)
        owner = await user_repo.create(User(email=f"{_unique('o')}@example.com"))
        other = await user_repo.create(User(email=f"{_unique('x')}@example.com"))
        handle = Handle(_unique("claim"))

        assert await user_repo.claim_handle(owner.id, handle) is not None
        assert await user_repo.claim_handle(other.id, handle) is None

        assert await user_repo.handle_exists(handle)
        found = await user_repo.find_by_handle(handle)
        assert found.id == owner.id
        touched = await user_repo.touch_last_login(other.id)
        assert touched.last_login_at is not None

    @pytest.mark.asyncio
    async def test_claim_missing_handle_never_overwrites(self, integration_env):
        """The backfill claim only writes while the handle column is NULL."""
        user_repo = await integration_env.get(UserRepository)
        user = await user_repo.create(User(email=f"{_unique('b')}@example.com"))
        first = Handle(_unique("first"))

        claimed = await user_repo.claim_missing_handle(user.id, first)
        assert claimed.handle == first
        assert await user_repo.claim_missing_handle(user.id, Handle(_unique("next"))) is None

        stored = await user_repo.find_by_id(user.id)
        assert stored.handle == first


class TestInteractionLedgerIntegration:
    """Integration tests for memes and interactions together."""

    @pytest.mark.asyncio
    async def test_duplicate_interaction_is_ignored(self, integration_env):
        """The unique (meme, user, type) constraint turns repeats into None."""
        user_repo = await integration_env.get(UserRepository)
        meme_repo = await integration_env.get(MemeRepository)
        interaction_repo = await integration_env.get(InteractionRepository)
        user = await user_repo.create(User(email=f"{_unique('u')}@example.com"))
        meme = await meme_repo.create(Meme(content="Ledger", user_id=user.id))
        interaction = Interaction(
            meme_id=meme.id, user_id=user.id, type=InteractionType.PRAISE
        )

        stored = await interaction_repo.add(interaction)
        repeated = await interaction_repo.add(interaction)

        assert stored is not None
        assert repeated is None
        assert len(await interaction_repo.find_by_meme(meme.id)) == 1

    @pytest.mark.asyncio
    async def test_apply_delta_is_relative(self, integration_env):
        """Score updates add to the stored value."""
        meme_repo = await integration_env.get(MemeRepository)
        meme = await meme_repo.create(Meme(content="Delta"))

        assert meme.score == 100
        assert await meme_repo.apply_delta(meme.id, 10) == 110
        assert await meme_repo.apply_delta(meme.id, -15) == 95
        assert (await meme_repo.find_by_id(meme.id)).score == 95
