"""Unit tests for HandleAllocator."""

import asyncio
import random

import pytest

from replicator.domain.error import AllocationExhaustedError, NotFoundError
from replicator.domain.model import User
from replicator.domain.service import HandleAllocator
from replicator.domain.service.handle_allocator import ADJECTIVES, NOUNS
from replicator.domain.value import Handle, UserId
from replicator.domain.value.types import HANDLE_PATTERN
from replicator.persistence.repository.inmemory import (
    InMemoryStore,
    InMemoryUserRepository,
)


@pytest.fixture
def user_repo() -> InMemoryUserRepository:
    return InMemoryUserRepository(InMemoryStore())


class TestDraw:
    """Tests for drawing generated handles."""

    def test_draw_matches_generated_shape(self, user_repo):
        """Drawn handles are adjective-noun-NNN and pass handle validation."""
        allocator = HandleAllocator(user_repo, rng=random.Random(7))

        for _ in range(50):
            handle = allocator.draw()
            adjective, noun, suffix = handle.root.split("-")
            assert adjective in ADJECTIVES
            assert noun in NOUNS
            assert 100 <= int(suffix) <= 999
            assert HANDLE_PATTERN.match(handle.root)

    def test_draw_is_deterministic_for_a_seed(self, user_repo):
        """The same seed yields the same sequence of handles."""
        first = HandleAllocator(user_repo, rng=random.Random(42))
        second = HandleAllocator(user_repo, rng=random.Random(42))

        assert [first.draw() for _ in range(5)] == [second.draw() for _ in range(5)]


class TestAllocate:
    """Tests for finding an unused handle."""

    @pytest.mark.asyncio
    async def test_allocate_skips_taken_handles(self, user_repo):
        """A handle already owned by someone is never returned."""
        taken = HandleAllocator(user_repo, rng=random.Random(3)).draw()
        owner = await user_repo.create(User(email="owner@example.com"))
        await user_repo.claim_handle(owner.id, taken)

        allocator = HandleAllocator(user_repo, rng=random.Random(3))
        handle = await allocator.allocate()

        assert handle != taken
        assert not await user_repo.handle_exists(handle)

    @pytest.mark.asyncio
    async def test_allocate_gives_up_after_max_attempts(self, user_repo):
        """When every draw collides, allocation fails after the budget."""
        allocator = HandleAllocator(user_repo, max_attempts=4)
        allocator.draw = lambda: Handle("same-handle-100")
        owner = await user_repo.create(User(email="owner@example.com"))
        await user_repo.claim_handle(owner.id, Handle("same-handle-100"))

        with pytest.raises(AllocationExhaustedError) as exc_info:
            await allocator.allocate()

        assert exc_info.value.attempts == 4


class TestAssign:
    """Tests for persisting a generated handle."""

    @pytest.mark.asyncio
    async def test_assign_persists_handle(self, user_repo):
        """The assigned handle is stored on the user."""
        user = await user_repo.create(User(email="new@example.com"))
        allocator = HandleAllocator(user_repo, rng=random.Random(11))

        updated = await allocator.assign(user.id)

        assert updated.handle is not None
        stored = await user_repo.find_by_id(user.id)
        assert stored.handle == updated.handle

    @pytest.mark.asyncio
    async def test_assign_retries_after_losing_claim(self, user_repo):
        """A claim lost to another user is retried with a fresh draw."""
        user = await user_repo.create(User(email="new@example.com"))
        allocator = HandleAllocator(user_repo, max_attempts=5)
        draws = iter([Handle("first-pick-100"), Handle("second-pick-200")])
        allocator.draw = lambda: next(draws)

        original_claim = user_repo.claim_missing_handle
        calls = []

        async def racing_claim(user_id, handle):
            calls.append(handle)
            if len(calls) == 1:
                # Another user takes the handle between the check and the claim
                rival = await user_repo.create(User(email="rival@example.com"))
                await user_repo.claim_handle(rival.id, handle)
            return await original_claim(user_id, handle)

        user_repo.claim_missing_handle = racing_claim

        updated = await allocator.assign(user.id)

        assert updated.handle == Handle("second-pick-200")
        assert calls == [Handle("first-pick-100"), Handle("second-pick-200")]

    @pytest.mark.asyncio
    async def test_concurrent_assignments_get_distinct_handles(self, user_repo):
        """Many users assigned at once never share a handle."""
        users = [
            await user_repo.create(User(email=f"user{i}@example.com"))
            for i in range(30)
        ]
        # A tiny pool forces collisions between concurrent draws
        allocator = HandleAllocator(user_repo, max_attempts=500)
        pool = [Handle(f"pool-handle-{n}") for n in range(100, 140)]
        rng = random.Random(5)
        allocator.draw = lambda: rng.choice(pool)

        assigned = await asyncio.gather(*(allocator.assign(u.id) for u in users))

        handles = [u.handle for u in assigned]
        assert len(set(handles)) == len(handles)

    @pytest.mark.asyncio
    async def test_assign_keeps_handle_set_in_between(self, user_repo):
        """A handle stored by another request first is returned, not replaced."""
        user = await user_repo.create(User(email="new@example.com"))
        allocator = HandleAllocator(user_repo, rng=random.Random(2))
        original_claim = user_repo.claim_missing_handle

        async def late_claim(user_id, handle):
            # The user picks a handle between the availability check and the claim
            await user_repo.claim_handle(user_id, Handle("chosen-name"))
            return await original_claim(user_id, handle)

        user_repo.claim_missing_handle = late_claim

        updated = await allocator.assign(user.id)

        assert updated.handle == Handle("chosen-name")
        stored = await user_repo.find_by_id(user.id)
        assert stored.handle == Handle("chosen-name")

    @pytest.mark.asyncio
    async def test_assign_unknown_user_raises(self, user_repo):
        """Assigning to a missing user fails instead of exhausting the budget."""
        allocator = HandleAllocator(user_repo)

        with pytest.raises(NotFoundError):
            await allocator.assign(UserId(999))
