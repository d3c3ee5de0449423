"""Handle allocation domain service.

Generated handles look like ``lucid-comet-417``: an adjective, a noun and a
three digit suffix drawn at random.
"""

import random

import logfire

from replicator.domain.error import AllocationExhaustedError, NotFoundError
from replicator.domain.model import User
from replicator.domain.repository import UserRepository
from replicator.domain.value import Handle, UserId

from .base import Service

ADJECTIVES = (
    "curious",
    "bold",
    "clever",
    "lively",
    "radiant",
    "vivid",
    "brisk",
    "lucid",
    "noble",
    "brave",
)

NOUNS = (
    "aurora",
    "comet",
    "nebula",
    "quark",
    "vector",
    "cipher",
    "vertex",
    "lyric",
    "signal",
    "riddle",
)

SUFFIX_MIN = 100
SUFFIX_MAX = 999

DEFAULT_MAX_ATTEMPTS = 25


class HandleAllocator(Service):
    """Draws, validates and assigns unique handles."""

    def __init__(
        self,
        user_repository: UserRepository,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        rng: random.Random | None = None,
    ) -> None:
        """Initialize handle allocator.

        Args:
            user_repository: User repository
            max_attempts: Draws attempted before giving up
            rng: Random source (seed it for deterministic tests)
        """
        self.user_repository = user_repository
        self.max_attempts = max_attempts
        self.rng = rng or random.Random()

    def draw(self) -> Handle:
        """Draw a random handle without checking availability."""
        adjective = self.rng.choice(ADJECTIVES)
        noun = self.rng.choice(NOUNS)
        suffix = self.rng.randint(SUFFIX_MIN, SUFFIX_MAX)
        return Handle(f"{adjective}-{noun}-{suffix}")

    def validate_format(self, candidate: str | None) -> Handle:
        """Normalize and validate a user-chosen handle.

        Raises:
            InvalidHandleFormatError: If the candidate is empty or malformed
        """
        return Handle.parse(candidate)

    async def allocate(self) -> Handle:
        """Find a generated handle that no user currently owns.

        The result is not reserved; use ``assign`` to persist one.

        Raises:
            AllocationExhaustedError: If every draw collided
        """
        with logfire.span("handle_allocator.allocate"):
            for attempt in range(1, self.max_attempts + 1):
                candidate = self.draw()
                if not await self.user_repository.handle_exists(candidate):
                    logfire.info(
                        "Handle allocated", handle=candidate.root, attempts=attempt
                    )
                    return candidate

            logfire.error("Handle allocation exhausted", attempts=self.max_attempts)
            raise AllocationExhaustedError(self.max_attempts)

    async def assign(self, user_id: UserId) -> User:
        """Persist a freshly generated handle for a user who has none.

        A draw that loses a race for the unique index is retried within the
        same attempt budget. If a concurrent request gave the user a handle
        first, that handle is kept and returned.

        Raises:
            NotFoundError: If the user does not exist
            AllocationExhaustedError: If no draw could be claimed
        """
        with logfire.span("handle_allocator.assign", user_id=user_id):
            for attempt in range(1, self.max_attempts + 1):
                candidate = self.draw()
                if await self.user_repository.handle_exists(candidate):
                    continue

                claimed = await self.user_repository.claim_missing_handle(
                    user_id, candidate
                )
                if claimed is not None:
                    logfire.info(
                        "Handle assigned",
                        user_id=user_id,
                        handle=candidate.root,
                        attempts=attempt,
                    )
                    return claimed

                current = await self.user_repository.find_by_id(user_id)
                if current is None:
                    raise NotFoundError("User", str(user_id))
                if current.handle is not None:
                    logfire.info(
                        "Handle already assigned",
                        user_id=user_id,
                        handle=current.handle.root,
                    )
                    return current

                logfire.warn(
                    "Lost handle race, drawing again",
                    user_id=user_id,
                    handle=candidate.root,
                )

            logfire.error(
                "Handle assignment exhausted",
                user_id=user_id,
                attempts=self.max_attempts,
            )
            raise AllocationExhaustedError(self.max_attempts)
