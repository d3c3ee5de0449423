"""In-memory user repository for testing."""

from datetime import datetime
from typing import Optional, Sequence

from replicator.domain.model.user import User
from replicator.domain.repository.user import UserRepository
from replicator.domain.value import UserId
from replicator.domain.value.types import Handle

from .store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    @property
    def _users(self) -> dict[int, User]:
        return self._store.users

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find several users at once."""
        return [self._users[uid] for uid in set(user_ids) if uid in self._users]

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email."""
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    async def find_by_handle(self, handle: Handle) -> Optional[User]:
        """Find a user by handle."""
        for user in self._users.values():
            if user.handle == handle:
                return user
        return None

    async def handle_exists(self, handle: Handle) -> bool:
        """Check whether any user owns a handle."""
        return any(user.handle == handle for user in self._users.values())

    async def create(self, user: User) -> User:
        """Insert a user, returning the existing one on an email clash."""
        for existing in self._users.values():
            if existing.email == user.email:
                return existing

        user_id = UserId(self._store.next_id("users"))
        stored = user.model_copy(update={"id": user_id, "created_at": datetime.now()})
        self._users[user_id] = stored
        return stored

    async def claim_handle(self, user_id: UserId, handle: Handle) -> Optional[User]:
        """Assign a handle unless another user owns it."""
        user = self._users.get(user_id)
        if user is None:
            return None
        for other in self._users.values():
            if other.handle == handle and other.id != user_id:
                return None

        updated = user.model_copy(update={"handle": handle})
        self._users[user_id] = updated
        return updated

    async def claim_missing_handle(
        self, user_id: UserId, handle: Handle
    ) -> Optional[User]:
        """Assign a handle only while the user has none."""
        user = self._users.get(user_id)
        if user is None or user.handle is not None:
            return None
        return await self.claim_handle(user_id, handle)

    async def update_name(self, user_id: UserId, name: str) -> Optional[User]:
        """Set a user's display name."""
        user = self._users.get(user_id)
        if user is None:
            return None
        updated = user.model_copy(update={"name": name})
        self._users[user_id] = updated
        return updated

    async def touch_last_login(self, user_id: UserId) -> Optional[User]:
        """Record a successful login."""
        user = self._users.get(user_id)
        if user is None:
            return None
        updated = user.model_copy(update={"last_login_at": datetime.now()})
        self._users[user_id] = updated
        return updated

    async def count(self) -> int:
        """Count all users."""
        return len(self._users)
