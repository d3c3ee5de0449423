"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from replicator.domain.model.user import User
from replicator.domain.value import UserId
from replicator.domain.value.types import Handle


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find several users at once (batch query).

        Args:
            user_ids: User IDs to load; unknown IDs are skipped

        Returns:
            The users that exist, in no particular order
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their (normalized) email.

        Args:
            email: The user's email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_handle(self, handle: Handle) -> Optional[User]:
        """Find a user by their handle.

        Args:
            handle: The user's handle

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def handle_exists(self, handle: Handle) -> bool:
        """Check whether any user owns a handle.

        Args:
            handle: Handle to check

        Returns:
            True if the handle is taken
        """
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Insert a new user.

        If a concurrent insert already created a user for the same email,
        that existing user is returned instead.

        Args:
            user: The user to insert (id is ignored)

        Returns:
            The stored user with its assigned id
        """
        pass

    @abstractmethod
    async def claim_handle(self, user_id: UserId, handle: Handle) -> Optional[User]:
        """Assign a handle, relying on the unique constraint for ownership.

        A conflict must not abort the surrounding unit of work.

        Args:
            user_id: The user receiving the handle
            handle: The handle to claim

        Returns:
            The updated user, or None if another user owns the handle
        """
        pass

    @abstractmethod
    async def claim_missing_handle(
        self, user_id: UserId, handle: Handle
    ) -> Optional[User]:
        """Assign a handle only if the user still has none.

        Same conflict rules as ``claim_handle``. A handle written by a
        concurrent request is never overwritten.

        Args:
            user_id: The user receiving the handle
            handle: The handle to claim

        Returns:
            The updated user, or None if the user already has a handle or
            another user owns this one
        """
        pass

    @abstractmethod
    async def update_name(self, user_id: UserId, name: str) -> Optional[User]:
        """Set a user's display name.

        Args:
            user_id: The user's unique identifier
            name: New display name

        Returns:
            The updated user, or None if the user does not exist
        """
        pass

    @abstractmethod
    async def touch_last_login(self, user_id: UserId) -> Optional[User]:
        """Record a successful login.

        Args:
            user_id: The user's unique identifier

        Returns:
            The updated user, or None if the user does not exist
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all users."""
        pass
