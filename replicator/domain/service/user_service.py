"""User domain service."""

import logfire

from replicator.domain.error import HandleTakenError, NotFoundError
from replicator.domain.model import User
from replicator.domain.repository import UserRepository
from replicator.domain.value import UserId, VerifiedProfile

from .base import Service
from .handle_allocator import HandleAllocator


def normalize_email(email: str) -> str:
    """Canonical form used as the account key."""
    return email.strip().lower()


class UserService(Service):
    """Domain service for user operations."""

    def __init__(
        self,
        user_repository: UserRepository,
        handle_allocator: HandleAllocator,
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            handle_allocator: Handle allocation service
        """
        self.user_repository = user_repository
        self.handle_allocator = handle_allocator

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=user_id):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=user_id)
                raise NotFoundError("User", str(user_id))
            return user

    async def get_user_by_email(self, email: str) -> User | None:
        """Get user by email (case-insensitive)."""
        return await self.user_repository.find_by_email(normalize_email(email))

    async def ensure_handle(self, user: User) -> User:
        """Give a user a generated handle if they have none.

        Args:
            user: User to check

        Returns:
            The user, with a handle

        Raises:
            AllocationExhaustedError: If no handle could be generated
        """
        if user.handle is not None:
            return user
        return await self.handle_allocator.assign(user.stored_id)

    async def register_verified(self, profile: VerifiedProfile) -> User:
        """Find or create the user behind a verified provider profile.

        New users get a display name and a generated handle. Existing users
        have a missing name or handle backfilled. Both get a last-login bump.

        Args:
            profile: Identity asserted by the provider

        Returns:
            The up-to-date user
        """
        email = normalize_email(profile.email)
        preferred_name = profile.name or email

        with logfire.span("user_service.register_verified", email=email):
            user = await self.user_repository.find_by_email(email)
            if user is None:
                user = await self.user_repository.create(
                    User(email=email, name=preferred_name)
                )
                logfire.info("User created", user_id=user.id, email=email)
            user_id = user.stored_id

            if not user.name:
                user = (
                    await self.user_repository.update_name(user_id, preferred_name)
                    or user
                )

            user = await self.ensure_handle(user)

            user = (
                await self.user_repository.touch_last_login(user_id)
                or user
            )
            logfire.info(
                "User logged in", user_id=user.id, handle=str(user.handle)
            )
            return user

    async def change_handle(self, user: User, candidate: str | None) -> User:
        """Set a user-chosen handle.

        Setting the handle the user already owns succeeds without a write.

        Args:
            user: User changing their handle
            candidate: Requested handle, before normalization

        Returns:
            The updated user

        Raises:
            InvalidHandleFormatError: If the candidate is empty or malformed
            HandleTakenError: If another user owns the handle
        """
        handle = self.handle_allocator.validate_format(candidate)
        user_id = user.stored_id

        with logfire.span(
            "user_service.change_handle", user_id=user_id, handle=handle.root
        ):
            if user.handle == handle:
                logfire.info("Handle unchanged", user_id=user_id)
                return user

            owner = await self.user_repository.find_by_handle(handle)
            if owner is not None and owner.id != user_id:
                logfire.warn("Handle taken", user_id=user_id, handle=handle.root)
                raise HandleTakenError(handle.root)

            updated = await self.user_repository.claim_handle(user_id, handle)
            if updated is None:
                # Someone claimed it between the lookup and the write
                logfire.warn("Handle taken", user_id=user_id, handle=handle.root)
                raise HandleTakenError(handle.root)

            logfire.info(
                "Handle changed",
                user_id=user_id,
                old_handle=str(user.handle) if user.handle else None,
                handle=handle.root,
            )
            return updated
