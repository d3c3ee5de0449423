"""Identity resolution domain service."""

from dataclasses import dataclass
from typing import Optional

import logfire

from replicator.domain.error import UnauthenticatedError
from replicator.domain.model import User
from replicator.domain.repository import UserRepository
from replicator.domain.value import UserId
from replicator.util.jwt import TokenPayload

from .base import Service
from .session_service import SessionService
from .user_service import UserService


@dataclass(frozen=True)
class Resolution:
    """The user behind a credential.

    ``reissued_token`` is set when the credential carried a stale handle and
    must be replaced on the client.
    """

    user: User
    payload: TokenPayload
    reissued_token: Optional[str] = None


class IdentityResolver(Service):
    """Turns a session credential into a current user."""

    def __init__(
        self,
        session_service: SessionService,
        user_repository: UserRepository,
        user_service: UserService,
    ) -> None:
        """Initialize identity resolver.

        Args:
            session_service: Session credential service
            user_repository: User repository
            user_service: User domain service
        """
        self.session_service = session_service
        self.user_repository = user_repository
        self.user_service = user_service

    async def resolve(self, token: str | None) -> Resolution | None:
        """Resolve a credential to its user.

        Unusable credentials and deleted users resolve to None rather than
        raising. A user without a handle gets one before this returns.

        Args:
            token: Session credential (optional)

        Returns:
            Resolution, or None for anonymous callers
        """
        payload = self.session_service.read(token)
        if payload is None:
            return None

        with logfire.span("identity_resolver.resolve", user_id=payload.user_id):
            user = await self.user_repository.find_by_id(UserId(payload.user_id))
            if user is None:
                logfire.warn("Session for unknown user", user_id=payload.user_id)
                return None

            user = await self.user_service.ensure_handle(user)

            reissued = None
            if payload.handle != str(user.handle):
                reissued = self.session_service.issue(user, subject=payload.subject)
                logfire.info(
                    "Session reissued with current handle",
                    user_id=user.id,
                    stale_handle=payload.handle,
                    handle=str(user.handle),
                )

            return Resolution(user=user, payload=payload, reissued_token=reissued)

    async def require(self, token: str | None) -> Resolution:
        """Resolve a credential, rejecting anonymous callers.

        Raises:
            UnauthenticatedError: If the credential does not resolve to a user
        """
        resolution = await self.resolve(token)
        if resolution is None:
            raise UnauthenticatedError()
        return resolution
