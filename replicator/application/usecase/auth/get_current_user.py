"""Get current user use case."""

from pydantic import BaseModel

from replicator.application.usecase.views import UserInfo
from replicator.domain.service import IdentityResolver


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str | None = None


class GetCurrentUserResponse(BaseModel):
    """Get current user response. ``user`` is None for anonymous callers."""

    user: UserInfo | None
    reissued_token: str | None = None


class GetCurrentUserUseCase:
    """Use case for identifying the caller."""

    def __init__(self, identity_resolver: IdentityResolver) -> None:
        """Initialize get current user use case.

        Args:
            identity_resolver: Identity resolution service
        """
        self.identity_resolver = identity_resolver

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Resolve the caller, never failing on a bad credential."""
        resolution = await self.identity_resolver.resolve(request.token)
        if resolution is None:
            return GetCurrentUserResponse(user=None)

        return GetCurrentUserResponse(
            user=UserInfo.from_user(resolution.user),
            reissued_token=resolution.reissued_token,
        )
