"""Get profile use case."""

from pydantic import BaseModel

from replicator.domain.service import IdentityResolver


class GetProfileRequest(BaseModel):
    """Get profile request."""

    token: str | None = None


class Profile(BaseModel):
    """Editable profile fields."""

    email: str
    username: str | None
    name: str | None


class GetProfileResponse(BaseModel):
    """Get profile response."""

    profile: Profile
    reissued_token: str | None = None


class GetProfileUseCase:
    """Use case for reading the caller's profile."""

    def __init__(self, identity_resolver: IdentityResolver) -> None:
        """Initialize get profile use case.

        Args:
            identity_resolver: Identity resolution service
        """
        self.identity_resolver = identity_resolver

    async def execute(self, request: GetProfileRequest) -> GetProfileResponse:
        """Return the caller's profile.

        Raises:
            UnauthenticatedError: If the caller is anonymous
        """
        resolution = await self.identity_resolver.require(request.token)
        user = resolution.user

        return GetProfileResponse(
            profile=Profile(
                email=user.email,
                username=str(user.handle) if user.handle else None,
                name=user.name,
            ),
            reissued_token=resolution.reissued_token,
        )
