"""Update handle use case."""

from pydantic import BaseModel

from replicator.application.usecase.base import BaseUseCase
from replicator.application.usecase.user.get_profile import Profile
from replicator.domain.service import IdentityResolver, SessionService, UserService


class UpdateHandleRequest(BaseModel):
    """Update handle request."""

    token: str | None = None
    username: str | None = None


class UpdateHandleResponse(BaseModel):
    """Update handle response.

    ``token`` always carries the new handle, including when it was unchanged.
    """

    success: bool = True
    profile: Profile
    token: str


class UpdateHandleUseCase(BaseUseCase):
    """Use case for choosing a handle."""

    def __init__(
        self,
        identity_resolver: IdentityResolver,
        user_service: UserService,
        session_service: SessionService,
    ) -> None:
        """Initialize update handle use case.

        Args:
            identity_resolver: Identity resolution service
            user_service: User domain service
            session_service: Session credential service
        """
        self.identity_resolver = identity_resolver
        self.user_service = user_service
        self.session_service = session_service

    async def execute(self, request: UpdateHandleRequest) -> UpdateHandleResponse:
        """Set the caller's handle and issue a matching credential.

        Raises:
            UnauthenticatedError: If the caller is anonymous
            InvalidHandleFormatError: If the handle is empty or malformed
            HandleTakenError: If another user owns the handle
        """
        resolution = await self.identity_resolver.require(request.token)
        user = await self.user_service.change_handle(resolution.user, request.username)
        token = self.session_service.issue(user, subject=resolution.payload.subject)

        return UpdateHandleResponse(
            profile=Profile(
                email=user.email,
                username=str(user.handle) if user.handle else None,
                name=user.name,
            ),
            token=token,
        )
