"""Complete login use case."""

import logfire
from pydantic import BaseModel

from replicator.application.usecase.views import UserInfo
from replicator.domain.error import ValidationError
from replicator.domain.service import AuthService, SessionService, UserService


class CompleteLoginRequest(BaseModel):
    """Complete login request."""

    email: str | None = None
    code: str | None = None


class CompleteLoginResponse(BaseModel):
    """Complete login response."""

    success: bool = True
    token: str
    user: UserInfo


class CompleteLoginUseCase:
    """Use case for exchanging a one-time code for a session."""

    def __init__(
        self,
        auth_service: AuthService,
        user_service: UserService,
        session_service: SessionService,
    ) -> None:
        """Initialize complete login use case.

        Args:
            auth_service: Authentication domain service
            user_service: User domain service
            session_service: Session credential service
        """
        self.auth_service = auth_service
        self.user_service = user_service
        self.session_service = session_service

    async def execute(self, request: CompleteLoginRequest) -> CompleteLoginResponse:
        """Execute login completion.

        Steps:
        1. Exchange the code with the identity provider
        2. Find or create the user for the verified email
        3. Issue a session credential

        Raises:
            ValidationError: If email or code is missing
            InvalidCodeError: If the provider rejected the code
            ProviderError: If the provider was unreachable
        """
        email = (request.email or "").strip()
        code = (request.code or "").strip()
        if not email or "@" not in email or not code:
            raise ValidationError("Email and verification code are required.")

        profile = await self.auth_service.complete_login(email, code)
        user = await self.user_service.register_verified(profile)
        token = self.session_service.issue(user, subject=profile.subject)

        logfire.info("Login completed", user_id=user.id, handle=str(user.handle))

        return CompleteLoginResponse(token=token, user=UserInfo.from_user(user))
