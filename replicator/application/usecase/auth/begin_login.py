"""Begin login use case."""

from pydantic import BaseModel

from replicator.domain.error import ValidationError
from replicator.domain.service import AuthService


class BeginLoginRequest(BaseModel):
    """Begin login request."""

    email: str | None = None


class BeginLoginResponse(BaseModel):
    """Begin login response."""

    success: bool = True
    message: str = "Verification code sent. Check your email."


class BeginLoginUseCase:
    """Use case for requesting a one-time login code."""

    def __init__(self, auth_service: AuthService) -> None:
        """Initialize begin login use case.

        Args:
            auth_service: Authentication domain service
        """
        self.auth_service = auth_service

    async def execute(self, request: BeginLoginRequest) -> BeginLoginResponse:
        """Ask the identity provider to email a code.

        Raises:
            ValidationError: If the email is missing or malformed
            ProviderError: If the provider refused or was unreachable
        """
        email = (request.email or "").strip()
        if not email or "@" not in email:
            raise ValidationError("Valid email required")

        await self.auth_service.begin_login(email)
        return BeginLoginResponse()
