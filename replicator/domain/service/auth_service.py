"""Authentication domain service."""

import logfire

from replicator.domain.value import VerifiedProfile

from .base import Service


class IdentityProvider:
    """Email one-time-code identity provider interface."""

    async def start_verification(self, email: str) -> None:
        """Ask the provider to send a one-time code to an email address.

        Args:
            email: Address to verify

        Raises:
            ProviderError: If the provider could not be reached or refused
        """
        raise NotImplementedError

    async def exchange_code(self, email: str, code: str) -> VerifiedProfile:
        """Exchange a one-time code for the verified identity.

        Args:
            email: Address the code was sent to
            code: One-time code entered by the user

        Returns:
            Verified profile

        Raises:
            InvalidCodeError: If the provider rejected the code
            ProviderError: If the provider could not be reached
        """
        raise NotImplementedError


class AuthService(Service):
    """Domain service for passwordless authentication."""

    def __init__(self, identity_provider: IdentityProvider) -> None:
        """Initialize auth service.

        Args:
            identity_provider: Identity provider implementation
        """
        self.identity_provider = identity_provider

    async def begin_login(self, email: str) -> None:
        """Start a login by having the provider email a code."""
        with logfire.span("auth_service.begin_login", email=email):
            await self.identity_provider.start_verification(email)
            logfire.info("Verification code requested", email=email)

    async def complete_login(self, email: str, code: str) -> VerifiedProfile:
        """Finish a login by exchanging the code for a verified profile."""
        with logfire.span("auth_service.complete_login", email=email):
            profile = await self.identity_provider.exchange_code(email, code)
            logfire.info(
                "Verification code accepted", email=profile.email, subject=profile.subject
            )
            return profile
