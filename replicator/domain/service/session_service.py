"""Session credential domain service."""

import logfire

from replicator.config import AuthSettings
from replicator.domain.model import User
from replicator.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class SessionService(Service):
    """Issues and reads signed, stateless session credentials."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize session service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    @property
    def max_age_seconds(self) -> int:
        """Credential lifetime, for cookie Max-Age."""
        return self.auth_settings.session_days * 24 * 60 * 60

    def issue(self, user: User, subject: str | None = None) -> str:
        """Mint a credential carrying the user's current identity.

        Args:
            user: Authenticated user
            subject: Identity provider subject, if known

        Returns:
            Signed token
        """
        user_id = user.stored_id
        handle = str(user.handle) if user.handle else None
        with logfire.span("session_service.issue", user_id=user_id, handle=handle):
            token = create_token(
                user_id=user_id,
                email=user.email,
                name=user.name,
                handle=handle,
                subject=subject,
                settings=self.auth_settings,
            )
            logfire.info("Session issued", user_id=user_id, handle=handle)
            return token

    def read(self, token: str | None) -> TokenPayload | None:
        """Decode a credential without raising.

        Missing, malformed, forged and expired credentials all read as None.

        Args:
            token: Signed token (optional)

        Returns:
            Token payload if valid, otherwise None
        """
        if not token:
            return None

        try:
            return verify_token(token, self.auth_settings)
        except JWTError as e:
            logfire.debug(
                "Session rejected, treating as unauthenticated", error=str(e)
            )
            return None
