"""Auth0 passwordless client implementation.

Implements the email one-time-code flow: the provider emails a code, and
the code is exchanged through the passwordless OTP grant.
"""

from typing import Any

import httpx
import jwt
import logfire

from replicator.adapter.error import ProviderError
from replicator.domain.error import InvalidCodeError
from replicator.domain.service.auth_service import IdentityProvider
from replicator.domain.value import VerifiedProfile

OTP_GRANT_TYPE = "http://auth0.com/oauth/grant-type/passwordless/otp"
OTP_SCOPE = "openid profile email"


class Auth0PasswordlessClient(IdentityProvider):
    """Base class for Auth0 passwordless clients.

    Provides type distinction for dependency injection.
    """

    pass


class RealAuth0PasswordlessClient(Auth0PasswordlessClient):
    """Auth0 passwordless client over HTTPS.

    Calls are never retried; a failed call surfaces to the caller.
    """

    def __init__(
        self,
        domain: str,
        client_id: str,
        client_secret: str,
        connection: str = "email",
        timeout: float = 10.0,
    ) -> None:
        """Initialize Auth0 client.

        Args:
            domain: Auth0 tenant domain
            client_id: Application client ID
            client_secret: Application client secret
            connection: Passwordless connection name
            timeout: Seconds per outbound request
        """
        self.client_id = client_id
        self.client_secret = client_secret
        self.connection = connection
        self.timeout = timeout

        base_url = f"https://{domain}"
        self.start_url = f"{base_url}/passwordless/start"
        self.token_url = f"{base_url}/oauth/token"
        self.user_info_url = f"{base_url}/userinfo"

    async def start_verification(self, email: str) -> None:
        """Ask Auth0 to email a one-time code.

        Raises:
            ProviderError: If Auth0 refused or was unreachable
        """
        payload = {
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "connection": self.connection,
            "email": email,
            "send": "code",
        }

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.start_url, json=payload, timeout=self.timeout
                )
        except httpx.HTTPError as e:
            logfire.error("Auth0 passwordless start HTTP error", error=str(e))
            raise ProviderError(f"HTTP error starting verification: {e}")

        if not response.is_success:
            logfire.error(
                "Auth0 passwordless start failed",
                status_code=response.status_code,
                error=response.text,
            )
            raise ProviderError(
                "Failed to send login email. Please try again.",
                status_code=response.status_code,
            )

        logfire.info("Auth0 verification code sent", email=email)

    async def exchange_code(self, email: str, code: str) -> VerifiedProfile:
        """Exchange a one-time code for the verified profile.

        Raises:
            InvalidCodeError: If Auth0 rejected the code
            ProviderError: If Auth0 was unreachable or the profile lookup failed
        """
        tokens = await self._exchange_code_for_tokens(email, code)

        access_token = tokens.get("access_token")
        if access_token:
            claims = await self._get_user_info(access_token)
        else:
            claims = self._decode_id_token(tokens.get("id_token"))

        profile = self._to_profile(claims, submitted_email=email)
        logfire.info(
            "Auth0 code exchange completed",
            email=profile.email,
            subject=profile.subject,
        )
        return profile

    async def _exchange_code_for_tokens(self, email: str, code: str) -> dict[str, Any]:
        """Run the passwordless OTP grant.

        Raises:
            InvalidCodeError: If Auth0 answered with an error status
            ProviderError: If Auth0 was unreachable
        """
        payload = {
            "grant_type": OTP_GRANT_TYPE,
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "otp": code,
            "realm": self.connection,
            "username": email,
            "scope": OTP_SCOPE,
        }

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.token_url, json=payload, timeout=self.timeout
                )
        except httpx.HTTPError as e:
            logfire.error("Auth0 token exchange HTTP error", error=str(e))
            raise ProviderError(f"HTTP error during token exchange: {e}")

        if not response.is_success:
            logfire.warn(
                "Auth0 rejected verification code",
                status_code=response.status_code,
                error=response.text,
            )
            raise InvalidCodeError()

        return response.json()

    async def _get_user_info(self, access_token: str) -> dict[str, Any]:
        """Fetch the user's claims with an access token.

        Raises:
            ProviderError: If the request fails
        """
        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(
                    self.user_info_url,
                    headers={"Authorization": f"Bearer {access_token}"},
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            logfire.error("Auth0 user info HTTP error", error=str(e))
            raise ProviderError(f"HTTP error fetching user info: {e}")

        if not response.is_success:
            logfire.error(
                "Auth0 user info request failed",
                status_code=response.status_code,
                error=response.text,
            )
            raise ProviderError(
                "User info request failed", status_code=response.status_code
            )

        return response.json()

    @staticmethod
    def _decode_id_token(id_token: str | None) -> dict[str, Any]:
        """Read claims from an ID token received directly from Auth0 over TLS."""
        if not id_token:
            return {}
        try:
            return jwt.decode(id_token, options={"verify_signature": False})
        except jwt.InvalidTokenError as e:
            logfire.warn("Unreadable Auth0 ID token", error=str(e))
            return {}

    @staticmethod
    def _to_profile(claims: dict[str, Any], submitted_email: str) -> VerifiedProfile:
        """Build a profile, falling back to the submitted email when absent."""
        email = claims.get("email") or submitted_email
        name = claims.get("name") or claims.get("nickname") or email
        return VerifiedProfile(email=email, name=name, subject=claims.get("sub"))


class MockAuth0PasswordlessClient(Auth0PasswordlessClient):
    """Mock Auth0 client for testing.

    Accepts ``MOCK_CODE`` for any address and rejects every other code.
    Sent verifications are recorded in ``sent``.
    """

    MOCK_CODE = "123456"

    def __init__(self) -> None:
        """Initialize mock client without real Auth0 configuration."""
        self.sent: list[str] = []

    async def start_verification(self, email: str) -> None:
        """Record the address instead of sending an email."""
        self.sent.append(email)

    async def exchange_code(self, email: str, code: str) -> VerifiedProfile:
        """Return a deterministic profile for the mock code.

        Raises:
            InvalidCodeError: If the code is not ``MOCK_CODE``
        """
        if code != self.MOCK_CODE:
            raise InvalidCodeError()
        return VerifiedProfile(
            email=email,
            name=email.split("@")[0],
            subject=f"email|{email}",
        )
