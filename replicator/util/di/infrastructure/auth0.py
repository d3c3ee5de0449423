"""Auth0 infrastructure providers."""

from dishka import Scope, provide

from replicator.adapter.auth0.client import RealAuth0PasswordlessClient
from replicator.config import PLACEHOLDER, Settings
from replicator.domain.service.auth_service import IdentityProvider
from replicator.util.di.base import ProviderBase
from replicator.util.error import ConfigurationError
from replicator.util.observability import instrument_httpx


class Auth0Provider(ProviderBase):
    """Auth0 component base."""

    __mock_component__ = "auth0"


class ProdAuth0Provider(Auth0Provider):
    """Production Auth0 provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_identity_provider(self, settings: Settings) -> IdentityProvider:
        """Provide Auth0 passwordless client.

        Raises:
            ConfigurationError: If the Auth0 tenant is not configured
        """
        for field in ("domain", "client_id", "client_secret"):
            if getattr(settings.auth0, field) in ("", PLACEHOLDER):
                raise ConfigurationError(f"AUTH0__{field.upper()} must be configured")

        instrument_httpx()

        return RealAuth0PasswordlessClient(
            domain=settings.auth0.domain,
            client_id=settings.auth0.client_id,
            client_secret=settings.auth0.client_secret,
            connection=settings.auth0.connection,
            timeout=settings.auth0.timeout,
        )
