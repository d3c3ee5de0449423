"""Configuration providers. Never mocked; tests read the same environment."""

from dishka import Scope, provide

from replicator.config import PLACEHOLDER, AuthSettings, Settings
from replicator.util.di.base import ProviderBase
from replicator.util.error import ConfigurationError


class ProdConfigProvider(ProviderBase):
    """Loads settings once per process from the environment and ``.env``."""

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide session settings.

        Raises:
            ConfigurationError: If a deployed environment still signs
                sessions with the placeholder secret
        """
        if settings.environment in ("staging", "production") and (
            settings.auth.jwt_secret == PLACEHOLDER
        ):
            raise ConfigurationError(
                f"AUTH__JWT_SECRET must be set in {settings.environment}"
            )
        return settings.auth
