"""Domain layer DI providers."""

from dishka import Scope, provide

from replicator.config import AuthSettings, Settings
from replicator.domain.repository import (
    InteractionRepository,
    MemeRepository,
    UserRepository,
)
from replicator.domain.service import (
    AuthService,
    HandleAllocator,
    IdentityProvider,
    IdentityResolver,
    InteractionService,
    MemeService,
    ScoreService,
    SessionService,
    UserService,
)
from replicator.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_auth_service(self, identity_provider: IdentityProvider) -> AuthService:
        """Provide passwordless authentication domain service."""
        return AuthService(identity_provider=identity_provider)

    @provide(scope=Scope.APP)
    def get_session_service(self, auth_settings: AuthSettings) -> SessionService:
        """Provide session credential service (stateless, shared)."""
        return SessionService(auth_settings=auth_settings)

    @provide
    def get_handle_allocator(
        self, user_repository: UserRepository, settings: Settings
    ) -> HandleAllocator:
        """Provide handle allocation service."""
        return HandleAllocator(
            user_repository=user_repository,
            max_attempts=settings.handles.max_attempts,
        )

    @provide
    def get_user_service(
        self, user_repository: UserRepository, handle_allocator: HandleAllocator
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository, handle_allocator=handle_allocator
        )

    @provide
    def get_identity_resolver(
        self,
        session_service: SessionService,
        user_repository: UserRepository,
        user_service: UserService,
    ) -> IdentityResolver:
        """Provide identity resolution service."""
        return IdentityResolver(
            session_service=session_service,
            user_repository=user_repository,
            user_service=user_service,
        )

    @provide
    def get_score_service(
        self,
        meme_repository: MemeRepository,
        interaction_repository: InteractionRepository,
    ) -> ScoreService:
        """Provide score domain service."""
        return ScoreService(
            meme_repository=meme_repository,
            interaction_repository=interaction_repository,
        )

    @provide
    def get_interaction_service(
        self,
        interaction_repository: InteractionRepository,
        meme_repository: MemeRepository,
        score_service: ScoreService,
    ) -> InteractionService:
        """Provide interaction domain service."""
        return InteractionService(
            interaction_repository=interaction_repository,
            meme_repository=meme_repository,
            score_service=score_service,
        )

    @provide
    def get_meme_service(
        self,
        meme_repository: MemeRepository,
        interaction_repository: InteractionRepository,
        user_repository: UserRepository,
    ) -> MemeService:
        """Provide meme domain service."""
        return MemeService(
            meme_repository=meme_repository,
            interaction_repository=interaction_repository,
            user_repository=user_repository,
        )
