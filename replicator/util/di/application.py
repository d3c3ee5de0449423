"""Application layer DI providers."""

from dishka import Scope, provide

from replicator.application.usecase.auth import (
    BeginLoginUseCase,
    CompleteLoginUseCase,
    GetCurrentUserUseCase,
)
from replicator.application.usecase.interaction import CreateInteractionUseCase
from replicator.application.usecase.meme import CreateMemeUseCase, ListMemesUseCase
from replicator.application.usecase.user import (
    GetProfileUseCase,
    SuggestHandleUseCase,
    UpdateHandleUseCase,
)
from replicator.domain.service import (
    AuthService,
    HandleAllocator,
    IdentityResolver,
    InteractionService,
    MemeService,
    SessionService,
    UserService,
)
from replicator.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_begin_login_use_case(self, auth_service: AuthService) -> BeginLoginUseCase:
        """Provide begin login use case."""
        return BeginLoginUseCase(auth_service=auth_service)

    @provide(scope=Scope.REQUEST)
    def get_complete_login_use_case(
        self,
        auth_service: AuthService,
        user_service: UserService,
        session_service: SessionService,
    ) -> CompleteLoginUseCase:
        """Provide complete login use case."""
        return CompleteLoginUseCase(
            auth_service=auth_service,
            user_service=user_service,
            session_service=session_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self, identity_resolver: IdentityResolver
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(identity_resolver=identity_resolver)

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_profile_use_case(
        self, identity_resolver: IdentityResolver
    ) -> GetProfileUseCase:
        """Provide get profile use case."""
        return GetProfileUseCase(identity_resolver=identity_resolver)

    @provide(scope=Scope.REQUEST)
    def get_update_handle_use_case(
        self,
        identity_resolver: IdentityResolver,
        user_service: UserService,
        session_service: SessionService,
    ) -> UpdateHandleUseCase:
        """Provide update handle use case."""
        return UpdateHandleUseCase(
            identity_resolver=identity_resolver,
            user_service=user_service,
            session_service=session_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_suggest_handle_use_case(
        self, identity_resolver: IdentityResolver, handle_allocator: HandleAllocator
    ) -> SuggestHandleUseCase:
        """Provide suggest handle use case."""
        return SuggestHandleUseCase(
            identity_resolver=identity_resolver, handle_allocator=handle_allocator
        )

    # Meme use cases
    @provide(scope=Scope.REQUEST)
    def get_create_meme_use_case(
        self, identity_resolver: IdentityResolver, meme_service: MemeService
    ) -> CreateMemeUseCase:
        """Provide create meme use case."""
        return CreateMemeUseCase(
            identity_resolver=identity_resolver, meme_service=meme_service
        )

    @provide(scope=Scope.REQUEST)
    def get_list_memes_use_case(self, meme_service: MemeService) -> ListMemesUseCase:
        """Provide list memes use case."""
        return ListMemesUseCase(meme_service=meme_service)

    # Interaction use cases
    @provide(scope=Scope.REQUEST)
    def get_create_interaction_use_case(
        self,
        identity_resolver: IdentityResolver,
        interaction_service: InteractionService,
    ) -> CreateInteractionUseCase:
        """Provide create interaction use case."""
        return CreateInteractionUseCase(
            identity_resolver=identity_resolver,
            interaction_service=interaction_service,
        )
