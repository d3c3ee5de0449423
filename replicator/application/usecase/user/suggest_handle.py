"""Suggest handle use case."""

from pydantic import BaseModel

from replicator.domain.service import HandleAllocator, IdentityResolver


class SuggestHandleRequest(BaseModel):
    """Suggest handle request."""

    token: str | None = None


class SuggestHandleResponse(BaseModel):
    """Suggest handle response."""

    username: str


class SuggestHandleUseCase:
    """Use case for proposing a free generated handle."""

    def __init__(
        self, identity_resolver: IdentityResolver, handle_allocator: HandleAllocator
    ) -> None:
        self.identity_resolver = identity_resolver
        self.handle_allocator = handle_allocator

    async def execute(self, request: SuggestHandleRequest) -> SuggestHandleResponse:
        """Draw a handle nobody owns right now. Nothing is reserved.

        Raises:
            UnauthenticatedError: If the caller is anonymous
            AllocationExhaustedError: If every draw collided
        """
        await self.identity_resolver.require(request.token)
        handle = await self.handle_allocator.allocate()
        return SuggestHandleResponse(username=handle.root)
