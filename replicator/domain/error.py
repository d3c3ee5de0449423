"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class EmptyContentError(ValidationError):
    """Raised when a meme's content is empty after trimming."""

    def __init__(self) -> None:
        super().__init__("Content is required")


class InvalidHandleFormatError(ValidationError):
    """Raised when a handle candidate fails format rules."""

    pass


class InvalidInteractionTypeError(ValidationError):
    """Raised when an interaction type is not one of the fixed set."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid interaction type: {value}")


class ConflictError(DomainError):
    """Raised when a write collides with existing state."""

    pass


class DuplicateInteractionError(ConflictError):
    """Raised when a user repeats an interaction type on the same meme."""

    def __init__(self, meme_id: int, user_id: int, interaction_type: str):
        self.meme_id = meme_id
        self.user_id = user_id
        self.interaction_type = interaction_type
        super().__init__(
            f"You have already submitted a {interaction_type} for this meme"
        )


class HandleTakenError(ConflictError):
    """Raised when a handle is owned by another user."""

    def __init__(self, handle: str):
        self.handle = handle
        super().__init__("That username is already taken")


class AuthenticationError(DomainError):
    """Base authentication error."""

    pass


class UnauthenticatedError(AuthenticationError):
    """Raised when an operation requires a resolved identity."""

    def __init__(self) -> None:
        super().__init__("Authentication required")


class InvalidCodeError(AuthenticationError):
    """Raised when the identity provider rejects a one-time code."""

    def __init__(self) -> None:
        super().__init__("Invalid or expired verification code")


class AllocationExhaustedError(DomainError):
    """Raised when no free generated handle was found within the attempt budget."""

    def __init__(self, attempts: int):
        self.attempts = attempts
        super().__init__(f"Could not allocate a unique username after {attempts} attempts")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class UnsavedEntityError(DomainError):
    """Raised when an entity is used where a store-assigned id is required."""

    def __init__(self, entity: str):
        self.entity = entity
        super().__init__(f"{entity} has not been stored yet")
