"""Domain value objects.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import ValidationError as PydanticValidationError
from pydantic import field_validator

from replicator.domain.error import (
    InvalidHandleFormatError,
    InvalidInteractionTypeError,
)
from replicator.domain.value.common import RootValueObject, ValueObject

# Every meme starts here; the score is this plus the sum of its interaction deltas
BASELINE_SCORE = 100

HANDLE_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
HANDLE_MIN_LENGTH = 3
HANDLE_MAX_LENGTH = 32


class InteractionType(str, Enum):
    """Fixed set of reactions a user can leave on a meme."""

    REFUTE = "refute"
    REFINE = "refine"
    PRAISE = "praise"

    @property
    def delta(self) -> int:
        """Score change applied when an interaction of this type is recorded."""
        return INTERACTION_DELTAS[self]

    @classmethod
    def parse(cls, value: str) -> "InteractionType":
        """Parse a wire value.

        Raises:
            InvalidInteractionTypeError: If the value is not a known type
        """
        try:
            return cls(value)
        except ValueError:
            raise InvalidInteractionTypeError(value)


INTERACTION_DELTAS: dict[InteractionType, int] = {
    InteractionType.REFUTE: -15,
    InteractionType.REFINE: 10,
    InteractionType.PRAISE: 5,
}


class SortKey(str, Enum):
    """Orderings offered by the meme listing."""

    SCORE = "score"
    AGE = "age"
    INTERACTIONS = "interactions"


class Handle(RootValueObject[str]):
    """Public username.

    Lowercase alphanumeric words joined by single hyphens, 3-32 characters.
    Examples: 'lucid-comet-417', 'ada'
    """

    @field_validator("root")
    @classmethod
    def validate_handle_format(cls, v: str) -> str:
        """Validate handle format."""
        if len(v) < HANDLE_MIN_LENGTH or len(v) > HANDLE_MAX_LENGTH:
            raise ValueError(
                f"Username must be {HANDLE_MIN_LENGTH}-{HANDLE_MAX_LENGTH} characters"
            )
        if not HANDLE_PATTERN.match(v):
            raise ValueError(
                "Username must be lowercase letters and numbers separated by "
                "single hyphens"
            )
        return v

    @classmethod
    def parse(cls, candidate: str | None) -> "Handle":
        """Normalize (trim, lowercase) and validate a user-supplied handle.

        Raises:
            InvalidHandleFormatError: If the candidate is empty or malformed
        """
        normalized = (candidate or "").strip().lower()
        if not normalized:
            raise InvalidHandleFormatError("Username is required")
        try:
            return cls(normalized)
        except PydanticValidationError as e:
            message = e.errors()[0]["msg"].removeprefix("Value error, ")
            raise InvalidHandleFormatError(message)


class VerifiedProfile(ValueObject):
    """Identity asserted by the provider after a successful code exchange."""

    email: str
    name: str | None = None
    subject: str | None = None
