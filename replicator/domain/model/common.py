"""Base model for domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable entity.

    Changes are made by ``model_copy(update=...)`` in a repository and the
    stored copy is returned, so a caller never sees a half-applied write.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)
