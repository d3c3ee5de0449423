"""User aggregate root.

Users are anchored on a verified email address. The handle is the public
username and may be assigned lazily after the account exists.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from replicator.domain.error import UnsavedEntityError
from replicator.domain.model.common import DomainModel
from replicator.domain.value import UserId
from replicator.domain.value.types import Handle


class User(DomainModel):
    """User aggregate root.

    Business rules:
    - Email is unique, lowercase, and never changes
    - Handle is unique when present
    - Users are never deleted
    """

    id: Optional[UserId] = None  # Assigned by the store
    email: str
    handle: Optional[Handle] = None
    name: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)
    last_login_at: Optional[datetime] = None

    @property
    def author_label(self) -> str:
        """Display label stamped onto memes this user creates."""
        if self.handle:
            return f"@{self.handle}"
        return self.name or self.email

    @property
    def stored_id(self) -> UserId:
        """The store-assigned id.

        Raises:
            UnsavedEntityError: If the user has not been stored yet
        """
        if self.id is None:
            raise UnsavedEntityError("User")
        return self.id
