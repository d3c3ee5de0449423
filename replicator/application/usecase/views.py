"""Response models shared by several use cases."""

from pydantic import BaseModel

from replicator.domain.model import User


class UserInfo(BaseModel):
    """Public view of the signed-in user."""

    id: int
    email: str
    username: str | None
    name: str | None

    @classmethod
    def from_user(cls, user: User) -> "UserInfo":
        return cls(
            id=user.stored_id,
            email=user.email,
            username=str(user.handle) if user.handle else None,
            name=user.name,
        )
