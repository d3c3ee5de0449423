"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict

from replicator.domain.model import Interaction, Meme, User
from replicator.domain.value import InteractionId, InteractionType, MemeId, UserId
from replicator.domain.value.types import Handle


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(row["id"]),
        email=row["email"],
        handle=Handle(row["handle"]) if row.get("handle") else None,
        name=row.get("name"),
        created_at=row["created_at"],
        last_login_at=row.get("last_login_at"),
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to an insert dict.

    id and created_at are assigned by the database.
    """
    return {
        "email": user.email,
        "handle": user.handle.root if user.handle else None,
        "name": user.name,
    }


def row_to_meme(row: Dict[str, Any]) -> Meme:
    """Convert database row to Meme domain model."""
    return Meme(
        id=MemeId(row["id"]),
        content=row["content"],
        user_id=UserId(row["user_id"]) if row.get("user_id") is not None else None,
        author=row["author"],
        score=row["score"],
        created_at=row["created_at"],
    )


def meme_to_dict(meme: Meme) -> Dict[str, Any]:
    """Convert Meme domain model to an insert dict.

    id and created_at are assigned by the database.
    """
    return {
        "content": meme.content,
        "user_id": meme.user_id,
        "author": meme.author,
        "score": meme.score,
    }


def row_to_interaction(row: Dict[str, Any]) -> Interaction:
    """Convert database row to Interaction domain model."""
    return Interaction(
        id=InteractionId(row["id"]),
        meme_id=MemeId(row["meme_id"]),
        user_id=UserId(row["user_id"]) if row.get("user_id") is not None else None,
        type=InteractionType(row["type"]),
        comment=row.get("comment") or "",
        created_at=row["created_at"],
    )


def interaction_to_dict(interaction: Interaction) -> Dict[str, Any]:
    """Convert Interaction domain model to an insert dict.

    id and created_at are assigned by the database.
    """
    return {
        "meme_id": interaction.meme_id,
        "user_id": interaction.user_id,
        "type": interaction.type.value,
        "comment": interaction.comment,
    }
