"""Meme domain service."""

from dataclasses import dataclass, field
from typing import Optional

import logfire

from replicator.domain.error import EmptyContentError, NotFoundError
from replicator.domain.model import Interaction, Meme, User
from replicator.domain.repository import (
    InteractionRepository,
    MemeRepository,
    UserRepository,
)
from replicator.domain.value import MemeId, SortKey

from .base import Service


@dataclass
class InteractionEntry:
    """An interaction joined with the reacting user's current identity."""

    interaction: Interaction
    handle: Optional[str] = None
    name: Optional[str] = None


@dataclass
class MemeThread:
    """A meme together with its interactions, newest first.

    ``author_handle`` and ``author_name`` are the owner's current identity,
    unlike ``meme.author`` which is fixed at creation.
    """

    meme: Meme
    interactions: list[InteractionEntry] = field(default_factory=list)
    author_handle: Optional[str] = None
    author_name: Optional[str] = None

    @property
    def interaction_count(self) -> int:
        return len(self.interactions)


class MemeService(Service):
    """Domain service for the meme catalog."""

    def __init__(
        self,
        meme_repository: MemeRepository,
        interaction_repository: InteractionRepository,
        user_repository: UserRepository,
    ) -> None:
        """Initialize meme service.

        Args:
            meme_repository: Meme repository
            interaction_repository: Interaction repository
            user_repository: User repository
        """
        self.meme_repository = meme_repository
        self.interaction_repository = interaction_repository
        self.user_repository = user_repository

    async def create(self, author: User, content: str) -> Meme:
        """Create a meme at the baseline score.

        The author label is derived once, here, and stored with the meme.

        Args:
            author: Creating user
            content: Meme text

        Returns:
            The stored meme

        Raises:
            EmptyContentError: If the content is empty after trimming
        """
        content = (content or "").strip()
        if not content:
            raise EmptyContentError()

        with logfire.span("meme_service.create", user_id=author.id):
            meme = Meme(
                content=content,
                user_id=author.id,
                author=author.author_label,
            )
            saved = await self.meme_repository.create(meme)
            logfire.info("Meme created", meme_id=saved.id, author=saved.author)
            return saved

    async def get_by_id(self, meme_id: MemeId) -> Meme:
        """Get meme by ID.

        Raises:
            NotFoundError: If meme not found
        """
        meme = await self.meme_repository.find_by_id(meme_id)
        if not meme:
            raise NotFoundError("Meme", str(meme_id))
        return meme

    async def list_with_interactions(
        self, sort: SortKey = SortKey.SCORE
    ) -> list[MemeThread]:
        """List every meme with its interactions.

        Memes are loaded in insertion order and then stably sorted, so ties
        on the sort key keep insertion order. Interactions are loaded in a
        single batch and joined, together with each meme's owner, with the
        users' current handles.

        Args:
            sort: Ordering to apply

        Returns:
            Memes with interactions, ordered by the sort key
        """
        with logfire.span("meme_service.list_with_interactions", sort=sort.value):
            memes = await self.meme_repository.find_all()
            threads = {meme.id: MemeThread(meme=meme) for meme in memes}

            interactions = await self.interaction_repository.find_by_memes(
                list(threads)
            )
            user_ids = {i.user_id for i in interactions if i.user_id is not None}
            user_ids.update(m.user_id for m in memes if m.user_id is not None)
            users = {
                user.id: user
                for user in await self.user_repository.find_by_ids(list(user_ids))
            }

            for interaction in interactions:
                thread = threads.get(interaction.meme_id)
                if thread is None:
                    continue
                user = users.get(interaction.user_id)
                thread.interactions.append(
                    InteractionEntry(
                        interaction=interaction,
                        handle=str(user.handle) if user and user.handle else None,
                        name=user.name if user else None,
                    )
                )

            for thread in threads.values():
                owner = users.get(thread.meme.user_id)
                if owner is not None:
                    thread.author_handle = str(owner.handle) if owner.handle else None
                    thread.author_name = owner.name

            ordered = list(threads.values())
            # sorted() is stable, including with reverse=True
            if sort == SortKey.SCORE:
                ordered.sort(key=lambda t: t.meme.score, reverse=True)
            elif sort == SortKey.AGE:
                ordered.sort(key=lambda t: t.meme.created_at, reverse=True)
            elif sort == SortKey.INTERACTIONS:
                ordered.sort(key=lambda t: t.interaction_count, reverse=True)

            logfire.info("Memes listed", count=len(ordered), sort=sort.value)
            return ordered
