# catalog/sa/links.py
"""Relationship Manager for the many-to-many join tables.

A pair of rows is either linked or unlinked. ``connect`` is only valid on
an unlinked pair and ``disconnect`` only on a linked one; repeating either
fails instead of quietly succeeding.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional
from sqlalchemy import delete
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from catalog.errors import NotFound, NotUnique
from catalog.sa.models import AuthorSeries, AuthorStory, AuthorVolume, SeriesStory, VolumeStory

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class Link:
    """One join table, seen from its owning side."""
    model: Any
    owner_kind: str
    owner_key: str
    related_kind: str
    related_key: str

    def reverse(self) -> "Link":
        """The same join table seen from the other side"""
        return Link(self.model, self.related_kind, self.related_key, self.owner_kind, self.owner_key)

    def keys(self, owner_id: int, related_id: int) -> Dict[str, int]:
        return {self.owner_key: owner_id, self.related_key: related_id}

    def describe(self, owner_id: int, related_id: int) -> str:
        return f"{self.owner_kind} ID {owner_id} and {self.related_kind} ID {related_id}"


AUTHOR_SERIES = Link(AuthorSeries, 'Author', 'author_id', 'Series', 'series_id')
AUTHOR_STORY = Link(AuthorStory, 'Author', 'author_id', 'Story', 'story_id')
AUTHOR_VOLUME = Link(AuthorVolume, 'Author', 'author_id', 'Volume', 'volume_id')
SERIES_STORY = Link(SeriesStory, 'Series', 'series_id', 'Story', 'story_id')
VOLUME_STORY = Link(VolumeStory, 'Volume', 'volume_id', 'Story', 'story_id')


class LinkManager:
    def __init__(self, session: Session):
        self.session = session

    def connect(
        self,
        link: Link,
        owner_id: int,
        related_id: int,
        context: Optional[str] = None,
        **payload: Any
    ) -> Any:
        """Create the join row for this pair.

        Payload values left as None fall back to the column defaults
        (principal false, ordinal unset).

        Raises:
            NotUnique: If the pair is already linked
        """
        keys = link.keys(owner_id, related_id)
        message = f"connect: {link.describe(owner_id, related_id)} are already connected"
        if self.session.get(link.model, keys) is not None:
            raise NotUnique(message, context)

        row = link.model(**keys, **{name: value for name, value in payload.items() if value is not None})
        self.session.add(row)
        try:
            self.session.commit()
        except IntegrityError as error:
            self.session.rollback()
            # Lost a race with a concurrent connect, or one side was deleted meanwhile
            if self.session.get(link.model, keys) is not None:
                raise NotUnique(message, context) from error
            raise
        logger.info(f"{context}: connected {link.describe(owner_id, related_id)}")
        return row

    def disconnect(self, link: Link, owner_id: int, related_id: int, context: Optional[str] = None) -> None:
        """Delete the join row for this pair.

        Raises:
            NotFound: If the pair is not linked
        """
        keys = link.keys(owner_id, related_id)
        result = self.session.execute(
            delete(link.model).where(*[getattr(link.model, column) == value for column, value in keys.items()])
        )
        if result.rowcount == 0:
            self.session.rollback()
            raise NotFound(
                f"disconnect: {link.describe(owner_id, related_id)} are not connected",
                context
            )
        self.session.commit()
        logger.info(f"{context}: disconnected {link.describe(owner_id, related_id)}")
