# catalog/sa/models/story.py
from sqlalchemy import ForeignKey, Index, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, EntityMixin

class Story(Base, EntityMixin):
    __tablename__ = 'story'

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    copyright: Mapped[str | None] = mapped_column(String(255), nullable=True)
    library_id: Mapped[int] = mapped_column(Integer, ForeignKey('library.id', ondelete='CASCADE'), nullable=False)

    # Relationships
    library = relationship('Library', back_populates='stories')
    author_stories = relationship('AuthorStory', back_populates='story', cascade='all, delete-orphan', passive_deletes=True)
    series_stories = relationship('SeriesStory', back_populates='story', cascade='all, delete-orphan', passive_deletes=True)
    volume_stories = relationship('VolumeStory', back_populates='story', cascade='all, delete-orphan', passive_deletes=True)

    # Convenience relationships
    authors = relationship('Author', secondary='author_story', viewonly=True)
    series = relationship('Series', secondary='series_story', viewonly=True)
    volumes = relationship('Volume', secondary='volume_story', viewonly=True)

    __table_args__ = (
        UniqueConstraint('library_id', 'name', name='uix_story_library_name'),
        Index('idx_story_library_id', 'library_id'),
    )

    def __repr__(self) -> str:
        return f"<Story id={self.id} name={self.name!r}>"
