# catalog/sa/models/series.py
from sqlalchemy import ForeignKey, Index, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, EntityMixin, TimestampMixin

class SeriesStory(Base, TimestampMixin):
    """Association model for Stories in Series"""
    __tablename__ = 'series_story'

    series_id: Mapped[int] = mapped_column(Integer, ForeignKey('series.id', ondelete='CASCADE'), primary_key=True)
    story_id: Mapped[int] = mapped_column(Integer, ForeignKey('story.id', ondelete='CASCADE'), primary_key=True)
    ordinal: Mapped[int | None] = mapped_column(Integer, nullable=True)  # Position of the Story within the Series

    # Relationships
    series = relationship('Series', back_populates='series_stories')
    story = relationship('Story', back_populates='series_stories')

class Series(Base, EntityMixin):
    __tablename__ = 'series'

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    copyright: Mapped[str | None] = mapped_column(String(255), nullable=True)
    library_id: Mapped[int] = mapped_column(Integer, ForeignKey('library.id', ondelete='CASCADE'), nullable=False)

    # Relationships
    library = relationship('Library', back_populates='series')
    author_series = relationship('AuthorSeries', back_populates='series', cascade='all, delete-orphan', passive_deletes=True)
    series_stories = relationship('SeriesStory', back_populates='series', cascade='all, delete-orphan', passive_deletes=True)

    # Convenience relationships
    authors = relationship('Author', secondary='author_series', viewonly=True)
    stories = relationship('Story', secondary='series_story', viewonly=True)

    __table_args__ = (
        UniqueConstraint('library_id', 'name', name='uix_series_library_name'),
        Index('idx_series_library_id', 'library_id'),
    )

    def __repr__(self) -> str:
        return f"<Series id={self.id} name={self.name!r}>"
