# catalog/sa/models/author.py
from sqlalchemy import Boolean, ForeignKey, Index, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, EntityMixin, TimestampMixin

class AuthorSeries(Base, TimestampMixin):
    """Association model for Authors of Series"""
    __tablename__ = 'author_series'

    author_id: Mapped[int] = mapped_column(Integer, ForeignKey('author.id', ondelete='CASCADE'), primary_key=True)
    series_id: Mapped[int] = mapped_column(Integer, ForeignKey('series.id', ondelete='CASCADE'), primary_key=True)
    principal: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    # Relationships
    author = relationship('Author', back_populates='author_series')
    series = relationship('Series', back_populates='author_series')

class AuthorStory(Base, TimestampMixin):
    """Association model for Authors of Stories"""
    __tablename__ = 'author_story'

    author_id: Mapped[int] = mapped_column(Integer, ForeignKey('author.id', ondelete='CASCADE'), primary_key=True)
    story_id: Mapped[int] = mapped_column(Integer, ForeignKey('story.id', ondelete='CASCADE'), primary_key=True)
    principal: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    # Relationships
    author = relationship('Author', back_populates='author_stories')
    story = relationship('Story', back_populates='author_stories')

class AuthorVolume(Base, TimestampMixin):
    """Association model for Authors of Volumes"""
    __tablename__ = 'author_volume'

    author_id: Mapped[int] = mapped_column(Integer, ForeignKey('author.id', ondelete='CASCADE'), primary_key=True)
    volume_id: Mapped[int] = mapped_column(Integer, ForeignKey('volume.id', ondelete='CASCADE'), primary_key=True)
    principal: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    # Relationships
    author = relationship('Author', back_populates='author_volumes')
    volume = relationship('Volume', back_populates='author_volumes')

class Author(Base, EntityMixin):
    __tablename__ = 'author'

    first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False)
    library_id: Mapped[int] = mapped_column(Integer, ForeignKey('library.id', ondelete='CASCADE'), nullable=False)

    # Relationships
    library = relationship('Library', back_populates='authors')
    author_series = relationship('AuthorSeries', back_populates='author', cascade='all, delete-orphan', passive_deletes=True)
    author_stories = relationship('AuthorStory', back_populates='author', cascade='all, delete-orphan', passive_deletes=True)
    author_volumes = relationship('AuthorVolume', back_populates='author', cascade='all, delete-orphan', passive_deletes=True)

    # Convenience relationships
    series = relationship('Series', secondary='author_series', viewonly=True)
    stories = relationship('Story', secondary='author_story', viewonly=True)
    volumes = relationship('Volume', secondary='author_volume', viewonly=True)

    __table_args__ = (
        UniqueConstraint('library_id', 'last_name', 'first_name', name='uix_author_library_name'),
        Index('idx_author_library_id', 'library_id'),
    )

    def __repr__(self) -> str:
        return f"<Author id={self.id} name={self.first_name!r} {self.last_name!r}>"
