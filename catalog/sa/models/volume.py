# catalog/sa/models/volume.py
from sqlalchemy import Boolean, ForeignKey, Index, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, EntityMixin, TimestampMixin

class VolumeStory(Base, TimestampMixin):
    """Association model for Stories published in Volumes"""
    __tablename__ = 'volume_story'

    volume_id: Mapped[int] = mapped_column(Integer, ForeignKey('volume.id', ondelete='CASCADE'), primary_key=True)
    story_id: Mapped[int] = mapped_column(Integer, ForeignKey('story.id', ondelete='CASCADE'), primary_key=True)

    # Relationships
    volume = relationship('Volume', back_populates='volume_stories')
    story = relationship('Story', back_populates='volume_stories')

class Volume(Base, EntityMixin):
    __tablename__ = 'volume'

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    copyright: Mapped[str | None] = mapped_column(String(255), nullable=True)
    google_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    isbn: Mapped[str | None] = mapped_column(String(20), nullable=True)
    location: Mapped[str | None] = mapped_column(String(50), nullable=True)  # See VolumeLocation
    read: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    type: Mapped[str | None] = mapped_column(String(50), nullable=True)  # See VolumeType
    library_id: Mapped[int] = mapped_column(Integer, ForeignKey('library.id', ondelete='CASCADE'), nullable=False)

    # Relationships
    library = relationship('Library', back_populates='volumes')
    author_volumes = relationship('AuthorVolume', back_populates='volume', cascade='all, delete-orphan', passive_deletes=True)
    volume_stories = relationship('VolumeStory', back_populates='volume', cascade='all, delete-orphan', passive_deletes=True)

    # Convenience relationships
    authors = relationship('Author', secondary='author_volume', viewonly=True)
    stories = relationship('Story', secondary='volume_story', viewonly=True)

    __table_args__ = (
        UniqueConstraint('library_id', 'name', name='uix_volume_library_name'),
        Index('idx_volume_library_id', 'library_id'),
        Index('idx_volume_isbn', 'isbn'),
    )

    def __repr__(self) -> str:
        return f"<Volume id={self.id} name={self.name!r}>"
