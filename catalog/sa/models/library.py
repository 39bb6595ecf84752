# catalog/sa/models/library.py
from sqlalchemy import String
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, EntityMixin

class Library(Base, EntityMixin):
    __tablename__ = 'library'

    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    scope: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)

    # Owned children go away with the Library
    authors = relationship('Author', back_populates='library', cascade='all, delete-orphan', passive_deletes=True)
    series = relationship('Series', back_populates='library', cascade='all, delete-orphan', passive_deletes=True)
    stories = relationship('Story', back_populates='library', cascade='all, delete-orphan', passive_deletes=True)
    volumes = relationship('Volume', back_populates='library', cascade='all, delete-orphan', passive_deletes=True)

    def __repr__(self) -> str:
        return f"<Library id={self.id} name={self.name!r} scope={self.scope!r}>"
