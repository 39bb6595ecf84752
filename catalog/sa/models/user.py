# catalog/sa/models/user.py
from datetime import datetime
from sqlalchemy import DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, EntityMixin, TimestampMixin

class AccessToken(Base, TimestampMixin):
    """Access tokens issued to a User by the authentication layer."""
    __tablename__ = 'access_token'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    token: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    scope: Mapped[str] = mapped_column(String(255), nullable=False)
    expires: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    user_id: Mapped[int] = mapped_column(Integer, ForeignKey('user.id', ondelete='CASCADE'), nullable=False)

    # Relationships
    user = relationship('User', back_populates='access_tokens')

class RefreshToken(Base, TimestampMixin):
    """Refresh tokens paired with an access token."""
    __tablename__ = 'refresh_token'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    token: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    access_token: Mapped[str] = mapped_column(String(255), nullable=False)
    expires: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    user_id: Mapped[int] = mapped_column(Integer, ForeignKey('user.id', ondelete='CASCADE'), nullable=False)

    # Relationships
    user = relationship('User', back_populates='refresh_tokens')

class User(Base, EntityMixin):
    __tablename__ = 'user'

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    password: Mapped[str] = mapped_column(String(255), nullable=False)  # bcrypt hash, never returned
    scope: Mapped[str] = mapped_column(String(1024), nullable=False)  # Space separated authorization scopes
    username: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)

    # Relationships
    access_tokens = relationship('AccessToken', back_populates='user', cascade='all, delete-orphan', passive_deletes=True)
    refresh_tokens = relationship('RefreshToken', back_populates='user', cascade='all, delete-orphan', passive_deletes=True)

    def __repr__(self) -> str:
        return f"<User id={self.id} username={self.username!r}>"
