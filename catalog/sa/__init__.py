# catalog/sa/__init__.py
from .database import Database
from .models import (
    Base, Library, Author, Series, Story, Volume, User,
    AccessToken, RefreshToken, AuthorSeries, AuthorStory,
    AuthorVolume, SeriesStory, VolumeStory
)

__all__ = [
    'Database',
    'Base',
    'Library',
    'Author',
    'Series',
    'Story',
    'Volume',
    'User',
    'AccessToken',
    'RefreshToken',
    'AuthorSeries',
    'AuthorStory',
    'AuthorVolume',
    'SeriesStory',
    'VolumeStory',
]
