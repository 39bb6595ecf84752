# catalog/sa/actions/__init__.py
from .base import BaseActions, ScopedActions, catalog_action
from .library import LibraryActions
from .author import AuthorActions
from .series import SeriesActions
from .story import StoryActions
from .volume import VolumeActions
from .user import UserActions

__all__ = [
    'BaseActions',
    'ScopedActions',
    'catalog_action',
    'LibraryActions',
    'AuthorActions',
    'SeriesActions',
    'StoryActions',
    'VolumeActions',
    'UserActions',
]
