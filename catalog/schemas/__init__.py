# catalog/schemas/__init__.py
from .options import (
    MatchOptions, PaginationOptions,
    LibraryFindOptions, LibraryAllOptions,
    AuthorFindOptions, AuthorAllOptions,
    SeriesFindOptions, SeriesAllOptions,
    StoryFindOptions, StoryAllOptions,
    VolumeFindOptions, VolumeAllOptions,
    UserFindOptions, UserAllOptions,
)
from .payloads import (
    LibraryCreate, LibraryUpdate,
    AuthorCreate, AuthorUpdate,
    SeriesCreate, SeriesUpdate,
    StoryCreate, StoryUpdate,
    VolumeCreate, VolumeUpdate,
    UserCreate, UserUpdate,
)

__all__ = [
    'MatchOptions', 'PaginationOptions',
    'LibraryFindOptions', 'LibraryAllOptions',
    'AuthorFindOptions', 'AuthorAllOptions',
    'SeriesFindOptions', 'SeriesAllOptions',
    'StoryFindOptions', 'StoryAllOptions',
    'VolumeFindOptions', 'VolumeAllOptions',
    'UserFindOptions', 'UserAllOptions',
    'LibraryCreate', 'LibraryUpdate',
    'AuthorCreate', 'AuthorUpdate',
    'SeriesCreate', 'SeriesUpdate',
    'StoryCreate', 'StoryUpdate',
    'VolumeCreate', 'VolumeUpdate',
    'UserCreate', 'UserUpdate',
]
