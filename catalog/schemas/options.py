# catalog/schemas/options.py
"""Typed option bags accepted by the catalog actions.

Callers coming from the HTTP layer may use the camelCase spelling
(``withLibrary``, ``limit``) or the Python field names; unknown keys are
ignored.
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

class OptionsBase(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

class MatchOptions(OptionsBase):
    # Limit the response to rows with this active value
    active: Optional[bool] = None
    # Case-insensitive substring match against the name
    name: Optional[str] = None

class PaginationOptions(OptionsBase):
    limit: Optional[int] = Field(None, ge=0)
    offset: Optional[int] = Field(None, ge=0)

# Library

class LibraryFindOptions(OptionsBase):
    with_authors: bool = False
    with_series: bool = False
    with_stories: bool = False
    with_volumes: bool = False

class LibraryAllOptions(LibraryFindOptions, MatchOptions, PaginationOptions):
    # Exact match against the scope
    scope: Optional[str] = None

# Author

class AuthorFindOptions(OptionsBase):
    with_library: bool = False
    with_series: bool = False
    with_stories: bool = False
    with_volumes: bool = False

class AuthorAllOptions(AuthorFindOptions, MatchOptions, PaginationOptions):
    pass

# Series

class SeriesFindOptions(OptionsBase):
    with_authors: bool = False
    with_library: bool = False
    with_stories: bool = False

class SeriesAllOptions(SeriesFindOptions, MatchOptions, PaginationOptions):
    pass

# Story

class StoryFindOptions(OptionsBase):
    with_authors: bool = False
    with_library: bool = False
    with_series: bool = False
    with_volumes: bool = False

class StoryAllOptions(StoryFindOptions, MatchOptions, PaginationOptions):
    pass

# Volume

class VolumeFindOptions(OptionsBase):
    with_authors: bool = False
    with_library: bool = False
    with_stories: bool = False

class VolumeAllOptions(VolumeFindOptions, MatchOptions, PaginationOptions):
    pass

# User

class UserFindOptions(OptionsBase):
    with_access_tokens: bool = False
    with_refresh_tokens: bool = False

class UserAllOptions(UserFindOptions, PaginationOptions):
    active: Optional[bool] = None
    # Case-insensitive substring match against the username
    username: Optional[str] = None
