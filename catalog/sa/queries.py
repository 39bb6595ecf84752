# catalog/sa/queries.py
"""Query Builder: turns typed option bags into SQLAlchemy ``Select``
statements. Nothing in this module touches a session.

Each builder exposes the four independent fragments (include, order_by,
where, skip/take) plus helpers composing them into complete statements.
"""
from typing import Any, Dict, List, Mapping, Optional, Tuple
from sqlalchemy import or_, select, Select
from sqlalchemy.orm import Load, selectinload
from sqlalchemy.sql.elements import ColumnElement

from catalog.sa.models import (
    Library, Author, Series, Story, Volume, User,
    AuthorSeries, AuthorStory, AuthorVolume, SeriesStory, VolumeStory
)

class QueryBuilder:
    """Base builder for models owned by a Library and matched by ``name``."""

    model: Any = None

    # Include flag -> relationship path to eager load
    edges: Dict[str, Tuple[Any, ...]] = {}

    def include(self, options: Any = None) -> Optional[List[Load]]:
        """Return the loader options for every requested edge, or None when
        nothing was requested."""
        if options is None:
            return None
        loaders = []
        for flag, path in self.edges.items():
            if getattr(options, flag, False):
                loader = selectinload(path[0])
                for attribute in path[1:]:
                    loader = loader.selectinload(attribute)
                loaders.append(loader)
        return loaders or None

    def order_by(self, options: Any = None) -> List[ColumnElement]:
        # Stable ordering is what makes skip/take meaningful
        return [self.model.name.asc()]

    def scope(self, scope_id: Optional[int]) -> List[ColumnElement]:
        return [self.model.library_id == scope_id]

    def where(self, scope_id: Optional[int], options: Any = None) -> List[ColumnElement]:
        criteria = self.scope(scope_id)
        if options is None:
            return criteria
        active = getattr(options, "active", None)
        if active is not None:
            criteria.append(self.model.active == active)
        name = getattr(options, "name", None)
        if name:
            criteria.append(self.model.name.icontains(name, autoescape=True))
        return criteria

    def skip(self, options: Any = None) -> Optional[int]:
        offset = getattr(options, "offset", None)
        return int(offset) if offset else None

    def take(self, options: Any = None) -> Optional[int]:
        limit = getattr(options, "limit", None)
        return int(limit) if limit else None

    def natural_key(self, key: Mapping[str, Any]) -> List[ColumnElement]:
        """Case-sensitive equality on every column of the natural key"""
        return [getattr(self.model, column) == value for column, value in key.items()]

    def select_all(self, scope_id: Optional[int], options: Any = None) -> Select:
        statement = (
            select(self.model)
            .where(*self.where(scope_id, options))
            .order_by(*self.order_by(options))
        )
        return self._paginate(self._load(statement, options), options)

    def select_one(self, scope_id: Optional[int], row_id: int, options: Any = None) -> Select:
        statement = select(self.model).where(self.model.id == row_id, *self.scope(scope_id))
        return self._load(statement, options)

    def select_exact(self, scope_id: Optional[int], key: Mapping[str, Any], options: Any = None) -> Select:
        statement = select(self.model).where(*self.natural_key(key), *self.scope(scope_id))
        return self._load(statement, options)

    def _load(self, statement: Select, options: Any) -> Select:
        loaders = self.include(options)
        if loaders:
            statement = statement.options(*loaders)
        return statement

    def _paginate(self, statement: Select, options: Any) -> Select:
        skip = self.skip(options)
        if skip is not None:
            statement = statement.offset(skip)
        take = self.take(options)
        if take is not None:
            statement = statement.limit(take)
        return statement


class LibraryQueries(QueryBuilder):
    model = Library
    edges = {
        'with_authors': (Library.authors,),
        'with_series': (Library.series,),
        'with_stories': (Library.stories,),
        'with_volumes': (Library.volumes,),
    }

    def scope(self, scope_id: Optional[int]) -> List[ColumnElement]:
        return []

    def where(self, scope_id: Optional[int], options: Any = None) -> List[ColumnElement]:
        criteria = super().where(scope_id, options)
        scope = getattr(options, "scope", None)
        if scope:
            criteria.append(Library.scope == scope)
        return criteria


class AuthorQueries(QueryBuilder):
    model = Author
    edges = {
        'with_library': (Author.library,),
        'with_series': (Author.author_series, AuthorSeries.series),
        'with_stories': (Author.author_stories, AuthorStory.story),
        'with_volumes': (Author.author_volumes, AuthorVolume.volume),
    }

    def order_by(self, options: Any = None) -> List[ColumnElement]:
        return [Author.last_name.asc(), Author.first_name.asc()]

    def where(self, scope_id: Optional[int], options: Any = None) -> List[ColumnElement]:
        criteria = self.scope(scope_id)
        if options is None:
            return criteria
        active = getattr(options, "active", None)
        if active is not None:
            criteria.append(Author.active == active)
        name = getattr(options, "name", None)
        if name:
            # "Fred Flint" matches first names containing "Fred" OR last names
            # containing "Flint"; a single word is tried against both
            names = name.strip().split(" ")
            first_match = names[0]
            last_match = names[1] if len(names) > 1 else names[0]
            criteria.append(or_(
                Author.first_name.icontains(first_match, autoescape=True),
                Author.last_name.icontains(last_match, autoescape=True),
            ))
        return criteria


class SeriesQueries(QueryBuilder):
    model = Series
    edges = {
        'with_authors': (Series.author_series, AuthorSeries.author),
        'with_library': (Series.library,),
        'with_stories': (Series.series_stories, SeriesStory.story),
    }


class StoryQueries(QueryBuilder):
    model = Story
    edges = {
        'with_authors': (Story.author_stories, AuthorStory.author),
        'with_library': (Story.library,),
        'with_series': (Story.series_stories, SeriesStory.series),
        'with_volumes': (Story.volume_stories, VolumeStory.volume),
    }


class VolumeQueries(QueryBuilder):
    model = Volume
    edges = {
        'with_authors': (Volume.author_volumes, AuthorVolume.author),
        'with_library': (Volume.library,),
        'with_stories': (Volume.volume_stories, VolumeStory.story),
    }


class UserQueries(QueryBuilder):
    model = User
    edges = {
        'with_access_tokens': (User.access_tokens,),
        'with_refresh_tokens': (User.refresh_tokens,),
    }

    def order_by(self, options: Any = None) -> List[ColumnElement]:
        return [User.username.asc()]

    def scope(self, scope_id: Optional[int]) -> List[ColumnElement]:
        return []

    def where(self, scope_id: Optional[int], options: Any = None) -> List[ColumnElement]:
        criteria = []
        if options is None:
            return criteria
        active = getattr(options, "active", None)
        if active is not None:
            criteria.append(User.active == active)
        username = getattr(options, "username", None)
        if username:
            criteria.append(User.username.icontains(username, autoescape=True))
        return criteria
