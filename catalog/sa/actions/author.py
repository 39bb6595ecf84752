# catalog/sa/actions/author.py
from typing import Any, Mapping, Optional

from catalog.sa.actions.base import Options, ScopedActions, UniqueKey, catalog_action
from catalog.sa.links import AUTHOR_SERIES, AUTHOR_STORY, AUTHOR_VOLUME
from catalog.sa.models import Author
from catalog.sa.queries import AuthorQueries
from catalog.schemas import AuthorAllOptions, AuthorCreate, AuthorFindOptions, AuthorUpdate


class AuthorActions(ScopedActions):
    kind = 'Author'
    model = Author
    queries = AuthorQueries()
    all_options = AuthorAllOptions
    find_options = AuthorFindOptions
    create_schema = AuthorCreate
    update_schema = AuthorUpdate
    unique_keys = (('first_name', 'last_name'),)

    def not_unique_message(self, key: UniqueKey, candidate: Mapping[str, Any]) -> str:
        name = f"{candidate['first_name']} {candidate['last_name']}"
        return f"name: Author name '{name}' is already in use in this Library"

    @catalog_action
    def exact(self, library_id: int, first_name: str, last_name: str, options: Options = None) -> Author:
        key = {'first_name': first_name, 'last_name': last_name}
        return self._exact(library_id, key, f"{first_name} {last_name}", options)

    @catalog_action
    def series_connect(
        self, library_id: int, author_id: int, series_id: int, principal: Optional[bool] = None
    ) -> Author:
        return self._connect(AUTHOR_SERIES, library_id, author_id, series_id, 'series_connect', principal=principal)

    @catalog_action
    def series_disconnect(self, library_id: int, author_id: int, series_id: int) -> Author:
        return self._disconnect(AUTHOR_SERIES, library_id, author_id, series_id, 'series_disconnect')

    @catalog_action
    def story_connect(
        self, library_id: int, author_id: int, story_id: int, principal: Optional[bool] = None
    ) -> Author:
        return self._connect(AUTHOR_STORY, library_id, author_id, story_id, 'story_connect', principal=principal)

    @catalog_action
    def story_disconnect(self, library_id: int, author_id: int, story_id: int) -> Author:
        return self._disconnect(AUTHOR_STORY, library_id, author_id, story_id, 'story_disconnect')

    @catalog_action
    def volume_connect(
        self, library_id: int, author_id: int, volume_id: int, principal: Optional[bool] = None
    ) -> Author:
        return self._connect(AUTHOR_VOLUME, library_id, author_id, volume_id, 'volume_connect', principal=principal)

    @catalog_action
    def volume_disconnect(self, library_id: int, author_id: int, volume_id: int) -> Author:
        return self._disconnect(AUTHOR_VOLUME, library_id, author_id, volume_id, 'volume_disconnect')
