# catalog/sa/actions/story.py
from typing import Optional

from catalog.sa.actions.base import ScopedActions, catalog_action
from catalog.sa.links import AUTHOR_STORY, SERIES_STORY, VOLUME_STORY
from catalog.sa.models import Story
from catalog.sa.queries import StoryQueries
from catalog.schemas import StoryAllOptions, StoryCreate, StoryFindOptions, StoryUpdate

STORY_AUTHOR = AUTHOR_STORY.reverse()
STORY_SERIES = SERIES_STORY.reverse()
STORY_VOLUME = VOLUME_STORY.reverse()


class StoryActions(ScopedActions):
    kind = 'Story'
    model = Story
    queries = StoryQueries()
    all_options = StoryAllOptions
    find_options = StoryFindOptions
    create_schema = StoryCreate
    update_schema = StoryUpdate

    @catalog_action
    def author_connect(
        self, library_id: int, story_id: int, author_id: int, principal: Optional[bool] = None
    ) -> Story:
        return self._connect(STORY_AUTHOR, library_id, story_id, author_id, 'author_connect', principal=principal)

    @catalog_action
    def author_disconnect(self, library_id: int, story_id: int, author_id: int) -> Story:
        return self._disconnect(STORY_AUTHOR, library_id, story_id, author_id, 'author_disconnect')

    @catalog_action
    def series_connect(
        self, library_id: int, story_id: int, series_id: int, ordinal: Optional[int] = None
    ) -> Story:
        return self._connect(STORY_SERIES, library_id, story_id, series_id, 'series_connect', ordinal=ordinal)

    @catalog_action
    def series_disconnect(self, library_id: int, story_id: int, series_id: int) -> Story:
        return self._disconnect(STORY_SERIES, library_id, story_id, series_id, 'series_disconnect')

    @catalog_action
    def volume_connect(self, library_id: int, story_id: int, volume_id: int) -> Story:
        return self._connect(STORY_VOLUME, library_id, story_id, volume_id, 'volume_connect')

    @catalog_action
    def volume_disconnect(self, library_id: int, story_id: int, volume_id: int) -> Story:
        return self._disconnect(STORY_VOLUME, library_id, story_id, volume_id, 'volume_disconnect')
