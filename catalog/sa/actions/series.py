# catalog/sa/actions/series.py
from typing import Optional

from catalog.sa.actions.base import ScopedActions, catalog_action
from catalog.sa.links import AUTHOR_SERIES, SERIES_STORY
from catalog.sa.models import Series
from catalog.sa.queries import SeriesQueries
from catalog.schemas import SeriesAllOptions, SeriesCreate, SeriesFindOptions, SeriesUpdate

SERIES_AUTHOR = AUTHOR_SERIES.reverse()


class SeriesActions(ScopedActions):
    kind = 'Series'
    model = Series
    queries = SeriesQueries()
    all_options = SeriesAllOptions
    find_options = SeriesFindOptions
    create_schema = SeriesCreate
    update_schema = SeriesUpdate

    @catalog_action
    def author_connect(
        self, library_id: int, series_id: int, author_id: int, principal: Optional[bool] = None
    ) -> Series:
        return self._connect(SERIES_AUTHOR, library_id, series_id, author_id, 'author_connect', principal=principal)

    @catalog_action
    def author_disconnect(self, library_id: int, series_id: int, author_id: int) -> Series:
        return self._disconnect(SERIES_AUTHOR, library_id, series_id, author_id, 'author_disconnect')

    @catalog_action
    def story_connect(
        self, library_id: int, series_id: int, story_id: int, ordinal: Optional[int] = None
    ) -> Series:
        """Add a Story to the Series, optionally at a position within it."""
        return self._connect(SERIES_STORY, library_id, series_id, story_id, 'story_connect', ordinal=ordinal)

    @catalog_action
    def story_disconnect(self, library_id: int, series_id: int, story_id: int) -> Series:
        return self._disconnect(SERIES_STORY, library_id, series_id, story_id, 'story_disconnect')
