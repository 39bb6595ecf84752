# tests/test_sa/test_schema.py
import pytest
from catalog.sa.models import (
    Library, Author, Series, Story, Volume, User, AccessToken, RefreshToken,
    AuthorSeries, AuthorStory, AuthorVolume, SeriesStory, VolumeStory
)
from tests.test_sa.utils import DBInspector, cascading_foreign_keys, compare_model_to_db

@pytest.mark.parametrize("model", [
    Library, Author, Series, Story, Volume, User, AccessToken, RefreshToken,
    AuthorSeries, AuthorStory, AuthorVolume, SeriesStory, VolumeStory
])
def test_model_matches_schema(db_session, model):
    """Test model matches database schema"""
    differences = compare_model_to_db(db_session, model)
    assert not differences, f"Schema differences found: {differences}"

@pytest.mark.parametrize("table", ["author", "series", "story", "volume"])
def test_children_cascade_from_library(db_session, table):
    assert cascading_foreign_keys(db_session, table) == {"library_id": "library"}

def test_join_tables_cascade_from_both_sides(db_session):
    assert cascading_foreign_keys(db_session, "author_series") == {"author_id": "author", "series_id": "series"}
    assert cascading_foreign_keys(db_session, "volume_story") == {"volume_id": "volume", "story_id": "story"}

def test_join_tables_keyed_by_pair(db_session):
    info = DBInspector(db_session).get_table_info("series_story")
    assert set(info['primary_key']['constrained_columns']) == {"series_id", "story_id"}

def test_scoped_name_constraints(db_session):
    constraints = DBInspector(db_session).get_table_info("author")['unique_constraints']
    assert {"library_id", "first_name", "last_name"} in [set(c['column_names']) for c in constraints]
