# tests/test_sa/test_actions/test_author_actions.py
import pytest
from sqlalchemy import func, inspect, select
from sqlalchemy.exc import IntegrityError

from catalog.errors import BadRequest, NotFound, NotUnique, ServerError
from catalog.sa.actions import AuthorActions, SeriesActions
from catalog.sa.models import AuthorSeries, AuthorStory, AuthorVolume

@pytest.fixture
def authors(db_session):
    """Fixture to create an AuthorActions instance"""
    return AuthorActions(db_session)

@pytest.fixture
def flintstones(authors, sample_library):
    """Three Authors in the sample Library"""
    return [
        authors.insert(sample_library.id, {"firstName": first, "lastName": last})
        for first, last in [("Fred", "Flintstone"), ("Barney", "Rubble"), ("Wilma", "Flintstone")]
    ]

def test_insert_author(authors, sample_library):
    author = authors.insert(sample_library.id, {"firstName": "Fred", "lastName": "Flintstone"})
    assert author.id is not None
    assert author.first_name == "Fred"
    assert author.last_name == "Flintstone"
    assert author.library_id == sample_library.id
    assert author.active is True

def test_insert_duplicate_in_same_library(authors, sample_library, sample_author):
    with pytest.raises(NotUnique) as excinfo:
        authors.insert(sample_library.id, {"firstName": "Fred", "lastName": "Flintstone"})
    assert excinfo.value.message == "name: Author name 'Fred Flintstone' is already in use in this Library"

def test_insert_duplicate_in_other_library(authors, sample_author, other_library):
    author = authors.insert(other_library.id, {"firstName": "Fred", "lastName": "Flintstone"})
    assert author.library_id == other_library.id

def test_insert_missing_library(authors):
    with pytest.raises(NotFound) as excinfo:
        authors.insert(9999, {"firstName": "Fred", "lastName": "Flintstone"})
    assert excinfo.value.message == "id: Missing Library 9999"

def test_insert_ignores_library_in_payload(authors, sample_library, other_library):
    author = authors.insert(sample_library.id, {
        "firstName": "Fred", "lastName": "Flintstone", "libraryId": other_library.id
    })
    assert author.library_id == sample_library.id

def test_insert_requires_last_name(authors, sample_library):
    with pytest.raises(BadRequest) as excinfo:
        authors.insert(sample_library.id, {"firstName": "Fred"})
    assert excinfo.value.field == "lastName"

def test_all_sorted_by_last_then_first(authors, sample_library, flintstones):
    names = [(a.first_name, a.last_name) for a in authors.all(sample_library.id)]
    assert names == [("Fred", "Flintstone"), ("Wilma", "Flintstone"), ("Barney", "Rubble")]

def test_all_scoped_to_library(authors, other_library, flintstones):
    assert authors.all(other_library.id) == []

def test_all_name_match_first_or_last(authors, sample_library, flintstones):
    # First word against first names, second word against last names
    names = [a.first_name for a in authors.all(sample_library.id, {"name": "Fred Flint"})]
    assert names == ["Fred", "Wilma"]

def test_all_single_word_matches_either_part(authors, sample_library, flintstones):
    assert [a.first_name for a in authors.all(sample_library.id, {"name": "rubble"})] == ["Barney"]
    assert [a.first_name for a in authors.all(sample_library.id, {"name": "wil"})] == ["Wilma"]

def test_find_in_other_library(authors, sample_author, other_library):
    with pytest.raises(NotFound) as excinfo:
        authors.find(other_library.id, sample_author.id)
    assert excinfo.value.message == f"id: Missing Author {sample_author.id}"

def test_find_with_series(authors, sample_library, sample_author, sample_series):
    authors.series_connect(sample_library.id, sample_author.id, sample_series.id)
    author = authors.find(sample_library.id, sample_author.id, {"withSeries": True})
    assert "author_series" not in inspect(author).unloaded
    assert [link.series.name for link in author.author_series] == ["Bedrock Tales"]

def test_exact(authors, sample_library, sample_author):
    assert authors.exact(sample_library.id, "Fred", "Flintstone").id == sample_author.id

def test_exact_missing(authors, sample_library, sample_author):
    with pytest.raises(NotFound) as excinfo:
        authors.exact(sample_library.id, "Fred", "Nobody")
    assert excinfo.value.message == "name: Missing Author 'Fred Nobody'"

def test_update_keeps_owner(authors, sample_library, sample_author, other_library):
    author = authors.update(sample_library.id, sample_author.id, {
        "notes": "Quarry worker", "libraryId": other_library.id, "id": 12345
    })
    assert author.id == sample_author.id
    assert author.library_id == sample_library.id
    assert author.notes == "Quarry worker"

def test_update_with_unchanged_names(authors, sample_library, sample_author):
    author = authors.update(sample_library.id, sample_author.id, {"firstName": "Fred", "lastName": "Flintstone"})
    assert author.first_name == "Fred"

def test_update_one_part_collides(authors, sample_library, flintstones):
    wilma = flintstones[2]
    with pytest.raises(NotUnique) as excinfo:
        authors.update(sample_library.id, wilma.id, {"firstName": "Fred"})
    assert excinfo.value.message == "name: Author name 'Fred Flintstone' is already in use in this Library"

def test_update_one_part(authors, sample_library, flintstones):
    barney = authors.update(sample_library.id, flintstones[1].id, {"lastName": "Flintstone"})
    assert (barney.first_name, barney.last_name) == ("Barney", "Flintstone")

def test_remove(authors, sample_library, sample_author):
    author_id = sample_author.id
    removed = authors.remove(sample_library.id, author_id)
    assert removed.first_name == "Fred"
    with pytest.raises(NotFound):
        authors.find(sample_library.id, author_id)

def test_series_connect_cycle(authors, db_session, sample_library, sample_author, sample_series):
    """Scenario: connect, repeat, disconnect, repeat"""
    author = authors.series_connect(sample_library.id, sample_author.id, sample_series.id, principal=True)
    assert author.id == sample_author.id
    link = db_session.get(AuthorSeries, {"author_id": sample_author.id, "series_id": sample_series.id})
    assert link.principal is True

    with pytest.raises(NotUnique) as excinfo:
        authors.series_connect(sample_library.id, sample_author.id, sample_series.id, principal=True)
    assert excinfo.value.message == (
        f"connect: Author ID {sample_author.id} and Series ID {sample_series.id} are already connected"
    )
    assert excinfo.value.context == "AuthorActions.series_connect"

    authors.series_disconnect(sample_library.id, sample_author.id, sample_series.id)
    with pytest.raises(NotFound) as excinfo:
        authors.series_disconnect(sample_library.id, sample_author.id, sample_series.id)
    assert excinfo.value.message == (
        f"disconnect: Author ID {sample_author.id} and Series ID {sample_series.id} are not connected"
    )

    # And the pair can be linked again
    authors.series_connect(sample_library.id, sample_author.id, sample_series.id)

def test_series_connect_missing_series(authors, sample_library, sample_author):
    with pytest.raises(NotFound) as excinfo:
        authors.series_connect(sample_library.id, sample_author.id, 9999)
    assert excinfo.value.message == "id: Missing Series 9999"

def test_series_connect_missing_author(authors, sample_library, sample_series):
    with pytest.raises(NotFound) as excinfo:
        authors.series_connect(sample_library.id, 9999, sample_series.id)
    assert excinfo.value.message == "id: Missing Author 9999"

def test_connect_across_libraries(authors, db_session, sample_author, other_library):
    foreign = SeriesActions(db_session).insert(other_library.id, {"name": "Elsewhere"})
    with pytest.raises(NotFound):
        authors.series_connect(sample_author.library_id, sample_author.id, foreign.id)

def test_story_connect_defaults_principal(authors, db_session, sample_library, sample_author, sample_story):
    authors.story_connect(sample_library.id, sample_author.id, sample_story.id)
    link = db_session.get(AuthorStory, {"author_id": sample_author.id, "story_id": sample_story.id})
    assert link.principal is False
    authors.story_disconnect(sample_library.id, sample_author.id, sample_story.id)
    assert db_session.execute(select(func.count()).select_from(AuthorStory)).scalar() == 0

def test_volume_connect_cycle(authors, sample_library, sample_author, sample_volume):
    authors.volume_connect(sample_library.id, sample_author.id, sample_volume.id, principal=True)
    with pytest.raises(NotUnique):
        authors.volume_connect(sample_library.id, sample_author.id, sample_volume.id)
    authors.volume_disconnect(sample_library.id, sample_author.id, sample_volume.id)
    with pytest.raises(NotFound):
        authors.volume_disconnect(sample_library.id, sample_author.id, sample_volume.id)

def test_remove_drops_links(authors, db_session, sample_library, sample_author, sample_volume):
    authors.volume_connect(sample_library.id, sample_author.id, sample_volume.id)
    authors.remove(sample_library.id, sample_author.id)
    assert db_session.execute(select(func.count()).select_from(AuthorVolume)).scalar() == 0

def test_duplicate_update_rejected_by_storage(authors, sample_library, flintstones, monkeypatch):
    monkeypatch.setattr(authors, "check_unique", lambda *args, **kwargs: None)
    wilma = flintstones[2]
    with pytest.raises(NotUnique) as excinfo:
        authors.update(sample_library.id, wilma.id, {"firstName": "Fred"})
    assert excinfo.value.message == "name: Author name 'Fred Flintstone' is already in use in this Library"
    assert authors.find(sample_library.id, wilma.id).first_name == "Wilma"

def test_concurrent_connect_rejected_by_storage(
    authors, database, db_session, sample_library, sample_author, sample_series, monkeypatch
):
    """Another session links the pair after the already-connected check ran"""
    author_id, series_id = sample_author.id, sample_series.id
    with database.get_db() as other_session:
        other_session.add(AuthorSeries(author_id=author_id, series_id=series_id))

    real_get = db_session.get
    calls = []

    def stale_get(*args, **kwargs):
        calls.append(args)
        if len(calls) == 1:
            return None
        return real_get(*args, **kwargs)
    monkeypatch.setattr(db_session, "get", stale_get)

    with pytest.raises(NotUnique) as excinfo:
        authors.series_connect(sample_library.id, author_id, series_id)
    assert excinfo.value.message == (
        f"connect: Author ID {author_id} and Series ID {series_id} are already connected"
    )
    assert len(calls) == 2

    # The session was rolled back and is still usable
    authors.series_disconnect(sample_library.id, author_id, series_id)
    assert db_session.execute(select(func.count()).select_from(AuthorSeries)).scalar() == 0

def test_connect_storage_failure_is_server_error(authors, db_session, sample_library, sample_author, monkeypatch):
    """A failed link insert that is not a duplicate surfaces as ServerError"""
    # Let a missing Series through the existence check so the foreign key refuses the row
    monkeypatch.setattr(SeriesActions, "find", lambda self, *args, **kwargs: None)
    with pytest.raises(ServerError) as excinfo:
        authors.series_connect(sample_library.id, sample_author.id, 9999)
    assert isinstance(excinfo.value.inner, IntegrityError)
    assert excinfo.value.context == "AuthorActions.series_connect"

    assert [author.id for author in authors.all(sample_library.id)] == [sample_author.id]
    assert db_session.execute(select(func.count()).select_from(AuthorSeries)).scalar() == 0
