# tests/test_sa/conftest.py
import pytest
from sqlalchemy.orm import Session

from catalog.sa.database import Database
from catalog.sa.models import Base
from catalog.sa.actions import (
    LibraryActions, AuthorActions, SeriesActions, StoryActions, VolumeActions, UserActions
)

@pytest.fixture(scope="session")
def database(tmp_path_factory):
    """Create a test database instance backed by a temporary SQLite file"""
    path = tmp_path_factory.mktemp("catalog") / "catalog.db"
    db = Database(f"sqlite:///{path}")
    db.init_db()
    yield db
    db.dispose()

@pytest.fixture(scope="function")
def db_session(database):
    """Create a new database session for a test"""
    session: Session = database.get_session()
    try:
        yield session
    finally:
        session.close()

@pytest.fixture(autouse=True)
def cleanup_db(database):
    """Clean up database tables after each test"""
    yield
    with database.engine.begin() as connection:
        for table in reversed(Base.metadata.sorted_tables):
            connection.execute(table.delete())

@pytest.fixture
def sample_library(db_session):
    return LibraryActions(db_session).insert({"name": "Test Library", "scope": "scope1"})

@pytest.fixture
def other_library(db_session):
    return LibraryActions(db_session).insert({"name": "Other Library", "scope": "scope2"})

@pytest.fixture
def sample_author(db_session, sample_library):
    return AuthorActions(db_session).insert(
        sample_library.id, {"firstName": "Fred", "lastName": "Flintstone"}
    )

@pytest.fixture
def sample_series(db_session, sample_library):
    return SeriesActions(db_session).insert(sample_library.id, {"name": "Bedrock Tales"})

@pytest.fixture
def sample_story(db_session, sample_library):
    return StoryActions(db_session).insert(sample_library.id, {"name": "The Quarry"})

@pytest.fixture
def sample_volume(db_session, sample_library):
    return VolumeActions(db_session).insert(
        sample_library.id, {"name": "Bedrock Omnibus", "location": "Kindle", "type": "Collection"}
    )

@pytest.fixture
def sample_user(db_session):
    return UserActions(db_session).insert({
        "name": "Fred Flintstone",
        "username": "fred",
        "password": "yabbadabbadoo",
        "scope": "scope1:admin",
    })
