# tests/test_sa/test_queries.py
from sqlalchemy.dialects import sqlite

from catalog.sa.queries import AuthorQueries, LibraryQueries, SeriesQueries, UserQueries
from catalog.schemas import (
    AuthorAllOptions, AuthorFindOptions, LibraryAllOptions, SeriesAllOptions, UserAllOptions
)

def compile_sql(clause) -> str:
    return str(clause.compile(dialect=sqlite.dialect(), compile_kwargs={"literal_binds": True}))

def test_include_nothing_requested():
    queries = AuthorQueries()
    assert queries.include(None) is None
    assert queries.include(AuthorFindOptions()) is None

def test_include_requested_edges():
    loaders = AuthorQueries().include(AuthorFindOptions(with_library=True, with_series=True))
    assert len(loaders) == 2

def test_order_by():
    assert [compile_sql(c) for c in SeriesQueries().order_by()] == ["series.name ASC"]
    assert [compile_sql(c) for c in AuthorQueries().order_by()] == [
        "author.last_name ASC", "author.first_name ASC"
    ]
    assert compile_sql(UserQueries().order_by()[0]).endswith("username ASC")

def test_where_scopes_to_library():
    criteria = SeriesQueries().where(7, SeriesAllOptions())
    assert [compile_sql(c) for c in criteria] == ["series.library_id = 7"]

def test_library_and_user_are_unscoped():
    assert LibraryQueries().scope(7) == []
    assert UserQueries().where(None, UserAllOptions()) == []

def test_where_active_and_name():
    criteria = SeriesQueries().where(1, SeriesAllOptions(active=False, name="Rock"))
    sql = " AND ".join(compile_sql(c) for c in criteria)
    assert "series.active" in sql
    assert "'Rock'" in sql
    assert "ESCAPE" in sql

def test_library_scope_is_exact():
    criteria = LibraryQueries().where(None, LibraryAllOptions(scope="scope1"))
    assert [compile_sql(c) for c in criteria] == ["library.scope = 'scope1'"]

def test_author_name_two_words():
    criteria = AuthorQueries().where(1, AuthorAllOptions(name="Fred Flint"))
    sql = compile_sql(criteria[-1])
    assert " OR " in sql
    assert "'Fred'" in sql
    assert "'Flint'" in sql

def test_author_name_one_word():
    sql = compile_sql(AuthorQueries().where(1, AuthorAllOptions(name="Fred"))[-1])
    assert sql.count("'Fred'") == 2

def test_skip_and_take():
    queries = SeriesQueries()
    assert queries.skip(SeriesAllOptions(offset=3)) == 3
    assert queries.take(SeriesAllOptions(limit=5)) == 5
    # Zero is the same as not asking
    assert queries.skip(SeriesAllOptions(offset=0)) is None
    assert queries.take(SeriesAllOptions(limit=0)) is None
    assert queries.skip(None) is None

def test_select_all_paginates():
    sql = compile_sql(SeriesQueries().select_all(2, SeriesAllOptions(limit=10, offset=20)))
    assert "ORDER BY series.name ASC" in sql
    assert "LIMIT 10 OFFSET 20" in sql

def test_select_exact_matches_every_key_column():
    sql = compile_sql(AuthorQueries().select_exact(3, {"first_name": "Fred", "last_name": "Flintstone"}))
    assert "author.first_name = 'Fred'" in sql
    assert "author.last_name = 'Flintstone'" in sql
    assert "author.library_id = 3" in sql
