import pathlib

import pydantic
import pytest

from dbdelta import adapter, data
from dbdelta.adapter.connection_provider.sqlite import SqliteConnectionProvider


def test_create_sqlite_provider():
    db_config = data.DbConfig(db_id="test", api=data.API.SQLITE)

    assert isinstance(adapter.connection_provider.create(db_config=db_config), SqliteConnectionProvider)


def test_create_pg_provider():
    pytest.importorskip("psycopg")
    from dbdelta.adapter.connection_provider.pg import PgConnectionProvider

    db_config = data.DbConfig(
        db_id="pg",
        api=data.API.PSYCOPG,
        connection_string=pydantic.SecretStr("postgresql://localhost/test"),
    )

    assert isinstance(adapter.connection_provider.create(db_config=db_config), PgConnectionProvider)


def test_work_is_committed_on_exit(tmp_path: pathlib.Path):
    provider = SqliteConnectionProvider(db_config=data.DbConfig(db_id="test", api=data.API.SQLITE, db_name=str(tmp_path / "test.db")))

    with provider.connect() as con:
        assert not isinstance(con, data.Error)
        con.execute("CREATE TABLE t (a INTEGER)")
        con.execute("INSERT INTO t VALUES (1)")

    with provider.connect() as con:
        assert con.execute("SELECT a FROM t").fetchall() == [(1,)]


def test_work_is_rolled_back_on_error(tmp_path: pathlib.Path):
    provider = SqliteConnectionProvider(db_config=data.DbConfig(db_id="test", api=data.API.SQLITE, db_name=str(tmp_path / "test.db")))

    with provider.connect() as con:
        con.execute("CREATE TABLE t (a INTEGER)")

    with pytest.raises(RuntimeError):
        with provider.connect() as con:
            con.execute("INSERT INTO t VALUES (1)")
            raise RuntimeError("boom")

    with provider.connect() as con:
        assert con.execute("SELECT COUNT(*) FROM t").fetchone() == (0,)


def test_connection_failure_is_returned_as_an_error(tmp_path: pathlib.Path):
    provider = SqliteConnectionProvider(
        db_config=data.DbConfig(db_id="test", api=data.API.SQLITE, db_name=str(tmp_path / "missing" / "test.db"))
    )

    with provider.connect() as con:
        assert isinstance(con, data.ExecutionError)
