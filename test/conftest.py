import sqlite3
import typing

import pytest

import dbdelta
from dbdelta import data
from dbdelta.adapter.log import MemoryLog


@pytest.fixture(scope="function")
def sqlite_connection_fixture() -> typing.Generator[sqlite3.Connection, None, None]:
    con = sqlite3.connect(":memory:")
    con.execute("""
        CREATE TABLE customer (
            customer_id INTEGER PRIMARY KEY
        ,   name        TEXT NOT NULL
        ,   balance     REAL NULL
        )
    """)
    con.executemany(
        "INSERT INTO customer (customer_id, name, balance) VALUES (?, ?, ?)",
        [(1, "Steve", 10.5), (2, "Mandie", None), (3, "Bill", 0.0)],
    )
    yield con
    con.close()


@pytest.fixture(scope="function")
def memory_log_fixture() -> MemoryLog:
    return MemoryLog()


@pytest.fixture(scope="function")
def db_fixture(sqlite_connection_fixture: sqlite3.Connection, memory_log_fixture: MemoryLog) -> data.Db:
    return dbdelta.database(
        sqlite_connection_fixture,
        config=data.Config().full_logging(),
        log=memory_log_fixture,
    )


@pytest.fixture(scope="function")
def customer_table_fixture(db_fixture: data.Db) -> data.Table:
    return dbdelta.table(db_fixture, "customer", key_columns=["customer_id"])


@pytest.fixture(scope="function")
def pair_query_fixture(db_fixture: data.Db) -> data.Query:
    return data.Query(
        db=db_fixture,
        sql="SELECT 1 AS a, 2 AS b",
        args=(),
        columns=(data.Column(name="a", type_code=None), data.Column(name="b", type_code=None)),
    )
