import json
import pathlib
import sqlite3

import pytest

import dbdelta
from dbdelta import adapter, data
from dbdelta.adapter.log import MemoryLog


def test_delete_then_assert(customer_table_fixture: data.Table, db_fixture: data.Db):
    row_a = (1, "Steve", 10.5)
    dbdelta.take_snapshot(customer_table_fixture)

    dbdelta.execute(db_fixture, "DELETE FROM customer WHERE customer_id = ?", 1)

    dbdelta.assert_delta(dbdelta.rows(customer_table_fixture, row_a), dbdelta.empty(customer_table_fixture))

    with pytest.raises(AssertionError) as exc_info:
        dbdelta.assert_unchanged(customer_table_fixture, message="customer should not change")

    assert isinstance(exc_info.value, dbdelta.DbAssertionError)
    assert exc_info.value.kind == dbdelta.ErrorKind.ASSERTION_FAILED
    assert "customer should not change" in str(exc_info.value)
    assert list(exc_info.value.report.old_errors()) == [dbdelta.Row(row_a)]


def test_usage_errors_are_not_assertion_errors(customer_table_fixture: data.Table):
    with pytest.raises(dbdelta.UsageError) as exc_info:
        dbdelta.assert_unchanged(customer_table_fixture)

    assert not isinstance(exc_info.value, AssertionError)


def test_execution_errors_are_raised(db_fixture: data.Db):
    with pytest.raises(dbdelta.ExecutionError):
        dbdelta.table(db_fixture, "no_such_table")


def test_round_trip_through_setup(customer_table_fixture: data.Table):
    dbdelta.populate(dbdelta.rows(customer_table_fixture, (1, "a", None), (2, "b", None)))
    dbdelta.assert_unchanged(customer_table_fixture)
    assert not dbdelta.changed(customer_table_fixture)

    dbdelta.insert(dbdelta.rows(customer_table_fixture, (3, "c", None)))
    dbdelta.update(dbdelta.rows(customer_table_fixture, (1, "A", 1.0)))
    dbdelta.delete(dbdelta.rows(customer_table_fixture, (2, "b", None)))

    assert dbdelta.changed(customer_table_fixture)
    dbdelta.assert_delta(
        dbdelta.rows(customer_table_fixture, (1, "a", None), (2, "b", None)),
        dbdelta.rows(customer_table_fixture, (1, "A", 1.0), (3, "c", None)),
    )
    dbdelta.assert_state(dbdelta.rows(customer_table_fixture, (3, "c", None), (1, "A", 1.0)))

    assert dbdelta.delete_all(customer_table_fixture) == 2
    dbdelta.assert_empty(customer_table_fixture)


def test_changed_without_sources_is_a_usage_error():
    with pytest.raises(dbdelta.UsageError):
        dbdelta.changed()


def test_take_snapshots(customer_table_fixture: data.Table, db_fixture: data.Db):
    count = dbdelta.query(db_fixture, "SELECT COUNT(*) FROM customer WHERE balance > ?", 1)

    dbdelta.take_snapshots(customer_table_fixture, count)
    dbdelta.execute(db_fixture, "DELETE FROM customer WHERE customer_id = ?", 2)

    dbdelta.assert_unchanged(count)
    dbdelta.assert_deleted(dbdelta.rows(customer_table_fixture, (2, "Mandie", None)))


def test_assert_equals(customer_table_fixture: data.Table):
    snapshot = dbdelta.take_snapshot(customer_table_fixture)

    dbdelta.assert_equals(
        dbdelta.rows(customer_table_fixture, (3, "Bill", 0.0), (2, "Mandie", None), (1, "Steve", 10.5)),
        snapshot,
    )

    with pytest.raises(dbdelta.DbAssertionError):
        dbdelta.assert_equals(dbdelta.empty(customer_table_fixture), snapshot)


def test_dump(customer_table_fixture: data.Table):
    log = MemoryLog()

    dbdelta.dump(customer_table_fixture, log=log)
    dbdelta.dump(dbdelta.rows(customer_table_fixture, (9, "x", None)), log=log)

    assert [len(r["rows"]) for r in log.events("data_set")] == [3, 1]


def test_connect_to_a_configured_database(tmp_path: pathlib.Path):
    config_file = tmp_path / "config.json"
    with config_file.open("w") as fh:
        json.dump(
            {
                "log-assertion-errors": False,
                "databases": [{"db-id": "local", "api": "sqlite", "db-name": str(tmp_path / "local.db")}],
            },
            fh,
        )

    config = dbdelta.load_config(config_file)

    with dbdelta.connect("local", config=config) as db:
        dbdelta.execute(db, "CREATE TABLE item (item_id INTEGER, name TEXT)")
        item = dbdelta.table(db, "item", key_columns=["item_id"])
        dbdelta.take_snapshot(item)
        dbdelta.insert(dbdelta.rows(item, (1, "pen")))
        dbdelta.assert_inserted(dbdelta.rows(item, (1, "pen")))

    with sqlite3.connect(tmp_path / "local.db") as con:
        assert con.execute("SELECT * FROM item").fetchall() == [(1, "pen")]


def test_connect_to_an_unknown_database():
    with pytest.raises(dbdelta.UsageError):
        with dbdelta.connect("nope", config=data.Config()):
            pass


def test_connect_closes_the_log_it_creates(tmp_path: pathlib.Path):
    log_file = tmp_path / "trace.log"
    config = data.Config(
        log_file=log_file,
        databases=(data.DbConfig(db_id="local", api=data.API.SQLITE, db_name=str(tmp_path / "local.db")),),
    )

    for _ in range(3):
        with dbdelta.connect("local", config=config):
            pass

    with pytest.raises(dbdelta.DbAssertionError):
        with dbdelta.connect("local", config=config) as db:
            dbdelta.execute(db, "CREATE TABLE item (item_id INTEGER)")
            item = dbdelta.table(db, "item")
            dbdelta.take_snapshot(item)
            dbdelta.assert_inserted(dbdelta.rows(item, (1,)))

    with dbdelta.connect("local", config=config, log=MemoryLog()):
        pass

    with log_file.open("r") as fh:
        events = [json.loads(line)["record"]["extra"]["dbdelta_event"] for line in fh if line.strip()]

    assert events == ["delta_assertion"]


def test_connect_leaves_a_given_log_open(tmp_path: pathlib.Path):
    log_file = tmp_path / "trace.log"
    log = adapter.log.LoguruLog(log_file=log_file)
    config = data.Config(
        databases=(data.DbConfig(db_id="local", api=data.API.SQLITE, db_name=str(tmp_path / "local.db")),),
    )
    try:
        with dbdelta.connect("local", config=config, log=log):
            pass

        log.setup(sql="SELECT 1", params=None)
    finally:
        log.close()

    with log_file.open("r") as fh:
        assert len([line for line in fh if line.strip()]) == 1
