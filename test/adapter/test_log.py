import json
import pathlib

import dbdelta
from dbdelta import adapter, data
from dbdelta.adapter.log import LoguruLog, MemoryLog, NullLog


def test_create_returns_a_null_log_when_nothing_is_logged():
    config = data.Config(log_assertion_errors=False)

    assert isinstance(adapter.log.create(config=config), NullLog)


def test_create_returns_a_loguru_log():
    assert isinstance(adapter.log.create(config=data.Config()), LoguruLog)


def test_memory_log_records_failed_assertion_views(customer_table_fixture: data.Table, memory_log_fixture: MemoryLog):
    dbdelta.take_snapshot(customer_table_fixture)
    dbdelta.execute(customer_table_fixture.db, "DELETE FROM customer WHERE customer_id = ?", 3)
    memory_log_fixture.clear()

    result = dbdelta.service.assertion.assert_unchanged(customer_table_fixture)

    assert isinstance(result, data.DbAssertionError)

    (record,) = memory_log_fixture.events("delta_assertion")
    assert record["source"] == "Table(name='customer')"
    assert record["passed"] is False
    assert record["columns"] == ["CUSTOMER_ID", "NAME", "BALANCE"]
    assert record["old_data_expected"] == []
    assert record["old_data_errors_expected"] == []
    assert record["old_data_errors_actual"] == [[3, "Bill", 0.0]]
    assert record["new_data_errors_actual"] == []
    assert [r.event for r in memory_log_fixture.records] == ["query", "delta_assertion"]


def test_loguru_log_writes_json_lines(tmp_path: pathlib.Path, customer_table_fixture: data.Table):
    log_file = tmp_path / "dbdelta.log"
    log = LoguruLog(log_file=log_file)
    try:
        expected = dbdelta.rows(customer_table_fixture, (1, "Steve", 10.5))
        log.data_set(data_set=expected)
        log.setup(sql="DELETE FROM customer", params=None)
    finally:
        log.close()

    with log_file.open("r") as fh:
        records = [json.loads(line)["record"] for line in fh if line.strip()]

    assert [r["extra"]["dbdelta_event"] for r in records] == ["data_set", "setup"]
    assert records[0]["extra"]["rows"] == [[1, "Steve", 10.5]]
    assert records[1]["extra"]["sql"] == "DELETE FROM customer"
