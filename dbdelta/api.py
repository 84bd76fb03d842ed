"""Entry points for test code.

The service layer returns errors as values; the functions here raise them instead, so a
failed assertion surfaces as a ``DbAssertionError`` (an ``AssertionError``) and a misuse of
the api as a ``UsageError``.
"""
import contextlib
import pathlib
import typing

from dbdelta import adapter, data, service

__all__ = (
    "assert_delta",
    "assert_deleted",
    "assert_empty",
    "assert_equals",
    "assert_inserted",
    "assert_state",
    "assert_unchanged",
    "changed",
    "connect",
    "database",
    "delete",
    "delete_all",
    "drop",
    "dump",
    "empty",
    "execute",
    "insert",
    "load_config",
    "populate",
    "populate_if_changed",
    "query",
    "rows",
    "table",
    "take_snapshot",
    "take_snapshots",
    "truncate",
    "update",
)

T = typing.TypeVar("T")


def _ok(result: T | data.Error, /) -> T:
    if isinstance(result, data.Error):
        raise result
    return result


def load_config(config_file: pathlib.Path, /) -> data.Config:
    return _ok(adapter.config.load(config_file=config_file))


def database(
    connection: typing.Any,
    /,
    *,
    config: data.Config | None = None,
    log: data.Log | None = None,
) -> data.Db:
    """Wrap an open DB-API connection."""
    config = config or data.Config()

    if log is None:
        log = _ok(adapter.log.create(config=config))

    cursor = adapter.cursor.DbApiCursor(connection=connection, reuse_statements=config.reuse_statements)

    return data.Db(cursor=cursor, log=log, config=config)


@contextlib.contextmanager
def connect(
    db_id: str,
    /,
    *,
    config: data.Config,
    log: data.Log | None = None,
) -> typing.Generator[data.Db, None, None]:
    """Open a connection to one of the configured databases.

    Work is committed when the block exits normally and rolled back otherwise. A log
    created for the connection is closed with it; a log passed in is left open.
    """
    db_config = config.db(db_id)
    if db_config is None:
        raise data.Error.usage(f"No database with the id, {db_id!r}, is configured.")

    connection_provider = _ok(adapter.connection_provider.create(db_config=db_config))
    with connection_provider.connect() as con:
        con = _ok(con)
        db = database(con, config=config, log=log)
        try:
            yield db
        finally:
            typing.cast(adapter.cursor.DbApiCursor, db.cursor).close()
            if log is None and isinstance(db.log, adapter.log.LoguruLog):
                db.log.close()


def table(
    db: data.Db,
    name: str,
    /,
    *,
    columns: typing.Sequence[str] | None = None,
    key_columns: typing.Sequence[str] = (),
) -> data.Table:
    return _ok(service.data_source.table(db=db, name=name, columns=columns, key_columns=key_columns))


def query(db: data.Db, sql: str, /, *args: typing.Any) -> data.Query:
    return _ok(service.data_source.query(db=db, sql=sql, args=args))


def rows(source: data.DataSource, /, *values: typing.Sequence[typing.Any]) -> data.DataSet:
    """A new data set for a source, optionally filled with rows of values."""
    return data.DataSet(source=source).rows(values)


def empty(source: data.DataSource, /) -> data.DataSet:
    return data.DataSet.empty(source)


def take_snapshot(source: data.DataSource, /) -> data.DataSet:
    return _ok(service.snapshot.take_snapshot(source))


def take_snapshots(*sources: data.DataSource) -> None:
    _ok(service.snapshot.take_snapshots(*sources))


def changed(*sources: data.DataSource) -> bool:
    if not sources:
        raise data.Error.usage("No data sources specified.")

    return any(source.dirty for source in sources)


def dump(target: data.DataSet | data.DataSource, /, *, log: data.Log | None = None) -> None:
    """Write a data set, or the current contents of a data source, to a log."""
    if isinstance(target, data.DataSource):
        target = _ok(service.snapshot.execute_query(target, take_snapshot=False))

    (log or adapter.log.LoguruLog()).data_set(data_set=target)


def assert_unchanged(*sources: data.DataSource, message: str | None = None) -> None:
    _ok(service.assertion.assert_unchanged(*sources, message=message))


def assert_deleted(*data_sets: data.DataSet, message: str | None = None) -> None:
    _ok(service.assertion.assert_deleted(*data_sets, message=message))


def assert_inserted(*data_sets: data.DataSet, message: str | None = None) -> None:
    _ok(service.assertion.assert_inserted(*data_sets, message=message))


def assert_delta(old_data: data.DataSet, new_data: data.DataSet, /, *, message: str | None = None) -> None:
    _ok(service.assertion.assert_delta(old_data, new_data, message=message))


def assert_state(*data_sets: data.DataSet, message: str | None = None) -> None:
    _ok(service.assertion.assert_state(*data_sets, message=message))


def assert_empty(*sources: data.DataSource, message: str | None = None) -> None:
    _ok(service.assertion.assert_empty(*sources, message=message))


def assert_equals(expected: data.DataSet, actual: data.DataSet, /, *, message: str | None = None) -> None:
    _ok(service.assertion.assert_equals(expected, actual, message=message))


def insert(data_set: data.DataSet, /) -> None:
    _ok(service.setup.insert(data_set))


def populate(data_set: data.DataSet, /) -> None:
    _ok(service.setup.populate(data_set))


def populate_if_changed(data_set: data.DataSet, /) -> None:
    _ok(service.setup.populate_if_changed(data_set))


def update(data_set: data.DataSet, /) -> None:
    _ok(service.setup.update(data_set))


def delete(data_set: data.DataSet, /) -> None:
    _ok(service.setup.delete(data_set))


def delete_all(table_: data.Table, /, *, where: str | None = None, args: typing.Sequence[typing.Any] = ()) -> int:
    return _ok(service.setup.delete_all(table_, where=where, args=args))


def truncate(table_: data.Table, /) -> None:
    _ok(service.setup.truncate(table_))


def drop(db: data.Db, table_name: str, /) -> None:
    _ok(service.setup.drop(db, table_name))


def execute(db: data.Db, sql: str, /, *args: typing.Any) -> int:
    return _ok(service.setup.execute(db, sql, args))
