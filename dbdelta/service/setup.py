import itertools
import typing

from loguru import logger

from dbdelta import data

__all__ = (
    "delete",
    "delete_all",
    "drop",
    "execute",
    "insert",
    "populate",
    "populate_if_changed",
    "truncate",
    "update",
)


def insert(data_set: data.DataSet, /) -> None | data.Error:
    table = _as_table(data_set)
    if isinstance(table, data.Error):
        return table

    if data_set.is_empty():
        return data.Error.usage("Empty data set.", table=table.name)

    table.set_dirty(True)

    return _insert(table=table, data_set=data_set)


def populate(data_set: data.DataSet, /) -> None | data.Error:
    """Replace the contents of a table with a data set, which becomes its snapshot."""
    table = _as_table(data_set)
    if isinstance(table, data.Error):
        return table

    table.set_dirty(True)

    return _populate(table=table, data_set=data_set)


def populate_if_changed(data_set: data.DataSet, /) -> None | data.Error:
    table = _as_table(data_set)
    if isinstance(table, data.Error):
        return table

    if not table.dirty:
        logger.debug(f"{table!r} is unchanged, skipping populate.")
        return None

    return _populate(table=table, data_set=data_set)


def update(data_set: data.DataSet, /) -> None | data.Error:
    table = _as_table(data_set)
    if isinstance(table, data.Error):
        return table

    if not table.key_columns:
        return data.Error.usage("No key columns defined.", table=table.name)

    columns_to_update = [col for col in table.column_names if col not in table.key_columns]
    if not columns_to_update:
        return data.Error.usage("No columns to update.", table=table.name)

    assignments = ", ".join(f"{table.sql_column_name(col)} = ?" for col in columns_to_update)
    sql = f"UPDATE {table.name} SET {assignments} WHERE {_key_predicate(table)}"
    param_index = [table.column_names.index(col) for col in (*columns_to_update, *table.key_columns)]

    table.set_dirty(True)

    return _data_set_operation(table=table, data_set=data_set, sql=sql, param_index=param_index)


def delete(data_set: data.DataSet, /) -> None | data.Error:
    table = _as_table(data_set)
    if isinstance(table, data.Error):
        return table

    if not table.key_columns:
        return data.Error.usage("No key columns defined.", table=table.name)

    sql = f"DELETE FROM {table.name} WHERE {_key_predicate(table)}"
    param_index = [table.column_names.index(col) for col in table.key_columns]

    table.set_dirty(True)

    return _data_set_operation(table=table, data_set=data_set, sql=sql, param_index=param_index)


def delete_all(
    table: data.Table,
    /,
    *,
    where: str | None = None,
    args: typing.Sequence[typing.Any] = (),
) -> int | data.Error:
    table.set_dirty(True)

    if where is None:
        return _delete_all(table)

    sql = f"DELETE FROM {table.name} WHERE {where}"
    table.db.log_setup(sql=sql, params=args)
    return table.db.cursor.execute(sql=sql, params=args)


def truncate(table: data.Table, /) -> None | data.Error:
    sql = f"TRUNCATE TABLE {table.name}"
    table.set_dirty(True)
    table.db.log_setup(sql=sql)

    result = table.db.cursor.execute(sql=sql, params=None)
    if isinstance(result, data.Error):
        return result

    return None


def drop(db: data.Db, table_name: str, /) -> None | data.Error:
    sql = f"DROP TABLE {table_name}"
    db.log_setup(sql=sql)

    result = db.cursor.execute(sql=sql, params=None)
    if isinstance(result, data.Error):
        return result

    return None


def execute(db: data.Db, sql: str, /, args: typing.Sequence[typing.Any] = ()) -> int | data.Error:
    db.log_setup(sql=sql, params=args)
    return db.cursor.execute(sql=sql, params=args)


def _as_table(data_set: data.DataSet, /) -> data.Table | data.Error:
    if data_set is None:
        return data.Error.usage("Null data set specified.")

    if not isinstance(data_set.source, data.Table):
        return data.Error.usage("Data set is not defined for a table.", source=repr(data_set.source))

    return data_set.source


def _populate(*, table: data.Table, data_set: data.DataSet) -> None | data.Error:
    deleted = _delete_all(table)
    if isinstance(deleted, data.Error):
        return deleted

    if not data_set.is_empty():
        inserted = _insert(table=table, data_set=data_set)
        if isinstance(inserted, data.Error):
            return inserted

    table.set_snapshot(data_set)

    return None


def _delete_all(table: data.Table, /) -> int | data.Error:
    sql = f"DELETE FROM {table.name}"
    table.db.log_setup(sql=sql)
    return table.db.cursor.execute(sql=sql, params=None)


def _insert(*, table: data.Table, data_set: data.DataSet) -> None | data.Error:
    sql = (
        f"INSERT INTO {table.name} ({', '.join(table.sql_column_name(col) for col in table.column_names)}) "
        f"VALUES ({', '.join('?' for _ in table.column_names)})"
    )
    return _data_set_operation(
        table=table,
        data_set=data_set,
        sql=sql,
        param_index=list(range(table.column_count)),
    )


def _data_set_operation(
    *,
    table: data.Table,
    data_set: data.DataSet,
    sql: str,
    param_index: typing.Sequence[int],
) -> None | data.Error:
    for row in data_set:
        if len(row) != table.column_count:
            return data.Error.usage("Invalid number of columns for update.", table=table.name, row=row)

    db = table.db
    db.log_data_set_operation(data_set)
    db.log_setup(sql=sql)

    params = ([row[i] for i in param_index] for row in data_set)
    while batch := list(itertools.islice(params, db.config.batch_size)):
        result = db.cursor.execute_many(sql=sql, params=batch)
        if isinstance(result, data.Error):
            return result

    return None


def _key_predicate(table: data.Table, /) -> str:
    return " AND ".join(f"{table.sql_column_name(col)} = ?" for col in table.key_columns)
