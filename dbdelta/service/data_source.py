import typing

from loguru import logger

from dbdelta import data

__all__ = ("query", "table")


def table(
    *,
    db: data.Db,
    name: str,
    columns: typing.Sequence[str] | None = None,
    key_columns: typing.Sequence[str] = (),
) -> data.Table | data.Error:
    if not name:
        return data.Error.usage("A table name is required.")

    sql = data.table_query_sql(name=name, columns=columns)

    described = db.cursor.describe(sql=sql, params=None)
    if isinstance(described, data.Error):
        return described

    result = data.Table(
        db=db,
        name=name,
        columns=described,
        key_columns=key_columns,
        select_columns=columns,
    )

    missing = [col for col in result.key_columns if col not in result.column_names]
    if missing:
        return data.Error.usage(
            f"Key columns, {', '.join(missing)}, are not columns of {name}.",
            table=name,
            columns=result.column_names,
        )

    logger.debug(f"Created {result!r} with columns {', '.join(result.column_names)}.")

    return result


def query(
    *,
    db: data.Db,
    sql: str,
    args: typing.Sequence[typing.Any] = (),
) -> data.Query | data.Error:
    if not sql:
        return data.Error.usage("The sql for a query is required.")

    described = db.cursor.describe(sql=sql, params=args)
    if isinstance(described, data.Error):
        return described

    result = data.Query(db=db, sql=sql, args=args, columns=described)

    logger.debug(f"Created {result!r} with columns {', '.join(result.column_names)}.")

    return result
