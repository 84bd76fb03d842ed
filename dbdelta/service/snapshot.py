from loguru import logger

from dbdelta import data

__all__ = (
    "execute_query",
    "get_snapshot",
    "take_snapshot",
    "take_snapshots",
)


def execute_query(source: data.DataSource, /, *, take_snapshot: bool) -> data.DataSet | data.Error:
    """Run the query of a data source and materialise all of its rows.

    A failing query yields an error and leaves the current snapshot untouched.
    """
    rows = source.db.cursor.fetch_all(sql=source.sql, params=source.args)
    if isinstance(rows, data.Error):
        return rows

    for row in rows:
        if len(row) != source.column_count:
            return data.Error.execution(
                f"{source.column_count} columns expected, but the query returned a row with {len(row)}.",
                source=repr(source),
                sql=source.sql,
            )

    if take_snapshot:
        result = data.DataSet(source=source, rows=rows, read_only=True)
        source.set_snapshot(result)
        logger.debug(f"Took a snapshot of {source!r} with {result.size()} rows.")
        source.db.log_snapshot(result)
    else:
        result = data.DataSet(source=source, rows=rows)
        source.db.log_query(result)

    return result


def take_snapshot(source: data.DataSource, /) -> data.DataSet | data.Error:
    return execute_query(source, take_snapshot=True)


def take_snapshots(*sources: data.DataSource) -> None | data.Error:
    if not sources:
        return data.Error.usage("No data sources specified.")

    for source in sources:
        result = take_snapshot(source)
        if isinstance(result, data.Error):
            return result

    return None


def get_snapshot(source: data.DataSource, /) -> data.DataSet | data.Error:
    if source.snapshot is None:
        return data.Error.usage("No snapshot taken!", source=repr(source))

    return source.snapshot
