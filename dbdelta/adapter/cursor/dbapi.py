import typing

from loguru import logger

from dbdelta import data
from dbdelta.adapter.cursor import shared
from dbdelta.adapter.statement_pool import StatementPool

__all__ = ("DbApiCursor",)


class DbApiCursor(data.Cursor):
    """Row source over any DB-API 2.0 connection (sqlite3, psycopg, pyodbc)."""

    def __init__(
        self,
        *,
        connection: typing.Any,
        reuse_statements: bool = True,
        paramstyle: str | None = None,
    ):
        self._connection: typing.Final[typing.Any] = connection
        self._paramstyle: typing.Final[str] = paramstyle or shared.detect_paramstyle(connection)
        self._pool: typing.Final[StatementPool] = StatementPool(connection=connection, reuse=reuse_statements)

    @property
    def connection(self) -> typing.Any:
        return self._connection

    @property
    def pool(self) -> StatementPool:
        return self._pool

    def describe(
        self,
        *,
        sql: str,
        params: typing.Sequence[typing.Any] | None,
    ) -> tuple[data.Column, ...] | data.Error:
        try:
            with self._pool.cursor(sql) as cur:
                self._execute(cur=cur, sql=sql, params=params)
                if cur.description is None:
                    return data.Error.usage("The statement does not return rows.", sql=sql)

                columns = tuple(data.Column(name=d[0], type_code=d[1]) for d in cur.description)
                # no pending result may be left on a cached cursor
                cur.fetchall()

            return columns
        except Exception as e:
            return data.Error.execution(str(e), cause=e, sql=sql, params=_params(params))

    def execute(
        self,
        *,
        sql: str,
        params: typing.Sequence[typing.Any] | None,
    ) -> int | data.Error:
        try:
            with self._pool.cursor(sql) as cur:
                self._execute(cur=cur, sql=sql, params=params)
                return max(cur.rowcount, 0)
        except Exception as e:
            return data.Error.execution(str(e), cause=e, sql=sql, params=_params(params))

    def execute_many(
        self,
        *,
        sql: str,
        params: typing.Iterable[typing.Sequence[typing.Any]],
    ) -> None | data.Error:
        param_list = [list(p) for p in params]
        if not param_list:
            return data.Error.usage("execute_many was called with no parameters.", sql=sql)

        try:
            with self._pool.cursor(sql) as cur:
                cur.executemany(
                    shared.to_paramstyle(sql=sql, paramstyle=self._paramstyle, has_params=True),
                    param_list,
                )
            return None
        except Exception as e:
            return data.Error.execution(str(e), cause=e, sql=sql, batch_size=len(param_list))

    def fetch_all(
        self,
        *,
        sql: str,
        params: typing.Sequence[typing.Any] | None,
    ) -> tuple[data.Row, ...] | data.Error:
        try:
            with self._pool.cursor(sql) as cur:
                self._execute(cur=cur, sql=sql, params=params)
                result = cur.fetchall()

            return tuple(data.Row(row) for row in result)
        except Exception as e:
            return data.Error.execution(str(e), cause=e, sql=sql, params=_params(params))

    def close(self) -> None:
        self._pool.close()

    def _execute(self, *, cur: typing.Any, sql: str, params: typing.Sequence[typing.Any] | None) -> None:
        logger.debug(f"Executing {sql!r} with params {params!r}.")
        if params:
            cur.execute(shared.to_paramstyle(sql=sql, paramstyle=self._paramstyle, has_params=True), list(params))
        else:
            cur.execute(shared.to_paramstyle(sql=sql, paramstyle=self._paramstyle, has_params=False))


def _params(params: typing.Sequence[typing.Any] | None, /) -> tuple[typing.Any, ...] | None:
    return None if params is None else tuple(params)
