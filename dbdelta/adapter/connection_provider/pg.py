import contextlib
import typing

import psycopg

from dbdelta import data
from dbdelta.adapter.connection_provider import shared

__all__ = ("PgConnectionProvider",)


class PgConnectionProvider(data.ConnectionProvider):
    def __init__(self, *, db_config: data.DbConfig):
        self._db_config: typing.Final[data.DbConfig] = db_config

    @contextlib.contextmanager
    def connect(self) -> typing.Generator[psycopg.Connection | data.Error, None, None]:
        # noinspection PyBroadException
        try:
            if self._db_config.connection_string is not None:
                con = psycopg.connect(self._db_config.connection_string.get_secret_value())
            else:
                username, password = shared.credentials(db_config=self._db_config)
                con = psycopg.connect(
                    host=self._db_config.host,
                    dbname=self._db_config.db_name,
                    user=username,
                    password=password,
                )
        except Exception as e:
            yield data.Error.execution(
                "An error occurred while connecting to the database.",
                cause=e,
                db_config=self._db_config,
            )
        else:
            with shared.managed(con):
                with con.cursor() as cur:
                    cur.execute("SET SESSION lock_timeout = '5min'")
                    cur.execute("SET SESSION TIME ZONE 'UTC'")
                yield con
