import contextlib
import sqlite3
import typing

from dbdelta import data
from dbdelta.adapter.connection_provider import shared

__all__ = ("SqliteConnectionProvider",)


class SqliteConnectionProvider(data.ConnectionProvider):
    def __init__(self, *, db_config: data.DbConfig):
        self._db_config: typing.Final[data.DbConfig] = db_config

    @contextlib.contextmanager
    def connect(self) -> typing.Generator[sqlite3.Connection | data.Error, None, None]:
        # noinspection PyBroadException
        try:
            con = sqlite3.connect(self._db_config.db_name or ":memory:")
        except Exception as e:
            yield data.Error.execution(
                "An error occurred while connecting to the database.",
                cause=e,
                db_config=self._db_config,
            )
        else:
            with shared.managed(con):
                yield con
