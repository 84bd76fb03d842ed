import contextlib
import typing

import pyodbc

from dbdelta import data
from dbdelta.adapter.connection_provider import shared

__all__ = ("OdbcConnectionProvider",)


class OdbcConnectionProvider(data.ConnectionProvider):
    def __init__(self, *, db_config: data.DbConfig):
        self._db_config: typing.Final[data.DbConfig] = db_config

    @contextlib.contextmanager
    def connect(self) -> typing.Generator[pyodbc.Connection | data.Error, None, None]:
        # noinspection PyBroadException
        try:
            if self._db_config.connection_string is not None:
                connection_string = self._db_config.connection_string.get_secret_value()
            else:
                username, password = shared.credentials(db_config=self._db_config)
                connection_string = (
                    f"SERVER={self._db_config.host};DATABASE={self._db_config.db_name};"
                    f"UID={username};PWD={password}"
                )
            con = pyodbc.connect(connection_string, autocommit=False)
        except Exception as e:
            yield data.Error.execution(
                "An error occurred while connecting to the database.",
                cause=e,
                db_config=self._db_config,
            )
        else:
            with shared.managed(con):
                yield con
