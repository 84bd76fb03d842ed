import typing

from dbdelta.data.config import Config
from dbdelta.data.cursor import Cursor
from dbdelta.data.log import Log

if typing.TYPE_CHECKING:
    from dbdelta.data.data_set import DataSet
    from dbdelta.data.data_set_assertion import DataSetAssertion
    from dbdelta.data.delta_assertion import DeltaAssertion

__all__ = ("Db",)


class Db:
    """Database context handed to data sources: the row source, the trace log and the options."""

    def __init__(self, *, cursor: Cursor, log: Log, config: Config):
        self._cursor: typing.Final[Cursor] = cursor
        self._log: typing.Final[Log] = log
        self._config: typing.Final[Config] = config

    @property
    def cursor(self) -> Cursor:
        return self._cursor

    @property
    def log(self) -> Log:
        return self._log

    @property
    def config(self) -> Config:
        return self._config

    def log_query(self, /, data_set: "DataSet") -> None:
        if self._config.log_queries:
            self._log.query(data_set=data_set)

    def log_snapshot(self, /, data_set: "DataSet") -> None:
        if self._config.log_snapshots:
            self._log.snapshot(data_set=data_set)

    def log_setup(self, *, sql: str, params: typing.Sequence[typing.Any] | None = None) -> None:
        if self._config.log_setup:
            self._log.setup(sql=sql, params=params)

    def log_data_set_operation(self, /, data_set: "DataSet") -> None:
        if self._config.log_setup:
            self._log.data_set(data_set=data_set)

    def log_delta_assertion(self, /, assertion: "DeltaAssertion") -> None:
        if self._config.log_assertions or (not assertion.passed and self._config.log_assertion_errors):
            self._log.delta_assertion(assertion=assertion)

    def log_data_set_assertion(self, /, assertion: "DataSetAssertion") -> None:
        if self._config.log_assertions or (not assertion.passed and self._config.log_assertion_errors):
            self._log.data_set_assertion(assertion=assertion)
