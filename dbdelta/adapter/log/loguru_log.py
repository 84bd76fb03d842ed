import pathlib
import typing

from loguru import logger

from dbdelta import data
from dbdelta.adapter.log import shared

__all__ = ("LoguruLog",)


class LoguruLog(data.Log):
    """Writes traces as loguru records with the details bound as extras.

    When ``log_file`` is given, the traces are also written to that file as json lines.
    """

    def __init__(self, *, log_file: pathlib.Path | None = None, level: str = "DEBUG"):
        self._logger: typing.Final = logger.bind(dbdelta_event=None)
        self._sink_id: int | None = None

        if log_file is not None:
            self._sink_id = logger.add(
                log_file,
                level=level,
                serialize=True,
                rotation="5 MB",
                retention="7 days",
                filter=lambda record: record["extra"].get("dbdelta_event") is not None,
            )

    def close(self) -> None:
        if self._sink_id is not None:
            logger.remove(self._sink_id)
            self._sink_id = None

    def data_set(self, *, data_set: data.DataSet) -> None:
        self._logger.bind(
            dbdelta_event="data_set",
            source=repr(data_set.source),
            rows=shared.rows(data_set),
        ).debug(f"Data set for {data_set.source!r} with {data_set.size()} rows.")

    def data_set_assertion(self, *, assertion: data.DataSetAssertion) -> None:
        bound = self._logger.bind(dbdelta_event="data_set_assertion", **shared.data_set_assertion_record(assertion))
        if assertion.passed:
            bound.info(f"Data set assertion on {assertion.source_name} passed.")
        else:
            bound.warning(f"Data set assertion on {assertion.source_name} failed: {assertion.message or ''}")

    def delta_assertion(self, *, assertion: data.DeltaAssertion) -> None:
        bound = self._logger.bind(dbdelta_event="delta_assertion", **shared.delta_assertion_record(assertion))
        if assertion.passed:
            bound.info(f"Delta assertion on {assertion.source_name} passed.")
        else:
            bound.warning(f"Delta assertion on {assertion.source_name} failed: {assertion.message or ''}")

    def query(self, *, data_set: data.DataSet) -> None:
        self._logger.bind(
            dbdelta_event="query",
            source=repr(data_set.source),
            sql=data_set.source.sql,
            rows=shared.rows(data_set),
        ).debug(f"Query on {data_set.source!r} returned {data_set.size()} rows.")

    def setup(self, *, sql: str, params: typing.Sequence[typing.Any] | None) -> None:
        self._logger.bind(
            dbdelta_event="setup",
            sql=sql,
            params=None if params is None else list(params),
        ).debug(f"Executing {sql!r}.")

    def snapshot(self, *, data_set: data.DataSet) -> None:
        self._logger.bind(
            dbdelta_event="snapshot",
            source=repr(data_set.source),
            sql=data_set.source.sql,
            rows=shared.rows(data_set),
        ).debug(f"Snapshot of {data_set.source!r} with {data_set.size()} rows.")
