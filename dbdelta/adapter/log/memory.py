import dataclasses
import typing

from dbdelta import data
from dbdelta.adapter.log import shared

__all__ = ("LogRecord", "MemoryLog")


@dataclasses.dataclass(frozen=True, kw_only=True)
class LogRecord:
    event: str
    details: dict[str, typing.Any]


class MemoryLog(data.Log):
    """Keeps traces in a list so a test harness can inspect them."""

    def __init__(self) -> None:
        self._records: typing.Final[list[LogRecord]] = []

    @property
    def records(self) -> tuple[LogRecord, ...]:
        return tuple(self._records)

    def events(self, /, event: str) -> list[dict[str, typing.Any]]:
        return [r.details for r in self._records if r.event == event]

    def clear(self) -> None:
        self._records.clear()

    def data_set(self, *, data_set: data.DataSet) -> None:
        self._add("data_set", source=repr(data_set.source), rows=shared.rows(data_set))

    def data_set_assertion(self, *, assertion: data.DataSetAssertion) -> None:
        self._add("data_set_assertion", **shared.data_set_assertion_record(assertion))

    def delta_assertion(self, *, assertion: data.DeltaAssertion) -> None:
        self._add("delta_assertion", **shared.delta_assertion_record(assertion))

    def query(self, *, data_set: data.DataSet) -> None:
        self._add("query", source=repr(data_set.source), rows=shared.rows(data_set))

    def setup(self, *, sql: str, params: typing.Sequence[typing.Any] | None) -> None:
        self._add("setup", sql=sql, params=None if params is None else list(params))

    def snapshot(self, *, data_set: data.DataSet) -> None:
        self._add("snapshot", source=repr(data_set.source), rows=shared.rows(data_set))

    def _add(self, event: str, /, **details: typing.Any) -> None:
        self._records.append(LogRecord(event=event, details=details))
