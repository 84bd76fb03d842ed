from __future__ import annotations

import abc
import typing

if typing.TYPE_CHECKING:
    from dbdelta.data.data_set import DataSet
    from dbdelta.data.data_set_assertion import DataSetAssertion
    from dbdelta.data.delta_assertion import DeltaAssertion

__all__ = ("Log",)


class Log(abc.ABC):
    """Sink for structured assertion traces."""

    @abc.abstractmethod
    def data_set(self, *, data_set: DataSet) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    def data_set_assertion(self, *, assertion: DataSetAssertion) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    def delta_assertion(self, *, assertion: DeltaAssertion) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    def query(self, *, data_set: DataSet) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    def setup(self, *, sql: str, params: typing.Sequence[typing.Any] | None) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    def snapshot(self, *, data_set: DataSet) -> None:
        raise NotImplementedError
