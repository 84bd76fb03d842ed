import abc
import typing

from dbdelta.data.column import Column
from dbdelta.data.error import Error
from dbdelta.data.row import Row

__all__ = ("Cursor",)


class Cursor(abc.ABC):
    """Source of ordered rows for a query.

    Statements use ``?`` placeholders. Failures are returned as an ``ExecutionError``
    wrapping the driver exception.
    """

    @abc.abstractmethod
    def describe(
        self,
        *,
        sql: str,
        params: typing.Sequence[typing.Any] | None,
    ) -> tuple[Column, ...] | Error:
        raise NotImplementedError

    @abc.abstractmethod
    def execute(
        self,
        *,
        sql: str,
        params: typing.Sequence[typing.Any] | None,
    ) -> int | Error:
        raise NotImplementedError

    @abc.abstractmethod
    def execute_many(
        self,
        *,
        sql: str,
        params: typing.Iterable[typing.Sequence[typing.Any]],
    ) -> None | Error:
        raise NotImplementedError

    @abc.abstractmethod
    def fetch_all(
        self,
        *,
        sql: str,
        params: typing.Sequence[typing.Any] | None,
    ) -> tuple[Row, ...] | Error:
        raise NotImplementedError
