import abc
import contextlib
import typing

from dbdelta.data.error import Error

__all__ = ("ConnectionProvider",)


class ConnectionProvider(abc.ABC):
    @contextlib.contextmanager
    @abc.abstractmethod
    def connect(self) -> typing.Generator[typing.Any | Error, None, None]:
        raise NotImplementedError
