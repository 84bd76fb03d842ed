import contextlib
import threading
import typing

from loguru import logger

__all__ = ("StatementPool",)


class StatementPool:
    """Cursors cached by sql text.

    DB-API drivers have no portable prepared statement, so a cursor dedicated to one
    statement is the closest equivalent. When reuse is off every statement gets a fresh
    cursor that is closed after use.
    """

    def __init__(self, *, connection: typing.Any, reuse: bool):
        self._connection: typing.Final[typing.Any] = connection
        self._reuse: typing.Final[bool] = reuse
        self._cursors: typing.Final[dict[str, typing.Any]] = {}
        self._lock: typing.Final[threading.Lock] = threading.Lock()

    @property
    def size(self) -> int:
        with self._lock:
            return len(self._cursors)

    @contextlib.contextmanager
    def cursor(self, /, sql: str) -> typing.Generator[typing.Any, None, None]:
        if not self._reuse:
            cur = self._connection.cursor()
            try:
                yield cur
            finally:
                cur.close()
            return

        with self._lock:
            cur = self._cursors.get(sql)
            if cur is None:
                logger.debug(f"Caching a cursor for {sql!r}.")
                cur = self._connection.cursor()
                self._cursors[sql] = cur

        yield cur

    def close(self) -> None:
        with self._lock:
            for cur in self._cursors.values():
                cur.close()
            self._cursors.clear()
