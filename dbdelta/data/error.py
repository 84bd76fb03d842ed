from __future__ import annotations

import enum
import typing

__all__ = (
    "DbAssertionError",
    "Error",
    "ErrorKind",
    "ExecutionError",
    "InternalError",
    "UsageError",
)


class ErrorKind(enum.Enum):
    USAGE = "usage"
    EXECUTION = "execution"
    ASSERTION_FAILED = "assertion-failed"
    INTERNAL = "internal"

    def __repr__(self) -> str:
        return f"ErrorKind.{self.name}"

    def __str__(self) -> str:
        return self.value


class Error(Exception):
    """Base class for errors occurring in the dbdelta codebase

    Errors are returned as values by the service layer and raised by the public api.
    """

    kind: typing.ClassVar[ErrorKind] = ErrorKind.INTERNAL

    def __init__(
        self,
        message: str,
        /,
        *,
        cause: BaseException | None = None,
        context: dict[str, typing.Any] | None = None,
    ):
        super().__init__(message)

        self.message: typing.Final[str] = message
        self.cause: typing.Final[BaseException | None] = cause
        self.context: typing.Final[dict[str, typing.Any]] = dict(context or {})

        if cause is not None:
            self.__cause__ = cause

    @staticmethod
    def usage(message: str, /, **context: typing.Any) -> UsageError:
        return UsageError(message, context=context)

    @staticmethod
    def execution(message: str, /, *, cause: BaseException | None = None, **context: typing.Any) -> ExecutionError:
        return ExecutionError(message, cause=cause, context=context)

    @staticmethod
    def assertion_failed(message: str | None, /, *, report: typing.Any = None, **context: typing.Any) -> DbAssertionError:
        return DbAssertionError(message or "Assertion failed.", report=report, context=context)

    @staticmethod
    def internal(message: str = "Internal error!", /, **context: typing.Any) -> InternalError:
        return InternalError(message, context=context)

    def __str__(self) -> str:
        if self.context:
            ctx = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} [{ctx}]"
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(kind={self.kind!r}, message={self.message!r})"


class UsageError(Error):
    """The api was misused, e.g. a missing snapshot or data sets from different sources."""

    kind = ErrorKind.USAGE


class ExecutionError(Error):
    """The database failed while executing a statement."""

    kind = ErrorKind.EXECUTION


class DbAssertionError(Error, AssertionError):
    """A database assertion did not hold."""

    kind = ErrorKind.ASSERTION_FAILED

    def __init__(
        self,
        message: str,
        /,
        *,
        report: typing.Any = None,
        context: dict[str, typing.Any] | None = None,
    ):
        super().__init__(message, context=context)

        self.report: typing.Final[typing.Any] = report


class InternalError(Error):
    """An invariant of the delta engine was violated."""

    kind = ErrorKind.INTERNAL
