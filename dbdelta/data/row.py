from __future__ import annotations

import decimal
import math
import typing

__all__ = ("Row", "Value")


Value: typing.TypeAlias = typing.Any

# tags keep frozen mappings and sets apart from plain tuples and from each other
_NAN: typing.Final = object()
_MAPPING: typing.Final = object()
_SET: typing.Final = object()


def _freeze(value: Value, /) -> typing.Hashable:
    if isinstance(value, float) and math.isnan(value):
        return _NAN

    if isinstance(value, decimal.Decimal) and value.is_nan():
        return _NAN

    if isinstance(value, (bytearray, memoryview)):
        return bytes(value)

    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)

    if isinstance(value, typing.Mapping):
        return _MAPPING, frozenset((k, _freeze(v)) for k, v in value.items())

    if isinstance(value, (set, frozenset)):
        return _SET, frozenset(_freeze(v) for v in value)

    return typing.cast(typing.Hashable, value)


class Row:
    """One tuple of column values.

    Rows are compared by value and are used heavily as dict keys, so the hash is
    computed once, on first use.
    """

    __slots__ = ("_values", "_key", "_hash")

    def __init__(self, values: typing.Iterable[Value], /):
        self._values: typing.Final[tuple[Value, ...]] = tuple(values)
        self._key: typing.Final[tuple[typing.Hashable, ...]] = tuple(_freeze(v) for v in self._values)
        self._hash: int | None = None

    @property
    def values(self) -> tuple[Value, ...]:
        return self._values

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True

        if not isinstance(other, Row):
            return NotImplemented

        return self._key == other._key

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash(self._key)
        return self._hash

    def __getitem__(self, index: int) -> Value:
        return self._values[index]

    def __iter__(self) -> typing.Iterator[Value]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Row({list(self._values)!r})"
