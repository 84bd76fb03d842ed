from __future__ import annotations

import typing

from dbdelta.data.row import Row
from dbdelta.data.row_multiset import RowMultiset

__all__ = ("Delta",)


class Delta:
    """Multiset difference between a reference and an updated sequence of rows.

    Both sequences are folded into a single signed count per row: a negative count is a row
    found in the reference more often than in the update (deleted), a positive count the
    opposite (inserted). Rows seen equally often on both sides leave no entry behind.
    Rows carry no identity, so duplicates are matched by count.
    """

    __slots__ = ("_diff",)

    def __init__(self, reference: typing.Iterable[Row], updated: typing.Iterable[Row], /):
        self._diff: typing.Final[RowMultiset] = RowMultiset()

        a = iter(reference)
        b = iter(updated)
        # lockstep so equal rows at similar positions cancel early
        for ref_row in a:
            self._diff.update(ref_row, -1)
            upd_row = next(b, _END)
            if upd_row is _END:
                for row in a:
                    self._diff.update(row, -1)
                return
            self._diff.update(typing.cast(Row, upd_row), 1)

        for row in b:
            self._diff.update(row, 1)

    def is_empty(self) -> bool:
        return self._diff.is_empty()

    def size(self) -> int:
        return len(self._diff)

    def deleted(self) -> typing.Iterator[Row]:
        return _expand(self._diff.items(), sign=-1)

    def inserted(self) -> typing.Iterator[Row]:
        return _expand(self._diff.items(), sign=1)

    def __repr__(self) -> str:
        return f"Delta({self._diff!r})"


_END: typing.Final = object()


def _expand(entries: tuple[tuple[Row, int], ...], /, *, sign: typing.Literal[-1, 1]) -> typing.Iterator[Row]:
    for row, n in entries:
        for _ in range(max(n * sign, 0)):
            yield row
