from __future__ import annotations

import typing

from dbdelta.data.row import Row

__all__ = ("RowMultiset",)


class RowMultiset:
    """Insertion-ordered mapping of rows to a signed count.

    A row whose count drops to zero is removed, so the mapping only ever holds the rows
    that are actually unmatched.
    """

    __slots__ = ("_counts",)

    def __init__(self) -> None:
        self._counts: typing.Final[dict[Row, int]] = {}

    @staticmethod
    def from_rows(rows: typing.Iterable[Row], /) -> RowMultiset:
        ms = RowMultiset()
        for row in rows:
            ms.add(row)
        return ms

    def update(self, row: Row, delta: int, /) -> None:
        n = self._counts.get(row, 0) + delta
        if n == 0:
            self._counts.pop(row, None)
        else:
            self._counts[row] = n

    def add(self, row: Row, /) -> None:
        self.update(row, 1)

    def remove(self, row: Row, /) -> bool:
        if self._counts.get(row, 0) <= 0:
            return False

        self.update(row, -1)
        return True

    def count(self, row: Row, /) -> int:
        return self._counts.get(row, 0)

    def diff(self, other: RowMultiset, /) -> RowMultiset:
        """Rows with more positive occurrences in this multiset than in other."""
        result = RowMultiset()
        for row, n in self._counts.items():
            d = n - other.count(row)
            if d > 0:
                result._counts[row] = d
        return result

    def is_empty(self) -> bool:
        return not self._counts

    def items(self) -> tuple[tuple[Row, int], ...]:
        return tuple(self._counts.items())

    def size(self) -> int:
        return sum(n for n in self._counts.values() if n > 0)

    def __contains__(self, row: object) -> bool:
        return row in self._counts

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RowMultiset):
            return NotImplemented
        return self._counts == other._counts

    def __iter__(self) -> typing.Iterator[Row]:
        for row, n in self.items():
            for _ in range(n):
                yield row

    def __len__(self) -> int:
        return len(self._counts)

    def __repr__(self) -> str:
        return f"RowMultiset({self._counts!r})"
