from __future__ import annotations

import typing

from dbdelta.data.error import Error
from dbdelta.data.row import Row

if typing.TYPE_CHECKING:
    from dbdelta.data.data_source import DataSource

__all__ = ("DataSet",)


class DataSet:
    """Ordered list of rows bound to a data source.

    Data sets are used both for expected data built by test code and for query results.
    Query results stored as snapshots are read-only.
    """

    def __init__(
        self,
        *,
        source: DataSource,
        rows: typing.Iterable[Row] = (),
        read_only: bool = False,
    ):
        self._source: typing.Final[DataSource] = source
        self._rows: typing.Final[list[Row]] = list(rows)
        self._read_only: typing.Final[bool] = read_only

    @staticmethod
    def empty(source: DataSource, /) -> DataSet:
        return source.empty_data_set()

    @property
    def source(self) -> DataSource:
        return self._source

    @property
    def read_only(self) -> bool:
        return self._read_only

    def row(self, *values: typing.Any) -> DataSet:
        self._check_not_read_only()
        column_count = self._source.column_count
        if len(values) != column_count:
            raise Error.usage(f"{column_count} columns expected, not {len(values)}.")
        self._rows.append(Row(values))
        return self

    def rows(self, rows: typing.Iterable[typing.Sequence[typing.Any]], /) -> DataSet:
        for values in rows:
            self.row(*values)
        return self

    def add(self, other: DataSet, /) -> DataSet:
        self._check_not_read_only()
        if other.source is not self._source:
            raise Error.usage("Data source mismatch between data sets.")
        self._rows.extend(other._rows)
        return self

    def subset(self, start: int, end: int | None = None, /) -> DataSet:
        if end is None:
            end = len(self._rows)

        if start < 0 or end > len(self._rows) or start > end:
            raise Error.usage(f"Invalid range [{start}, {end}) for a data set with {len(self._rows)} rows.")

        return DataSet(source=self._source, rows=self._rows[start:end])

    def as_read_only(self) -> DataSet:
        if self._read_only:
            return self
        return DataSet(source=self._source, rows=self._rows, read_only=True)

    def same_data_as(self, other: DataSet, /) -> bool:
        return self._rows == other._rows

    def is_empty(self) -> bool:
        return not self._rows

    def size(self) -> int:
        return len(self._rows)

    def __iter__(self) -> typing.Iterator[Row]:
        return iter(tuple(self._rows))

    def __len__(self) -> int:
        return len(self._rows)

    def __repr__(self) -> str:
        return f"DataSet(source={self._source!r}, rows={self._rows!r}, read_only={self._read_only})"

    def _check_not_read_only(self) -> None:
        if self._read_only:
            raise Error.usage("Data set is read-only.")
