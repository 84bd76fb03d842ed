from __future__ import annotations

import typing

from dbdelta.data.column import Column
from dbdelta.data.data_set import DataSet
from dbdelta.data.db import Db
from dbdelta.data.error import Error

__all__ = ("DataSource", "Query", "Table", "table_query_sql")


class DataSource:
    """A table or an arbitrary query, the unit snapshots and assertions attach to."""

    def __init__(
        self,
        *,
        db: Db,
        sql: str,
        args: typing.Sequence[typing.Any],
        columns: typing.Sequence[Column],
    ):
        self._db: typing.Final[Db] = db
        self._sql: typing.Final[str] = sql
        self._args: typing.Final[tuple[typing.Any, ...]] = tuple(args)
        self._columns: typing.Final[tuple[Column, ...]] = tuple(columns)
        self._column_names: typing.Final[tuple[str, ...]] = tuple(
            _normalize_column_name(col.name, case_sensitive=db.config.case_sensitive_column_names)
            for col in columns
        )
        self._snapshot: DataSet | None = None
        self._empty: DataSet | None = None
        self._dirty = True

    @property
    def db(self) -> Db:
        return self._db

    @property
    def sql(self) -> str:
        return self._sql

    @property
    def args(self) -> tuple[typing.Any, ...]:
        return self._args

    @property
    def columns(self) -> tuple[Column, ...]:
        return self._columns

    @property
    def column_names(self) -> tuple[str, ...]:
        return self._column_names

    @property
    def column_count(self) -> int:
        return len(self._columns)

    def column_name(self, /, index: int) -> str:
        if index < 0 or index >= len(self._column_names):
            raise Error.usage(f"Invalid column index: {index}")
        return self._column_names[index]

    def sql_column_name(self, /, name: str) -> str:
        """The column name as it must appear in generated sql."""
        if self._db.config.case_sensitive_column_names and name != name.upper():
            return f'"{name}"'
        return name

    @property
    def snapshot(self) -> DataSet | None:
        return self._snapshot

    def set_snapshot(self, /, data_set: DataSet) -> None:
        if data_set.source is not self:
            raise Error.usage("Data set does not belong to this data source.")
        self._snapshot = data_set.as_read_only()

    @property
    def dirty(self) -> bool:
        return self._dirty

    def set_dirty(self, /, dirty: bool) -> None:
        self._dirty = dirty

    def empty_data_set(self) -> DataSet:
        if self._empty is None:
            self._empty = DataSet(source=self, read_only=True)
        return self._empty


class Table(DataSource):
    def __init__(
        self,
        *,
        db: Db,
        name: str,
        columns: typing.Sequence[Column],
        key_columns: typing.Sequence[str],
        select_columns: typing.Sequence[str] | None = None,
    ):
        super().__init__(
            db=db,
            sql=table_query_sql(name=name, columns=select_columns),
            args=(),
            columns=columns,
        )

        self._name: typing.Final[str] = name
        self._key_columns: typing.Final[tuple[str, ...]] = tuple(
            _normalize_column_name(col, case_sensitive=db.config.case_sensitive_column_names)
            for col in key_columns
        )

    @property
    def name(self) -> str:
        return self._name

    @property
    def key_columns(self) -> tuple[str, ...]:
        return self._key_columns

    def __repr__(self) -> str:
        return f"Table(name={self._name!r})"


class Query(DataSource):
    def __repr__(self) -> str:
        return f"Query(sql={self.sql!r})"


def table_query_sql(*, name: str, columns: typing.Sequence[str] | None) -> str:
    if columns:
        return f"SELECT {', '.join(columns)} FROM {name}"
    return f"SELECT * FROM {name}"


def _normalize_column_name(name: str, /, *, case_sensitive: bool) -> str:
    return name if case_sensitive else name.upper()
