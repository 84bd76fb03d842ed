import typing

from dbdelta import data

__all__ = ("NullLog",)


class NullLog(data.Log):
    def data_set(self, *, data_set: data.DataSet) -> None:
        pass

    def data_set_assertion(self, *, assertion: data.DataSetAssertion) -> None:
        pass

    def delta_assertion(self, *, assertion: data.DeltaAssertion) -> None:
        pass

    def query(self, *, data_set: data.DataSet) -> None:
        pass

    def setup(self, *, sql: str, params: typing.Sequence[typing.Any] | None) -> None:
        pass

    def snapshot(self, *, data_set: data.DataSet) -> None:
        pass
