import dataclasses
import enum
import typing

from dbdelta.data.data_set import DataSet
from dbdelta.data.delta import Delta
from dbdelta.data.error import Error
from dbdelta.data.row import Row

__all__ = ("DataSetAssertion", "DataSetAssertionView")


# noinspection PyArgumentList
class DataSetAssertionView(enum.Enum):
    EXPECTED_DATA = enum.auto()
    ERRORS_EXPECTED = enum.auto()
    ERRORS_ACTUAL = enum.auto()


@dataclasses.dataclass(frozen=True, kw_only=True)
class DataSetAssertion:
    expected: DataSet
    delta: Delta
    message: str | None = None

    @property
    def passed(self) -> bool:
        return self.delta.is_empty()

    @property
    def source_name(self) -> str:
        return repr(self.expected.source)

    def data(self, /, view: DataSetAssertionView) -> typing.Iterator[Row]:
        match view:
            case DataSetAssertionView.EXPECTED_DATA:
                return iter(self.expected)
            case DataSetAssertionView.ERRORS_EXPECTED:
                return self.delta.deleted()
            case DataSetAssertionView.ERRORS_ACTUAL:
                return self.delta.inserted()
            case _:
                raise Error.internal(f"Unexpected view, {view!r}.")
