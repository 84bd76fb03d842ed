import dataclasses
import enum
import typing

from dbdelta.data.data_set import DataSet
from dbdelta.data.delta import Delta
from dbdelta.data.error import Error
from dbdelta.data.row import Row

__all__ = ("DeltaAssertion", "DeltaAssertionView")


# noinspection PyArgumentList
class DeltaAssertionView(enum.Enum):
    OLD_DATA_EXPECTED = enum.auto()
    NEW_DATA_EXPECTED = enum.auto()
    OLD_DATA_ERRORS_EXPECTED = enum.auto()
    OLD_DATA_ERRORS_ACTUAL = enum.auto()
    NEW_DATA_ERRORS_EXPECTED = enum.auto()
    NEW_DATA_ERRORS_ACTUAL = enum.auto()


@dataclasses.dataclass(frozen=True, kw_only=True)
class DeltaAssertion:
    """Outcome of checking the changes to a data source since its snapshot.

    ``old_data_match`` folds the expected old rows against the rows actually deleted, and
    ``new_data_match`` the expected new rows against the rows actually inserted. Their
    residues are the mismatches in both directions.
    """

    old_data: DataSet
    new_data: DataSet
    old_data_match: Delta
    new_data_match: Delta
    message: str | None = None

    @property
    def passed(self) -> bool:
        return self.old_data_match.is_empty() and self.new_data_match.is_empty()

    @property
    def source_name(self) -> str:
        return repr(self.old_data.source)

    def data(self, /, view: DeltaAssertionView) -> typing.Iterator[Row]:
        match view:
            case DeltaAssertionView.OLD_DATA_EXPECTED:
                return iter(self.old_data)
            case DeltaAssertionView.NEW_DATA_EXPECTED:
                return iter(self.new_data)
            case DeltaAssertionView.OLD_DATA_ERRORS_EXPECTED:
                return self.old_data_match.deleted()
            case DeltaAssertionView.OLD_DATA_ERRORS_ACTUAL:
                return self.old_data_match.inserted()
            case DeltaAssertionView.NEW_DATA_ERRORS_EXPECTED:
                return self.new_data_match.deleted()
            case DeltaAssertionView.NEW_DATA_ERRORS_ACTUAL:
                return self.new_data_match.inserted()
            case _:
                raise Error.internal(f"Unexpected view, {view!r}.")

    def old_errors(self) -> typing.Iterator[Row]:
        """Expected deletions that did not happen, followed by deletions that were not expected."""
        yield from self.data(DeltaAssertionView.OLD_DATA_ERRORS_EXPECTED)
        yield from self.data(DeltaAssertionView.OLD_DATA_ERRORS_ACTUAL)

    def new_errors(self) -> typing.Iterator[Row]:
        """Expected insertions that did not happen, followed by insertions that were not expected."""
        yield from self.data(DeltaAssertionView.NEW_DATA_ERRORS_EXPECTED)
        yield from self.data(DeltaAssertionView.NEW_DATA_ERRORS_ACTUAL)
