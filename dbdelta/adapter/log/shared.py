import typing

from dbdelta import data

__all__ = (
    "data_set_assertion_record",
    "delta_assertion_record",
    "rows",
)


def rows(itr: typing.Iterable[data.Row], /) -> list[list[typing.Any]]:
    return [list(row) for row in itr]


def delta_assertion_record(assertion: data.DeltaAssertion, /) -> dict[str, typing.Any]:
    return {
        "source": assertion.source_name,
        "passed": assertion.passed,
        "message": assertion.message,
        "columns": list(assertion.old_data.source.column_names),
        **{view.name.lower(): rows(assertion.data(view)) for view in data.DeltaAssertionView},
    }


def data_set_assertion_record(assertion: data.DataSetAssertion, /) -> dict[str, typing.Any]:
    return {
        "source": assertion.source_name,
        "passed": assertion.passed,
        "message": assertion.message,
        "columns": list(assertion.expected.source.column_names),
        **{view.name.lower(): rows(assertion.data(view)) for view in data.DataSetAssertionView},
    }
