import typing

from loguru import logger

from dbdelta import data
from dbdelta.service import snapshot

__all__ = (
    "assert_delta",
    "assert_deleted",
    "assert_empty",
    "assert_equals",
    "assert_inserted",
    "assert_state",
    "assert_unchanged",
    "data_set_assertion",
    "delta_assertion",
    "state_assertion",
)


def delta_assertion(
    old_data: data.DataSet,
    new_data: data.DataSet,
    /,
    *,
    message: str | None = None,
) -> None | data.Error:
    """Check the changes to a data source since its snapshot.

    The snapshot is folded against the current state of the source, then the expected old
    rows are folded against what was actually deleted and the expected new rows against
    what was actually inserted. The assertion passes when both of those folds cancel out.
    """
    error = _validate_delta_assertion(old_data, new_data)
    if error is not None:
        return error

    source = old_data.source
    reference = typing.cast(data.DataSet, source.snapshot)

    state_now = snapshot.execute_query(source, take_snapshot=False)
    if isinstance(state_now, data.Error):
        return state_now

    db_delta = data.Delta(reference, state_now)
    old_data_match = data.Delta(old_data, db_delta.deleted())
    new_data_match = data.Delta(new_data, db_delta.inserted())

    assertion = data.DeltaAssertion(
        old_data=old_data,
        new_data=new_data,
        old_data_match=old_data_match,
        new_data_match=new_data_match,
        message=message,
    )
    source.db.log_delta_assertion(assertion)
    source.set_dirty(not assertion.passed or not old_data.is_empty() or not new_data.is_empty())

    if not assertion.passed:
        logger.debug(f"Delta assertion on {source!r} failed.")
        return data.Error.assertion_failed(message, report=assertion, source=repr(source))

    return None


def state_assertion(expected: data.DataSet, /, *, message: str | None = None) -> None | data.Error:
    if expected is None:
        return data.Error.usage("Null argument for the expected data set.")

    source = expected.source
    source.set_dirty(True)

    actual = snapshot.execute_query(source, take_snapshot=False)
    if isinstance(actual, data.Error):
        return actual

    return data_set_assertion(expected, actual, message=message)


def data_set_assertion(
    expected: data.DataSet,
    actual: data.DataSet,
    /,
    *,
    message: str | None = None,
) -> None | data.Error:
    if expected is None:
        return data.Error.usage("Null argument for the expected data set.")

    if actual is None:
        return data.Error.usage("Null argument for the actual data set.")

    if expected.source is not actual.source:
        return data.Error.usage(
            "Data source mismatch between data sets.",
            expected=repr(expected.source),
            actual=repr(actual.source),
        )

    assertion = data.DataSetAssertion(
        expected=expected,
        delta=data.Delta(expected, actual),
        message=message,
    )
    expected.source.db.log_data_set_assertion(assertion)

    if not assertion.passed:
        logger.debug(f"Data set assertion on {expected.source!r} failed.")
        return data.Error.assertion_failed(message, report=assertion, source=repr(expected.source))

    return None


def assert_unchanged(*sources: data.DataSource, message: str | None = None) -> None | data.Error:
    if not sources:
        return data.Error.usage("No data sources specified.")

    for source in sources:
        if source is None:
            return data.Error.usage("Null data source specified.")

        empty = source.empty_data_set()
        result = delta_assertion(empty, empty, message=message)
        if isinstance(result, data.Error):
            return result

    return None


def assert_deleted(*data_sets: data.DataSet, message: str | None = None) -> None | data.Error:
    return _for_each(
        data_sets,
        lambda ds: delta_assertion(ds, ds.source.empty_data_set(), message=message),
    )


def assert_inserted(*data_sets: data.DataSet, message: str | None = None) -> None | data.Error:
    return _for_each(
        data_sets,
        lambda ds: delta_assertion(ds.source.empty_data_set(), ds, message=message),
    )


def assert_delta(
    old_data: data.DataSet,
    new_data: data.DataSet,
    /,
    *,
    message: str | None = None,
) -> None | data.Error:
    return delta_assertion(old_data, new_data, message=message)


def assert_state(*data_sets: data.DataSet, message: str | None = None) -> None | data.Error:
    return _for_each(data_sets, lambda ds: state_assertion(ds, message=message))


def assert_empty(*sources: data.DataSource, message: str | None = None) -> None | data.Error:
    if not sources:
        return data.Error.usage("No data sources specified.")

    for source in sources:
        if source is None:
            return data.Error.usage("Null data source specified.")

        result = state_assertion(source.empty_data_set(), message=message)
        if isinstance(result, data.Error):
            return result

    return None


def assert_equals(
    expected: data.DataSet,
    actual: data.DataSet,
    /,
    *,
    message: str | None = None,
) -> None | data.Error:
    return data_set_assertion(expected, actual, message=message)


def _for_each(
    data_sets: typing.Sequence[data.DataSet],
    fn: typing.Callable[[data.DataSet], None | data.Error],
    /,
) -> None | data.Error:
    if not data_sets:
        return data.Error.usage("No data sets specified.")

    if any(ds is None for ds in data_sets):
        return data.Error.usage("Null data set specified.")

    for ds in data_sets:
        result = fn(ds)
        if isinstance(result, data.Error):
            return result

    return None


def _validate_delta_assertion(old_data: data.DataSet, new_data: data.DataSet, /) -> None | data.Error:
    if old_data is None:
        return data.Error.usage("Null argument for the 'old' data set.")

    if new_data is None:
        return data.Error.usage("Null argument for the 'new' data set.")

    if old_data.source is not new_data.source:
        return data.Error.usage(
            "Data source mismatch between data sets.",
            old=repr(old_data.source),
            new=repr(new_data.source),
        )

    if old_data.source.snapshot is None:
        return data.Error.usage("Undefined snapshot for data source.", source=repr(old_data.source))

    return None
