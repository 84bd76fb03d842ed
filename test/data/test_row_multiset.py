from dbdelta import data


def _row(*values):
    return data.Row(values)


def test_update_removes_rows_with_a_zero_count():
    ms = data.RowMultiset()
    ms.update(_row(1), 2)
    ms.update(_row(1), -2)

    assert ms.is_empty()
    assert _row(1) not in ms
    assert len(ms) == 0


def test_counts_can_be_negative():
    ms = data.RowMultiset()
    ms.update(_row(1), -3)

    assert ms.count(_row(1)) == -3
    assert _row(1) in ms
    assert ms.size() == 0
    assert list(ms) == []


def test_from_rows_counts_duplicates():
    ms = data.RowMultiset.from_rows([_row("a"), _row("b"), _row("a")])

    assert ms.count(_row("a")) == 2
    assert ms.count(_row("b")) == 1
    assert ms.count(_row("c")) == 0
    assert len(ms) == 2
    assert ms.size() == 3


def test_iteration_follows_first_insertion_order():
    ms = data.RowMultiset.from_rows([_row(2), _row(1), _row(2), _row(3)])

    assert list(ms) == [_row(2), _row(2), _row(1), _row(3)]
    assert ms.items() == ((_row(2), 2), (_row(1), 1), (_row(3), 1))


def test_remove():
    ms = data.RowMultiset.from_rows([_row(1), _row(1)])

    assert ms.remove(_row(1))
    assert ms.count(_row(1)) == 1
    assert ms.remove(_row(1))
    assert not ms.remove(_row(1))
    assert ms.is_empty()


def test_diff_is_the_positive_residue():
    a = data.RowMultiset.from_rows([_row(1), _row(1), _row(2), _row(3)])
    b = data.RowMultiset.from_rows([_row(1), _row(3), _row(3), _row(4)])

    assert list(a.diff(b)) == [_row(1), _row(2)]
    assert list(b.diff(a)) == [_row(3), _row(4)]


def test_equality_ignores_order():
    a = data.RowMultiset.from_rows([_row(1), _row(2)])
    b = data.RowMultiset.from_rows([_row(2), _row(1)])

    assert a == b
    assert a != data.RowMultiset.from_rows([_row(1)])
