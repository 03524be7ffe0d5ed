import pytest

from gridtable import (
    DataTable,
    IndexOutOfRange,
    InvalidArgument,
    LastColumnRemoval,
    TableView,
)

TEST_ROWS = [
    ["a", "b", "c"],
    ["e", "f", "g"],
    ["f", "k", "x"],
    ["g", "h", "l"],
]


@pytest.fixture
def table():
    return DataTable.from_rows(TEST_ROWS)


def test_slice(table):
    view = table.slice(1, 2)
    assert isinstance(view, TableView)
    assert view.parent is table
    assert view.start == 1
    assert view.row_count == 2
    assert view.col_count == 3
    assert view.to_rows() == [["e", "f", "g"], ["f", "k", "x"]]


def test_slice_truncated(table):
    view = table.slice(0, 10)
    assert view.row_count == 4
    assert view.to_rows() == TEST_ROWS

    view = table.slice(2, 2)
    assert view.get_row(0)[0] == "f"
    assert view.get_row(1)[0] == "g"


def test_slice_empty(table):
    view = table.slice(1, 0)
    assert view.row_count == 0
    assert view.col_count == 3


def test_slice_does_not_change_parent(table):
    table.slice(1, 2)
    table.slice(0, 100)
    assert table.to_rows() == TEST_ROWS


@pytest.mark.parametrize("start", [-1, 4, 10])
def test_slice_start_out_of_range(table, start):
    with pytest.raises(IndexOutOfRange):
        table.slice(start, 1)


def test_slice_negative_count(table):
    with pytest.raises(InvalidArgument):
        table.slice(0, -1)


def test_slice_of_slice(table):
    view = table.slice(1, 3).slice(1, 5)
    assert view.parent is table
    assert view.start == 2
    assert view.to_rows() == [["f", "k", "x"], ["g", "h", "l"]]


def test_view_index_bounds(table):
    view = table.slice(1, 2)
    with pytest.raises(IndexOutOfRange):
        view.get_row(2)
    with pytest.raises(IndexOutOfRange):
        view.get_row(-1)


def test_parent_row_removal_is_visible(table):
    view = table.slice(1, 2)
    table.remove_row(0)
    # The window keeps its position, so rows shift into it.
    assert view.to_rows() == [["f", "k", "x"], ["g", "h", "l"]]


def test_parent_shrinking_truncates_view(table):
    view = table.slice(2, 2)
    table.remove_row(3)
    assert view.row_count == 1
    table.remove_row(2)
    assert view.row_count == 0
    assert view.to_rows() == []


def test_parent_column_removal_is_visible(table):
    view = table.slice(0, 2)
    table.remove_column(0)
    assert view.col_count == 2
    assert view.to_rows() == [["b", "c"], ["f", "g"]]


def test_parent_append_is_not_visible(table):
    view = table.slice(2, 2)
    table.append_row(["z", "z", "z"])
    assert view.row_count == 2
    assert view.to_rows() == [["f", "k", "x"], ["g", "h", "l"]]


def test_view_append_extends_parent(table):
    view = table.slice(1, 2)
    view.append_row(["x", "y", "z"])

    assert view.row_count == 3
    assert view.to_rows() == [["e", "f", "g"], ["f", "k", "x"], ["x", "y", "z"]]
    # The row is inserted after the window, no parent row is overwritten.
    assert table.row_count == 5
    assert table.to_rows() == [
        ["a", "b", "c"],
        ["e", "f", "g"],
        ["f", "k", "x"],
        ["x", "y", "z"],
        ["g", "h", "l"],
    ]


def test_empty_view_append(table):
    view = table.slice(1, 0)
    view.append_row(["x", "y", "z"])
    assert view.row_count == 1
    assert view.to_rows() == [["x", "y", "z"]]
    assert table.get_row(1) == ["x", "y", "z"]
    assert table.get_row(2) == ["e", "f", "g"]


def test_view_append_wrong_size(table):
    view = table.slice(0, 2)
    with pytest.raises(ValueError):
        view.append_row(["x"])
    assert view.row_count == 2
    assert table.to_rows() == TEST_ROWS


def test_view_append_past_parent_end(table):
    view = table.slice(3, 1)
    table.remove_row(0)
    table.remove_row(0)
    with pytest.raises(IndexOutOfRange):
        view.append_row(["x", "y", "z"])
    assert table.row_count == 2


def test_view_row_removal_writes_through(table):
    view = table.slice(1, 2)
    view.remove_row(0)
    assert view.to_rows() == [["f", "k", "x"]]
    assert table.to_rows() == [["a", "b", "c"], ["f", "k", "x"], ["g", "h", "l"]]


def test_view_column_removal_writes_through(table):
    view = table.slice(1, 1)
    view.remove_column(2)
    assert view.to_rows() == [["e", "f"]]
    assert table.col_count == 2
    assert table.to_rows() == [["a", "b"], ["e", "f"], ["f", "k"], ["g", "h"]]


def test_view_last_column_removal():
    table = DataTable.from_rows([["a"], ["b"]])
    view = table.slice(0, 1)
    with pytest.raises(LastColumnRemoval):
        view.remove_column(0)
    assert table.col_count == 1


def test_view_merge_writes_through(table):
    view = table.slice(0, 1)
    view.merge(DataTable.from_rows([["1", "2"]]), {2: 0, 0: 1})
    assert view.to_rows() == [["a", "b", "c"], ["2", "", "1"]]
    assert table.get_row(1) == ["2", "", "1"]
    assert table.row_count == 5


def test_sibling_views_share_rows(table):
    first = table.slice(0, 2)
    second = table.slice(1, 2)
    first.remove_row(1)
    assert second.to_rows() == [["f", "k", "x"], ["g", "h", "l"]]


def test_detach(table):
    view = table.slice(1, 2)
    copy = view.detach()
    assert isinstance(copy, DataTable)
    assert copy == view

    copy.append_row(["x", "y", "z"])
    table.remove_row(1)
    assert copy.to_rows() == [["e", "f", "g"], ["f", "k", "x"], ["x", "y", "z"]]
    assert table.row_count == 3


def test_view_equals_table(table):
    assert table.slice(0, 4) == table
    assert table.slice(1, 2) == DataTable.from_rows(TEST_ROWS[1:3])


def test_view_project_is_independent(table):
    projected = table.slice(1, 2).project(0)
    table.remove_row(1)
    assert projected.to_rows() == [["e"], ["f"]]


def test_repr(table):
    assert repr(table.slice(1, 2)) == "TableView(rows=2, cols=3, start=1)"
