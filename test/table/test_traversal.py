import pytest

from gridtable import DataTable, IndexOutOfRange


@pytest.fixture
def table():
    return DataTable.from_rows(
        [
            ["a", "b", "c"],
            ["e", "f", "g"],
            ["f", "k", "x"],
            ["g", "h", "l"],
        ]
    )


def test_apply_column(table):
    """Concatenate all the values of the first column."""
    values = []
    table.apply_column(0, lambda x, v: values.append(v))
    assert "".join(values) == "aefg"


def test_apply_column_row_indexes(table):
    seen = []
    table.apply_column(2, lambda x, v: seen.append((x, v)))
    assert seen == [(0, "c"), (1, "g"), (2, "x"), (3, "l")]


def test_apply_column_stops_at_first_error(table):
    seen = []

    def fn(x, value):
        seen.append(value)
        if value == "e":
            raise RuntimeError("stop here")

    with pytest.raises(RuntimeError, match="stop here"):
        table.apply_column(0, fn)
    assert seen == ["a", "e"]


def test_apply_column_out_of_range(table):
    calls = []
    with pytest.raises(IndexOutOfRange):
        table.apply_column(3, lambda x, v: calls.append(v))
    assert calls == []


def test_apply_column_empty_table():
    calls = []
    DataTable(2).apply_column(1, lambda x, v: calls.append(v))
    assert calls == []


def test_apply_columns_unique_pairs():
    """Count the number of unique pairs in the first two columns."""
    table = DataTable.from_rows(
        [
            ["a", "b", "c"],
            ["e", "f", "g"],
            ["a", "b", "x"],
            ["e", "h", "l"],
        ]
    )
    pairs = set()
    table.apply_columns(lambda x, vs: pairs.add(",".join(vs)), 0, 1)
    assert len(pairs) == 3


def test_apply_columns_order(table):
    seen = []
    table.apply_columns(lambda x, vs: seen.append((x, vs)), 2, 0, 2)
    assert seen == [
        (0, ["c", "a", "c"]),
        (1, ["g", "e", "g"]),
        (2, ["x", "f", "x"]),
        (3, ["l", "g", "l"]),
    ]


def test_apply_columns_stops_at_first_error(table):
    seen = []

    def fn(x, values):
        seen.append(x)
        raise ValueError(f"failed at {x}")

    with pytest.raises(ValueError, match="failed at 0"):
        table.apply_columns(fn, 0, 1)
    assert seen == [0]


def test_apply_columns_out_of_range(table):
    calls = []
    with pytest.raises(IndexOutOfRange):
        table.apply_columns(lambda x, vs: calls.append(vs), 0, 5)
    assert calls == []


def test_apply_columns_values_are_copies(table):
    table.apply_columns(lambda x, vs: vs.clear(), 0, 1)
    assert table.get_row(0) == ["a", "b", "c"]
