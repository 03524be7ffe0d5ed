import pytest

from gridtable import DataTable
from gridtable.utils.inspect import get_qualname
from gridtable.utils.tabulate import format_value, tabulate


def first_column(row):
    return row[0]


class KeyExtractor:
    def second(self, row):
        return row[1]


@pytest.mark.parametrize(
    "obj,expected",
    [
        (first_column, "test_utils.first_column"),
        (KeyExtractor, "test_utils.KeyExtractor"),
        (KeyExtractor().second, "test_utils.KeyExtractor.second"),
        (DataTable(1).get_row, "gridtable.table.base.DataTable.get_row"),
        (len, "builtins.len"),
        (pytest, "pytest"),
    ],
)
def test_get_qualname(obj, expected):
    assert get_qualname(obj) == expected


def test_tabulate():
    table = DataTable.from_rows([["Laptop", "8"], ["TV", "12"]])
    assert tabulate(table) == "\n".join(
        [
            "0      | 1",
            "------ | --",
            "Laptop | 8",
            "TV     | 12",
        ]
    )


def test_tabulate_empty():
    assert tabulate(DataTable(2)) == "0 | 1\n- | -"


def test_tabulate_truncates_rows():
    table = DataTable.from_rows([[str(i)] for i in range(30)])
    text = tabulate(table, max_rows=5)
    assert len(text.splitlines()) == 2 + 5 + 1
    assert text.endswith("... and 25 more rows")


@pytest.mark.parametrize(
    "value,expected",
    [
        ("short", "short"),
        ("x" * 40, "x" * 27 + "..."),
        ("two\nlines", "two\\nlines"),
    ],
)
def test_format_value(value, expected):
    assert format_value(value) == expected


def test_tabulate_negative_max_rows():
    table = DataTable.from_rows([["a"], ["b"]])
    assert tabulate(table, max_rows=-3) == "0\n-\n... and 2 more rows"
