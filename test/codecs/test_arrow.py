import pyarrow as pa
import pytest

from gridtable import ColumnCountMismatch, DataTable, EmptySource
from gridtable.codecs.arrow import from_arrow, to_arrow

TEST_ROWS = [
    ["Flamingo", "2"],
    ["Horse", "4"],
    ["Centipede", "100"],
]


@pytest.fixture
def table():
    return DataTable.from_rows(TEST_ROWS)


def test_to_arrow(table):
    arrow_table = to_arrow(table)
    assert arrow_table.column_names == ["f0", "f1"]
    assert arrow_table.schema.types == [pa.string(), pa.string()]
    assert arrow_table.column(0).to_pylist() == ["Flamingo", "Horse", "Centipede"]
    assert arrow_table.column(1).to_pylist() == ["2", "4", "100"]


def test_to_arrow_names(table):
    arrow_table = to_arrow(table, names=["animals", "n_legs"])
    assert arrow_table.column_names == ["animals", "n_legs"]
    assert arrow_table.num_rows == 3


def test_to_arrow_wrong_names(table):
    with pytest.raises(ColumnCountMismatch):
        to_arrow(table, names=["animals"])


def test_to_arrow_empty():
    arrow_table = to_arrow(DataTable(3))
    assert arrow_table.num_rows == 0
    assert arrow_table.num_columns == 3


def test_from_arrow_types():
    data = pa.table(
        {
            "animals": pa.array(["Flamingo", None]),
            "n_legs": pa.array([2, 4]),
            "flies": pa.array([True, False]),
        }
    )
    assert from_arrow(data).to_rows() == [
        ["Flamingo", "2", "true"],
        ["", "4", "false"],
    ]


def test_from_arrow_record_batch(table):
    batch = to_arrow(table).to_batches()[0]
    assert from_arrow(batch) == table


def test_from_arrow_empty():
    decoded = from_arrow(pa.table({"a": pa.array([], type=pa.string())}))
    assert decoded.row_count == 0
    assert decoded.col_count == 1


def test_from_arrow_no_columns():
    with pytest.raises(EmptySource):
        from_arrow(pa.table({}))


def test_round_trip(table):
    assert from_arrow(to_arrow(table)) == table
    assert from_arrow(to_arrow(DataTable(2))) == DataTable(2)
